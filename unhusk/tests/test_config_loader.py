"""Tests for the YAML configuration loader."""

import pytest
from unhusk.core import ConfigLoadError, FailurePolicy, load_config, load_default_config
from unhusk.core.config_loader import load_config_from_dict, validate_config_file


def test_default_config_targets_hooks_path():
    """Packaged defaults hold the hardcoded key and a fatal policy."""
    config = load_default_config()

    assert config.key == "core.hooksPath"
    assert config.git_executable == "git"
    assert config.on_failure == FailurePolicy.FATAL
    assert config.is_fatal


def test_load_config_file(tmp_path):
    config_file = tmp_path / "unhusk.yaml"
    config_file.write_text("key: core.hooksPath\non_failure: advisory\ngit_executable: /usr/bin/git\n")

    config = load_config(config_file)

    assert config.on_failure == FailurePolicy.ADVISORY
    assert not config.is_fatal
    assert config.git_executable == "/usr/bin/git"


def test_empty_file_uses_defaults(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    config = load_config(config_file)

    assert config.key == "core.hooksPath"
    assert config.is_fatal


def test_missing_file(tmp_path):
    with pytest.raises(ConfigLoadError, match="não encontrado"):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("key: [unclosed\n")

    with pytest.raises(ConfigLoadError, match="YAML"):
        load_config(config_file)


@pytest.mark.parametrize(
    "data, message",
    [
        (["not", "a", "dict"], "nível raiz"),
        ({"keys": "core.hooksPath"}, "desconhecidos"),
        ({"key": "nodot"}, "inválida"),
        ({"key": 42}, "string"),
        ({"git_executable": ""}, "git_executable"),
        ({"on_failure": "ignore"}, "on_failure"),
    ],
)
def test_invalid_config_values(data, message):
    with pytest.raises(ConfigLoadError, match=message):
        load_config_from_dict(data)


def test_validate_config_file_reports_warnings(tmp_path):
    config_file = tmp_path / "unhusk.yaml"
    config_file.write_text("key: core.fsmonitor\non_failure: advisory\n")

    report = validate_config_file(config_file)

    assert report["valid"]
    assert report["errors"] == []
    assert len(report["warnings"]) == 2


def test_validate_config_file_reports_errors(tmp_path):
    config_file = tmp_path / "unhusk.yaml"
    config_file.write_text("on_failure: sometimes\n")

    report = validate_config_file(config_file)

    assert not report["valid"]
    assert len(report["errors"]) == 1
