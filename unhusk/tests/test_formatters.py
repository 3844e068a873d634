"""Tests for the output formatters."""

import json

import pytest
from unhusk.core import FailureReason, FormatterFactory, Outcome, UnsetResult
from unhusk.core.formatters import Colors


@pytest.fixture
def removed_result():
    return UnsetResult(key="core.hooksPath", outcome=Outcome.REMOVED, returncode=0, working_dir="/repo")


@pytest.fixture
def failed_result():
    return UnsetResult(
        key="core.hooksPath",
        outcome=Outcome.FAILED,
        reason=FailureReason.NOT_A_REPOSITORY,
        returncode=128,
        stderr="fatal: not in a git directory",
        working_dir="/tmp",
    )


def test_console_failure_names_manual_command(failed_result):
    formatter = FormatterFactory.create("console", use_colors=False)

    output = formatter.format_result(failed_result)

    assert "git config --unset core.hooksPath" in output
    assert "fatal: not in a git directory" in output
    assert FailureReason.NOT_A_REPOSITORY.description in output


def test_console_success_has_no_remediation(removed_result):
    formatter = FormatterFactory.create("console", use_colors=False)

    output = formatter.format_result(removed_result)

    assert "removido" in output
    assert "git config --unset" not in output


def test_console_colors_can_be_stripped(failed_result):
    formatter = FormatterFactory.create("console", use_colors=True, verbose=True)

    output = formatter.format_result(failed_result)

    assert Colors.RED in output
    plain = Colors.strip_colors(output)
    assert "git config --unset core.hooksPath" in plain
    assert "exit 128" in plain


def test_compact_is_single_line(failed_result, removed_result):
    formatter = FormatterFactory.create("compact", use_colors=False)

    assert formatter.format_result(removed_result) == "[unhusk] core.hooksPath: removed"
    failed = formatter.format_result(failed_result)
    assert "\n" not in failed
    assert "not_a_repository" in failed


def test_json_includes_remediation_on_failure(failed_result, removed_result):
    formatter = FormatterFactory.create("json")

    data = json.loads(formatter.format_result(failed_result))
    assert data["outcome"] == "failed"
    assert data["reason"] == "not_a_repository"
    assert data["remediation"] == "git config --unset core.hooksPath"

    data = json.loads(formatter.format_result(removed_result))
    assert data["succeeded"] is True
    assert "remediation" not in data


def test_github_annotations(failed_result, removed_result):
    formatter = FormatterFactory.create("github")

    assert formatter.format_result(removed_result).startswith("::notice")
    error = formatter.format_result(failed_result)
    assert error.startswith("::error")
    assert "git config --unset core.hooksPath" in error


def test_unknown_format():
    with pytest.raises(ValueError):
        FormatterFactory.create("sarif")


def test_result_requires_reason_only_on_failure():
    with pytest.raises(ValueError):
        UnsetResult(key="core.hooksPath", outcome=Outcome.FAILED)
    with pytest.raises(ValueError):
        UnsetResult(key="core.hooksPath", outcome=Outcome.REMOVED, reason=FailureReason.UNKNOWN)
