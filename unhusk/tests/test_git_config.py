"""Tests for the git config store wrapper."""

import os
import subprocess

import pytest
from unhusk.vcs import GitConfigStore, GitExecutableError, NotGitRepositoryError


def test_is_repository(temp_git_repo, non_repo_dir):
    assert GitConfigStore(temp_git_repo).is_repository()
    assert not GitConfigStore(non_repo_dir).is_repository()


def test_get_and_unset(husky_repo):
    store = GitConfigStore(husky_repo)

    assert store.get("core.hooksPath") == ".husky"
    assert store.unset("core.hooksPath").returncode == 0
    assert store.get("core.hooksPath") is None


def test_missing_executable_raises(temp_git_repo):
    store = GitConfigStore(temp_git_repo, git_executable="git-executable-that-does-not-exist")

    with pytest.raises(GitExecutableError):
        store.unset("core.hooksPath")
    assert not store.is_repository()


def test_git_runs_with_untranslated_messages(temp_git_repo, monkeypatch):
    """git is always launched with LC_ALL=C, whatever the caller's locale."""
    import unhusk.vcs.git_config as git_config_module

    monkeypatch.setenv("LANGUAGE", "de")
    monkeypatch.setenv("LC_ALL", "de_DE.UTF-8")
    seen = {}
    real_run = git_config_module.subprocess.run

    def recording_run(cmd, **kwargs):
        seen.update(kwargs["env"])
        return real_run(cmd, **kwargs)

    monkeypatch.setattr(git_config_module.subprocess, "run", recording_run)

    GitConfigStore(temp_git_repo).unset("core.hooksPath")

    assert seen["LC_ALL"] == "C"
    assert seen["LANGUAGE"] == ""
    assert seen["PATH"] == os.environ["PATH"]


def test_missing_working_dir_raises(tmp_path):
    store = GitConfigStore(tmp_path / "does-not-exist")

    with pytest.raises(NotGitRepositoryError, match="does-not-exist"):
        store.unset("core.hooksPath")
    assert not store.is_repository()


def test_get_reads_local_scope_only(temp_git_repo):
    """A global value is not reported, since unset only removes the local one."""
    subprocess.run(
        ["git", "config", "--global", "core.hooksPath", ".global"],
        cwd=temp_git_repo,
        check=True,
    )
    store = GitConfigStore(temp_git_repo)

    assert store.get("core.hooksPath") is None

    subprocess.run(
        ["git", "config", "core.hooksPath", ".husky"],
        cwd=temp_git_repo,
        check=True,
    )

    assert store.get("core.hooksPath") == ".husky"
