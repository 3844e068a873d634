"""Pytest configuration and fixtures."""

import subprocess

import pytest


@pytest.fixture(autouse=True)
def isolated_git_env(tmp_path_factory, monkeypatch):
    """Isola o git da configuração global/system da máquina."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.delenv("GIT_CONFIG_GLOBAL", raising=False)
    monkeypatch.delenv("GIT_DIR", raising=False)


@pytest.fixture
def temp_git_repo(tmp_path):
    """Cria repositório git temporário."""
    repo_dir = tmp_path / "test_repo"
    repo_dir.mkdir()

    subprocess.run(["git", "init"], cwd=repo_dir, check=True, capture_output=True)

    return repo_dir


@pytest.fixture
def husky_repo(temp_git_repo):
    """Repositório com core.hooksPath = .husky (como o husky deixa)."""
    subprocess.run(
        ["git", "config", "core.hooksPath", ".husky"],
        cwd=temp_git_repo,
        check=True
    )
    return temp_git_repo


@pytest.fixture
def non_repo_dir(tmp_path, monkeypatch):
    """Diretório fora de qualquer repositório git."""
    outside = tmp_path / "outside"
    outside.mkdir()
    # Impede o git de subir até um repositório acima de tmp_path
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return outside


@pytest.fixture
def read_config():
    """Lê uma chave via `git config --get` (None se não definida)."""
    def _read(repo_dir, key):
        result = subprocess.run(
            ["git", "config", "--get", key],
            cwd=repo_dir,
            capture_output=True,
            text=True,
        )
        if result.returncode == 1:
            return None
        return result.stdout.strip()

    return _read
