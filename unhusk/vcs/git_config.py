"""
UNHUSK - Git Config Store
Acesso ao store de configuração local do Git via executável `git`.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import List, Optional


logger = logging.getLogger(__name__)


def git_env() -> dict:
    """Ambiente do processo com mensagens do git sem tradução (stderr em inglês)."""
    return {**os.environ, "LC_ALL": "C", "LANGUAGE": ""}


# =============================================================================
# Exceções
# =============================================================================

class GitError(Exception):
    """Erro ao executar comando git."""
    pass


class GitExecutableError(GitError):
    """Executável git não encontrado ou não executável."""
    pass


class NotGitRepositoryError(GitError):
    """Diretório de trabalho não existe ou não é um repositório git."""
    pass


# =============================================================================
# Git Config Store
# =============================================================================

class GitConfigStore:
    """
    Store de configuração do Git (escopo do repositório).

    Responsabilidades:
    - Executar `git config` no diretório do projeto
    - Remover uma chave (`--unset`)
    - Ler o valor atual de uma chave (`--get`)

    Nunca lê nem escreve `.git/config` diretamente: tudo passa pelo
    próprio executável do git.
    """

    def __init__(self, repo_path: Optional[Path] = None, git_executable: str = "git"):
        """
        Args:
            repo_path: Diretório de trabalho (default: diretório atual)
            git_executable: Nome ou caminho do executável git
        """
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()
        self.git_executable = git_executable

    def unset(self, key: str) -> subprocess.CompletedProcess:
        """
        Executa `git config --unset <key>`.

        Args:
            key: Chave pontuada (ex: 'core.hooksPath')

        Returns:
            CompletedProcess com returncode e stderr do git

        Raises:
            GitExecutableError: Se o git não puder ser executado
        """
        return self.run(['config', '--unset', key])

    def get(self, key: str) -> Optional[str]:
        """
        Lê o valor atual de uma chave no escopo local (o mesmo que `unset` altera).

        Args:
            key: Chave pontuada

        Returns:
            Valor da chave, ou None se não estiver definida

        Raises:
            GitError: Se o git falhar por outro motivo
        """
        result = self.run(['config', '--local', '--get', key])

        # git config --get retorna 1 quando a chave não existe
        if result.returncode == 1:
            return None

        if result.returncode != 0:
            raise GitError(
                f"Comando git falhou: git config --local --get {key}\n"
                f"Stderr: {result.stderr.strip()}"
            )

        return result.stdout.strip()

    def is_repository(self) -> bool:
        """Verifica se o diretório está dentro de um repositório git."""
        try:
            result = self.run(['rev-parse', '--git-dir'])
        except (GitExecutableError, NotGitRepositoryError):
            return False
        return result.returncode == 0

    def run(self, args: List[str]) -> subprocess.CompletedProcess:
        """
        Executa o git com os argumentos dados, sem checar o exit code.

        Args:
            args: Argumentos (sem o executável)

        Returns:
            CompletedProcess com stdout/stderr em texto

        Raises:
            GitExecutableError: Se o executável não existir ou não puder ser lançado
            NotGitRepositoryError: Se o diretório de trabalho não existir
        """
        if not self.repo_path.is_dir():
            raise NotGitRepositoryError(f"Diretório não encontrado: {self.repo_path}")

        cmd = [self.git_executable] + list(args)
        logger.debug("Executando %s em %s", ' '.join(cmd), self.repo_path)

        try:
            return subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=False,
                env=git_env(),
            )
        except FileNotFoundError as e:
            raise GitExecutableError(f"{self.git_executable} não encontrado no PATH") from e
        except PermissionError as e:
            raise GitExecutableError(f"Sem permissão para executar {self.git_executable}: {e}") from e
        except OSError as e:
            raise GitExecutableError(f"Erro ao executar {self.git_executable}: {e}") from e


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'GitConfigStore',
    'GitError',
    'GitExecutableError',
    'NotGitRepositoryError',
    'git_env',
]
