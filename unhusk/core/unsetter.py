"""
UNHUSK - Hook-Path Unsetter
Remove uma chave do store de configuração local do Git, tolerando sua ausência.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Tuple, Union

from ..vcs.git_config import GitConfigStore, GitExecutableError, NotGitRepositoryError
from .models import (
    Outcome,
    FailureReason,
    UnsetResult,
    UnhuskConfig,
)


logger = logging.getLogger(__name__)


# =============================================================================
# Exit codes do `git config` (ver git-config(1), seção EXIT STATUS)
# =============================================================================

GIT_CONFIG_OK = 0
GIT_CONFIG_INVALID_KEY = 1
GIT_CONFIG_NO_SECTION_OR_NAME = 2
GIT_CONFIG_INVALID_FILE = 3
GIT_CONFIG_CANNOT_WRITE = 4
# Também usado quando a chave tem múltiplos valores
GIT_CONFIG_KEY_NOT_FOUND = 5
GIT_FATAL = 128

INVALID_KEY_CODES = {GIT_CONFIG_INVALID_KEY, GIT_CONFIG_NO_SECTION_OR_NAME}
STORE_WRITE_CODES = {GIT_CONFIG_INVALID_FILE, GIT_CONFIG_CANNOT_WRITE}

NOT_A_REPOSITORY_MARKERS = (
    "not in a git directory",
    "not a git repository",
)
MULTIPLE_VALUES_MARKER = "has multiple values"

# section[.subsection].name
KEY_PATTERN = re.compile(r'^[A-Za-z0-9-]+(?:\.[^\n]+)?\.[A-Za-z][A-Za-z0-9-]*$')


# =============================================================================
# Classificação
# =============================================================================

def validate_key(key: str) -> None:
    """
    Valida uma chave pontuada antes de chamar o git.

    Raises:
        ValueError: Se a chave estiver vazia ou malformada
    """
    if not key or not KEY_PATTERN.match(key):
        raise ValueError(f"Chave de configuração inválida: {key!r} (esperado 'section.name')")


def classify(returncode: int, stderr: str) -> Tuple[Outcome, Optional[FailureReason]]:
    """
    Mapeia exit code + stderr do `git config --unset` para (Outcome, FailureReason).

    Args:
        returncode: Exit code do git
        stderr: Diagnóstico capturado do git

    Returns:
        Tupla (Outcome, FailureReason ou None)
    """
    if returncode == GIT_CONFIG_OK:
        return Outcome.REMOVED, None

    if returncode == GIT_CONFIG_KEY_NOT_FOUND:
        if MULTIPLE_VALUES_MARKER in stderr:
            return Outcome.FAILED, FailureReason.MULTIPLE_VALUES
        return Outcome.NOT_FOUND, None

    if returncode in INVALID_KEY_CODES:
        return Outcome.FAILED, FailureReason.INVALID_KEY

    if returncode in STORE_WRITE_CODES:
        return Outcome.FAILED, FailureReason.STORE_WRITE_FAILED

    if returncode == GIT_FATAL:
        lowered = stderr.lower()
        if any(marker in lowered for marker in NOT_A_REPOSITORY_MARKERS):
            return Outcome.FAILED, FailureReason.NOT_A_REPOSITORY

    return Outcome.FAILED, FailureReason.UNKNOWN


# =============================================================================
# Operação principal
# =============================================================================

def unset(
    key: str,
    working_dir: Optional[Union[str, Path]] = None,
    git_executable: str = "git",
) -> UnsetResult:
    """
    Remove `key` da configuração local do git em `working_dir`.

    Removida ou já ausente contam como sucesso; qualquer outra coisa vira
    Outcome.FAILED com um FailureReason. Falhas nunca levantam exceção.

    Args:
        key: Chave pontuada (ex: 'core.hooksPath')
        working_dir: Diretório dentro do repositório (default: diretório atual)
        git_executable: Executável git a usar

    Returns:
        UnsetResult

    Raises:
        ValueError: Se a chave for inválida
    """
    validate_key(key)

    store = GitConfigStore(working_dir, git_executable=git_executable)
    cwd = str(store.repo_path)

    try:
        completed = store.unset(key)
    except GitExecutableError as e:
        logger.warning("Não foi possível executar o git: %s", e)
        return UnsetResult(
            key=key,
            outcome=Outcome.FAILED,
            reason=FailureReason.EXECUTABLE_UNAVAILABLE,
            stderr=str(e),
            working_dir=cwd,
        )
    except NotGitRepositoryError as e:
        logger.warning("%s", e)
        return UnsetResult(
            key=key,
            outcome=Outcome.FAILED,
            reason=FailureReason.NOT_A_REPOSITORY,
            stderr=str(e),
            working_dir=cwd,
        )

    stderr = completed.stderr.strip()
    outcome, reason = classify(completed.returncode, stderr)

    if outcome == Outcome.FAILED:
        logger.warning(
            "git config --unset %s falhou (exit %d, %s): %s",
            key, completed.returncode, reason.value, stderr,
        )
    else:
        logger.info("%s: %s", key, outcome.value)

    return UnsetResult(
        key=key,
        outcome=outcome,
        reason=reason,
        returncode=completed.returncode,
        stderr=stderr,
        working_dir=cwd,
    )


class HookPathUnsetter:
    """Executa o unset configurado por um UnhuskConfig."""

    def __init__(self, config: Optional[UnhuskConfig] = None):
        self.config = config or UnhuskConfig()
        validate_key(self.config.key)

    def unset(self, working_dir: Optional[Union[str, Path]] = None) -> UnsetResult:
        return unset(
            self.config.key,
            working_dir=working_dir,
            git_executable=self.config.git_executable,
        )

    def current_value(self, working_dir: Optional[Union[str, Path]] = None) -> Optional[str]:
        """
        Valor atual da chave configurada (None se não definida).

        Raises:
            GitError: Se o git não puder ser consultado
        """
        store = GitConfigStore(working_dir, git_executable=self.config.git_executable)
        return store.get(self.config.key)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'GIT_CONFIG_KEY_NOT_FOUND',
    'GIT_FATAL',
    'HookPathUnsetter',
    'classify',
    'unset',
    'validate_key',
]
