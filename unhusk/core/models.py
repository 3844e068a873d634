"""
UNHUSK - Core Data Models
Estruturas de dados do unsetter de core.hooksPath.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from enum import Enum


DEFAULT_KEY = "core.hooksPath"


# =============================================================================
# Enums
# =============================================================================

class Outcome(str, Enum):
    """Resultado de uma tentativa de unset."""
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Motivo de uma falha (apenas diagnóstico, não muda o fluxo)."""
    EXECUTABLE_UNAVAILABLE = "executable_unavailable"
    NOT_A_REPOSITORY = "not_a_repository"
    STORE_WRITE_FAILED = "store_write_failed"
    INVALID_KEY = "invalid_key"
    MULTIPLE_VALUES = "multiple_values"
    UNKNOWN = "unknown"

    @property
    def description(self) -> str:
        """Descrição legível do motivo."""
        return FAILURE_DESCRIPTIONS[self]


FAILURE_DESCRIPTIONS = {
    FailureReason.EXECUTABLE_UNAVAILABLE: "git não encontrado ou não executável",
    FailureReason.NOT_A_REPOSITORY: "diretório não está dentro de um repositório git",
    FailureReason.STORE_WRITE_FAILED: "não foi possível escrever no arquivo de configuração do git",
    FailureReason.INVALID_KEY: "chave de configuração inválida",
    FailureReason.MULTIPLE_VALUES: "chave tem múltiplos valores",
    FailureReason.UNKNOWN: "erro inesperado do git",
}


class FailurePolicy(str, Enum):
    """O que fazer com o build quando o unset falha."""
    FATAL = "fatal"
    ADVISORY = "advisory"


# =============================================================================
# Unset Result
# =============================================================================

@dataclass
class UnsetResult:
    """Resultado completo de uma tentativa de unset."""
    key: str
    outcome: Outcome
    reason: Optional[FailureReason] = None
    returncode: Optional[int] = None
    stderr: str = ""
    working_dir: str = ""

    def __post_init__(self):
        """Valida consistência entre outcome e reason."""
        if self.outcome == Outcome.FAILED and self.reason is None:
            raise ValueError("outcome='failed' requer 'reason'")
        if self.outcome != Outcome.FAILED and self.reason is not None:
            raise ValueError(f"outcome='{self.outcome.value}' não aceita 'reason'")

    @property
    def succeeded(self) -> bool:
        """True quando a chave está ausente ao final (removida ou já ausente)."""
        return self.outcome in [Outcome.REMOVED, Outcome.NOT_FOUND]

    @property
    def remediation_command(self) -> str:
        """Comando que o operador pode rodar manualmente."""
        if self.reason == FailureReason.MULTIPLE_VALUES:
            return f"git config --unset-all {self.key}"
        return f"git config --unset {self.key}"

    @property
    def exit_code(self) -> int:
        """
        Exit code do passo de build.

        0 = chave ausente (removida ou já ausente)
        1 = falha
        """
        return 0 if self.succeeded else 1

    def to_dict(self) -> Dict[str, Any]:
        """Serializa UnsetResult para dict."""
        data = {
            "key": self.key,
            "outcome": self.outcome.value,
            "succeeded": self.succeeded,
            "returncode": self.returncode,
            "working_dir": self.working_dir,
        }

        if not self.succeeded:
            data["reason"] = self.reason.value
            data["message"] = self.reason.description
            data["stderr"] = self.stderr
            data["remediation"] = self.remediation_command

        return data


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class UnhuskConfig:
    """Configuração global do UNHUSK."""
    key: str = DEFAULT_KEY
    git_executable: str = "git"
    on_failure: FailurePolicy = FailurePolicy.FATAL

    @property
    def is_fatal(self) -> bool:
        """True se uma falha deve abortar o build."""
        return self.on_failure == FailurePolicy.FATAL

    def to_dict(self) -> Dict[str, Any]:
        """Serializa UnhuskConfig para dict."""
        return {
            "key": self.key,
            "git_executable": self.git_executable,
            "on_failure": self.on_failure.value,
        }


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "DEFAULT_KEY",
    # Enums
    "Outcome",
    "FailureReason",
    "FailurePolicy",
    # Core models
    "UnsetResult",
    # Configuration
    "UnhuskConfig",
]
