"""
UNHUSK - Build Step
Executa o unset de core.hooksPath uma vez por build.

Uso em um setup.py:

    from unhusk.hooks import UnhuskBuildPy

    setup(..., cmdclass={"build_py": UnhuskBuildPy})
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from setuptools.command.build_py import build_py

from ..core.config_loader import load_default_config
from ..core.formatters import Colors, FormatterFactory
from ..core.models import UnhuskConfig, UnsetResult
from ..core.unsetter import HookPathUnsetter


logger = logging.getLogger(__name__)


# =============================================================================
# Exceptions
# =============================================================================

class BuildStepError(Exception):
    """Unset falhou e a política é 'fatal'."""

    def __init__(self, result: UnsetResult):
        self.result = result
        super().__init__(
            f"{result.key} não foi removido automaticamente "
            f"({result.reason.description}). "
            f"Rode manualmente: {result.remediation_command}"
        )


# =============================================================================
# Build Step
# =============================================================================

def run_build_step(
    working_dir: Optional[Union[str, Path]] = None,
    config: Optional[UnhuskConfig] = None,
) -> UnsetResult:
    """
    Passo de build: remove a chave configurada e reporta no stderr.

    Args:
        working_dir: Diretório do projeto (default: diretório atual)
        config: Configuração (default: config/defaults.yaml empacotado)

    Returns:
        UnsetResult (sucesso, ou falha com política advisory)

    Raises:
        BuildStepError: Se o unset falhar e a política for 'fatal'
    """
    if config is None:
        config = load_default_config()

    result = HookPathUnsetter(config).unset(working_dir)

    formatter = FormatterFactory.create("console", use_colors=Colors.is_tty(sys.stderr))
    print(formatter.format_result(result), file=sys.stderr)

    if not result.succeeded:
        if config.is_fatal:
            raise BuildStepError(result)
        logger.warning("on_failure=advisory: seguindo com o build sem remover %s", result.key)

    return result


class UnhuskBuildPy(build_py):
    """`build_py` que remove core.hooksPath antes de construir o pacote."""

    def run(self):
        try:
            run_build_step()
        except BuildStepError as e:
            raise SystemExit(f"❌ {e}")
        super().run()


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    "BuildStepError",
    "UnhuskBuildPy",
    "run_build_step",
]
