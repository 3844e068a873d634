"""
UNHUSK - Output Formatters
Formatação do resultado do unset para diferentes contextos (terminal, JSON, CI).
"""

import re
import sys
import json
from typing import Optional, TextIO

from .models import UnsetResult, Outcome


# =============================================================================
# ANSI Color Codes
# =============================================================================

class Colors:
    """Códigos de cor ANSI para terminal."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"

    @staticmethod
    def strip_colors(text: str) -> str:
        """Remove códigos de cor de uma string."""
        ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
        return ansi_escape.sub('', text)

    @staticmethod
    def is_tty(file: TextIO = sys.stdout) -> bool:
        """Verifica se o output é um terminal (suporta cores)."""
        return hasattr(file, 'isatty') and file.isatty()


# =============================================================================
# Base Formatter
# =============================================================================

class BaseFormatter:
    """
    Classe base para formatters.
    """

    def __init__(self, use_colors: Optional[bool] = None):
        """
        Args:
            use_colors: Se True, usa cores ANSI. Se None, detecta automaticamente.
        """
        if use_colors is None:
            self.use_colors = Colors.is_tty()
        else:
            self.use_colors = use_colors

    def colorize(self, text: str, color: str) -> str:
        """Aplica cor ao texto se use_colors=True."""
        if not self.use_colors:
            return text
        return f"{color}{text}{Colors.RESET}"

    def format_result(self, result: UnsetResult) -> str:
        """Formata UnsetResult (deve ser implementado por subclasses)."""
        raise NotImplementedError


# =============================================================================
# Console Formatter (Default)
# =============================================================================

class ConsoleFormatter(BaseFormatter):
    """
    Formatter para output no terminal (human-readable).
    """

    def __init__(self, use_colors: Optional[bool] = None, verbose: bool = False):
        """
        Args:
            use_colors: Usar cores ANSI
            verbose: Se True, mostra exit code e diretório
        """
        super().__init__(use_colors)
        self.verbose = verbose

    def format_result(self, result: UnsetResult) -> str:
        """
        Formata resultado do unset.

        Args:
            result: UnsetResult do unsetter

        Returns:
            String formatada para terminal
        """
        lines = []

        if result.outcome == Outcome.REMOVED:
            lines.append(self.colorize(f"✅ {result.key} removido do .git/config", Colors.GREEN))
        elif result.outcome == Outcome.NOT_FOUND:
            lines.append(self.colorize(f"✅ {result.key} não estava definido (nada a fazer)", Colors.GREEN))
        else:
            lines.append(self.colorize(
                f"❌ Não foi possível remover {result.key}: {result.reason.description}",
                Colors.RED,
            ))
            if result.stderr:
                for line in result.stderr.splitlines():
                    lines.append(f"   {self.colorize(line, Colors.DIM)}")
            lines.append("")
            lines.append(
                f"   {self.colorize('💡 Rode manualmente:', Colors.BOLD)} "
                f"{self.colorize(result.remediation_command, Colors.CYAN)}"
            )

        if self.verbose:
            returncode = "-" if result.returncode is None else result.returncode
            lines.append(self.colorize(
                f"   📍 {result.working_dir} (exit {returncode})",
                Colors.DIM,
            ))

        return "\n".join(lines)


# =============================================================================
# Compact Formatter
# =============================================================================

class CompactFormatter(BaseFormatter):
    """
    Formatter compacto (uma linha, para logs de build).
    """

    def format_result(self, result: UnsetResult) -> str:
        if result.succeeded:
            return self.colorize(f"[unhusk] {result.key}: {result.outcome.value}", Colors.GREEN)

        return self.colorize(
            f"[unhusk] {result.key}: failed ({result.reason.value}); "
            f"run: {result.remediation_command}",
            Colors.RED,
        )


# =============================================================================
# JSON Formatter
# =============================================================================

class JSONFormatter(BaseFormatter):
    """
    Formatter JSON (para integração com ferramentas).
    """

    def __init__(self, pretty: bool = True):
        super().__init__(use_colors=False)
        self.pretty = pretty

    def format_result(self, result: UnsetResult) -> str:
        """Formata resultado como JSON."""
        if self.pretty:
            return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
        return json.dumps(result.to_dict(), ensure_ascii=False)


# =============================================================================
# GitHub Actions Formatter
# =============================================================================

class GitHubFormatter(BaseFormatter):
    """
    Formatter para GitHub Actions (workflow commands).
    """

    def __init__(self):
        super().__init__(use_colors=False)

    def format_result(self, result: UnsetResult) -> str:
        if result.succeeded:
            return f"::notice title=unhusk::{result.key}: {result.outcome.value}"

        message = (
            f"{result.key}: {result.reason.description}. "
            f"Rode manualmente: {result.remediation_command}"
        )
        return f"::error title=unhusk::{message}"


# =============================================================================
# Formatter Factory
# =============================================================================

class FormatterFactory:
    """Factory para criar formatters."""

    @staticmethod
    def create(
        format_type: str,
        use_colors: Optional[bool] = None,
        verbose: bool = False,
        pretty: bool = True
    ) -> BaseFormatter:
        """
        Cria formatter apropriado.

        Args:
            format_type: Tipo do formatter (console, compact, json, github)
            use_colors: Usar cores (apenas console/compact)
            verbose: Modo verbose (apenas console)
            pretty: Pretty print JSON (apenas json)

        Returns:
            BaseFormatter configurado
        """
        format_type = format_type.lower()

        if format_type == "console":
            return ConsoleFormatter(use_colors=use_colors, verbose=verbose)

        elif format_type == "compact":
            return CompactFormatter(use_colors=use_colors)

        elif format_type == "json":
            return JSONFormatter(pretty=pretty)

        elif format_type == "github":
            return GitHubFormatter()

        else:
            raise ValueError(
                f"Formato desconhecido: {format_type}. "
                f"Formatos válidos: console, compact, json, github"
            )


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Formatters
    'BaseFormatter',
    'ConsoleFormatter',
    'CompactFormatter',
    'JSONFormatter',
    'GitHubFormatter',

    # Factory
    'FormatterFactory',

    # Utils
    'Colors',
]
