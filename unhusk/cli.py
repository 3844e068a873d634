"""
UNHUSK - Command Line Interface
Entry point para o passo de build e comandos manuais.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from unhusk.__version__ import __version__
from unhusk.core.config_loader import (
    ConfigLoadError,
    load_config,
    load_default_config,
    validate_config_file,
)
from unhusk.core.formatters import FormatterFactory
from unhusk.core.unsetter import HookPathUnsetter
from unhusk.hooks.build import BuildStepError, run_build_step
from unhusk.vcs.git_config import GitError


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="unhusk",
    help="🪝 UNHUSK - remove o core.hooksPath do husky antes do build",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🪝 UNHUSK version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do UNHUSK"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Logs de debug (comandos git executados)"
    ),
):
    """
    🪝 UNHUSK - remove o core.hooksPath do husky antes do build
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def _load(config_file: Optional[Path]):
    if config_file:
        return load_config(config_file)
    return load_default_config()


# =============================================================================
# Command: run
# =============================================================================

@app.command()
def run():
    """
    🏗️ Passo de build: remove core.hooksPath do repositório atual

    Sem opções: usa a configuração padrão empacotada.

    \b
    unhusk run
    """
    try:
        result = run_build_step()
    except BuildStepError:
        # Mensagem e remediação já foram impressas pelo passo de build
        raise typer.Exit(1)
    except ConfigLoadError as e:
        console.print(f"❌ Erro ao carregar configuração: {e}", style="red")
        raise typer.Exit(1)

    if not result.succeeded:
        console.print("⚠️  Seguindo com o build (on_failure=advisory)", style="yellow")


# =============================================================================
# Command: unset
# =============================================================================

@app.command()
def unset(
    key: Optional[str] = typer.Argument(
        None,
        help="Chave a remover (default: a da configuração, core.hooksPath)"
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Arquivo de configuração YAML"
    ),
    format: str = typer.Option(
        "console",
        "--format",
        "-f",
        help="Formato de output: console, compact, json, github"
    ),
    details: bool = typer.Option(
        False,
        "--details",
        help="Mostra diretório e exit code do git"
    ),
):
    """
    🧹 Remove uma chave da configuração local do git

    Exemplos:

    \b
    unhusk unset
    unhusk unset core.hooksPath --format json
    """
    try:
        config = _load(config_file)
        if key:
            config.key = key
        unsetter = HookPathUnsetter(config)
        formatter = FormatterFactory.create(format_type=format, verbose=details)
    except (ConfigLoadError, ValueError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    result = unsetter.unset()
    typer.echo(formatter.format_result(result))

    raise typer.Exit(result.exit_code)


# =============================================================================
# Command: status
# =============================================================================

@app.command()
def status(
    key: Optional[str] = typer.Argument(
        None,
        help="Chave a consultar (default: core.hooksPath)"
    ),
):
    """
    📊 Mostra se a chave está definida no repositório atual

    \b
    unhusk status
    """
    try:
        config = load_default_config()
        if key:
            config.key = key
        value = HookPathUnsetter(config).current_value()
    except (ConfigLoadError, ValueError, GitError) as e:
        console.print(f"❌ {e}", style="red")
        raise typer.Exit(1)

    if value is None:
        console.print(f"✅ {config.key} não está definido", style="green")
    else:
        console.print(f"🪝 {config.key} = {value}", style="yellow")
        console.print(f"   Remova com: unhusk unset {config.key}")


# =============================================================================
# Command Group: config
# =============================================================================

config_app = typer.Typer(help="⚙️ Configuração")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Arquivo de configuração YAML"
    ),
):
    """
    📋 Mostra a configuração efetiva
    """
    try:
        config = _load(config_file)
    except ConfigLoadError as e:
        console.print(f"❌ Erro ao carregar configuração: {e}", style="red")
        raise typer.Exit(1)

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold yellow")
    table.add_column("Value")

    for field, value in config.to_dict().items():
        table.add_row(field, str(value))

    console.print(table)


@config_app.command("validate")
def config_validate(
    config_file: Path = typer.Argument(
        ...,
        help="Arquivo de configuração a validar"
    ),
):
    """
    ✅ Valida arquivo de configuração

    \b
    unhusk config validate unhusk.yaml
    """
    report = validate_config_file(config_file)

    for warning in report['warnings']:
        console.print(f"⚠️  {warning}", style="yellow")

    if not report['valid']:
        console.print(f"❌ {config_file}: {len(report['errors'])} erros encontrados\n", style="red")
        for error in report['errors']:
            console.print(f"  • {error}", style="red")
        sys.exit(1)

    console.print(f"✅ {config_file}: Válido!", style="green")


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
