"""
UNHUSK - Config Loader
Carrega e valida a configuração do arquivo YAML.
"""

from pathlib import Path
from typing import Dict, Any, Union
import yaml

from ..config import DEFAULT_CONFIG_FILE
from .models import UnhuskConfig, FailurePolicy, DEFAULT_KEY
from .unsetter import validate_key


KNOWN_FIELDS = {'version', 'key', 'git_executable', 'on_failure'}


# =============================================================================
# Exceções Customizadas
# =============================================================================

class ConfigLoadError(Exception):
    """Erro ao carregar arquivo de configuração."""
    pass


# =============================================================================
# Loader
# =============================================================================

def load_config_from_dict(data: Dict[str, Any], source_file: str = "unknown") -> UnhuskConfig:
    """
    Converte um dicionário (já parseado do YAML) em UnhuskConfig.

    Args:
        data: Dicionário com estrutura do YAML
        source_file: Nome do arquivo de origem (para mensagens de erro)

    Returns:
        UnhuskConfig validado

    Raises:
        ConfigLoadError: Se algum campo for inválido
    """
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigLoadError(f"{source_file}: YAML deve conter um objeto no nível raiz")

    unknown = sorted(set(data) - KNOWN_FIELDS)
    if unknown:
        raise ConfigLoadError(f"{source_file}: campos desconhecidos: {', '.join(unknown)}")

    key = data.get('key', DEFAULT_KEY)
    if not isinstance(key, str):
        raise ConfigLoadError(f"{source_file}: 'key' deve ser uma string")
    try:
        validate_key(key)
    except ValueError as e:
        raise ConfigLoadError(f"{source_file}: {e}")

    git_executable = data.get('git_executable', 'git')
    if not isinstance(git_executable, str) or not git_executable.strip():
        raise ConfigLoadError(f"{source_file}: 'git_executable' deve ser uma string não vazia")

    try:
        on_failure = FailurePolicy(data.get('on_failure', FailurePolicy.FATAL.value))
    except ValueError:
        raise ConfigLoadError(
            f"{source_file}: valor inválido para 'on_failure': {data['on_failure']}. "
            f"Valores válidos: {[p.value for p in FailurePolicy]}"
        )

    return UnhuskConfig(
        key=key,
        git_executable=git_executable,
        on_failure=on_failure,
    )


def load_config(filepath: Union[str, Path]) -> UnhuskConfig:
    """
    Carrega configuração de um arquivo YAML.

    Args:
        filepath: Caminho para o arquivo de configuração

    Returns:
        UnhuskConfig

    Raises:
        ConfigLoadError: Se não conseguir ler ou validar o arquivo
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise ConfigLoadError(f"Arquivo não encontrado: {filepath}")

    if not filepath.is_file():
        raise ConfigLoadError(f"Path não é um arquivo: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Erro ao parsear YAML: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Erro ao ler arquivo: {e}")

    return load_config_from_dict(data, source_file=str(filepath))


def load_default_config() -> UnhuskConfig:
    """Carrega a configuração padrão empacotada (config/defaults.yaml)."""
    if not DEFAULT_CONFIG_FILE.exists():
        raise ConfigLoadError(
            f"Arquivo de configuração padrão não encontrado: {DEFAULT_CONFIG_FILE}"
        )

    return load_config(DEFAULT_CONFIG_FILE)


def validate_config_file(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Valida um arquivo de configuração e retorna relatório de validação.

    Returns:
        Dict com resultados da validação:
        {
            'valid': bool,
            'errors': List[str],
            'warnings': List[str],
        }
    """
    result = {
        'valid': True,
        'errors': [],
        'warnings': [],
    }

    try:
        config = load_config(filepath)

        if config.key != DEFAULT_KEY:
            result['warnings'].append(
                f"'key' é '{config.key}', não '{DEFAULT_KEY}'"
            )

        if not config.is_fatal:
            result['warnings'].append(
                "on_failure='advisory': falhas no unset não vão abortar o build"
            )

    except ConfigLoadError as e:
        result['valid'] = False
        result['errors'].append(str(e))

    return result


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'ConfigLoadError',
    'load_config',
    'load_config_from_dict',
    'load_default_config',
    'validate_config_file',
]
