"""Core modules for UNHUSK."""

from .config_loader import ConfigLoadError, load_config, load_default_config
from .formatters import FormatterFactory
from .models import (
    DEFAULT_KEY,
    FailurePolicy,
    FailureReason,
    Outcome,
    UnhuskConfig,
    UnsetResult,
)
from .unsetter import HookPathUnsetter, unset

__all__ = [
    # Unsetter
    "HookPathUnsetter",
    "unset",
    # Formatters
    "FormatterFactory",
    # Models
    "DEFAULT_KEY",
    "FailurePolicy",
    "FailureReason",
    "Outcome",
    "UnhuskConfig",
    "UnsetResult",
    # Loaders
    "ConfigLoadError",
    "load_config",
    "load_default_config",
]
