"""Configuration files for UNHUSK."""

from pathlib import Path

CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_FILE = CONFIG_DIR / "defaults.yaml"

__all__ = ["CONFIG_DIR", "DEFAULT_CONFIG_FILE"]
