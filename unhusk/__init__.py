"""
🪝 UNHUSK - Hook-path cleanup for builds

Remove o `core.hooksPath` deixado pelo husky no `.git/config` do projeto,
uma vez por build, para que o git volte a usar os hooks padrão.
"""

from .__version__ import __version__

__all__ = ["__version__"]
