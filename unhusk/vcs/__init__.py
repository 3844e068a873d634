"""Access to the git configuration store."""

from .git_config import (
    GitConfigStore,
    GitError,
    GitExecutableError,
    NotGitRepositoryError,
)

__all__ = [
    "GitConfigStore",
    "GitError",
    "GitExecutableError",
    "NotGitRepositoryError",
]
