"""Build-system wiring for the hook-path unset step."""

from .build import (
    BuildStepError,
    UnhuskBuildPy,
    run_build_step,
)

__all__ = [
    "BuildStepError",
    "UnhuskBuildPy",
    "run_build_step",
]
