"""
Core data types and errors.

This package contains the value objects passed between build steps and
the exception hierarchy raised when a step cannot complete.
"""

from .errors import BuildError, MissingInputError, RenderError, UnknownThemeError
from .types import BuildResult, RenderedBody, Stylesheet

__all__ = [
    "BuildError",
    "MissingInputError",
    "RenderError",
    "UnknownThemeError",
    "BuildResult",
    "RenderedBody",
    "Stylesheet",
]
