"""Exceptions raised by build steps."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Base class for failures that halt a build."""


class MissingInputError(BuildError, FileNotFoundError):
    """A required input file does not exist."""

    def __init__(self, path: Path, role: str = "input"):
        self.path = Path(path)
        self.role = role
        super().__init__(f"Missing {role} file: {self.path}")


class RenderError(BuildError):
    """The Markdown converter could not be set up or failed."""


class UnknownThemeError(BuildError, ValueError):
    """The requested Pygments style is not installed."""

    def __init__(self, theme: str, available: list[str]):
        self.theme = theme
        self.available = available
        super().__init__(
            f"Unknown theme: {theme}. Available: {', '.join(available)}"
        )
