"""Pygments stylesheet generation."""

from __future__ import annotations

from pathlib import Path

from pygments.formatters import HtmlFormatter
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound

from ..core.errors import UnknownThemeError
from ..core.types import Stylesheet
from ..utils.fs import atomic_write_bytes


def available_themes() -> list[str]:
    """Return installed Pygments style names, sorted."""
    return sorted(get_all_styles())


def generate_stylesheet(theme: str = "default", selector: str = ".codehilite") -> Stylesheet:
    """Produce the CSS for ``theme`` with every rule scoped under ``selector``.

    Raises:
        UnknownThemeError: If no Pygments style is registered under ``theme``
    """
    try:
        formatter = HtmlFormatter(style=theme)
    except ClassNotFound as exc:
        raise UnknownThemeError(theme, available_themes()) from exc
    return Stylesheet(theme=theme, selector=selector, css=formatter.get_style_defs(selector))


def write_stylesheet(theme: str, selector: str, output_path: Path) -> int:
    """Generate the stylesheet and write it wholesale to ``output_path``."""
    sheet = generate_stylesheet(theme, selector)
    css = sheet.css if sheet.css.endswith("\n") else sheet.css + "\n"
    return atomic_write_bytes(output_path, css.encode("utf-8"))
