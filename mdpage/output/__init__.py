"""Page assembly and stylesheet generation."""

from .page import assemble_page, write_page
from .stylesheet import available_themes, generate_stylesheet, write_stylesheet

__all__ = [
    "assemble_page",
    "write_page",
    "available_themes",
    "generate_stylesheet",
    "write_stylesheet",
]
