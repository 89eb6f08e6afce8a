"""
mdpage - build a single static HTML page from a Markdown article.

This package renders one Markdown content document with Python-Markdown,
wraps it between a static header and footer fragment, and separately emits
the Pygments stylesheet used by the highlighted code samples.

Main entry point is the CLI via the `mdpage` command.

Example:
    $ mdpage            # render readme.md and assemble full.html
    $ mdpage css        # write codehilite.css for the default theme
"""

__all__ = [
    "__version__",
    "assemble_page",
    "generate_stylesheet",
    "render_markdown",
]
__version__ = "0.1.0"

from .output.page import assemble_page
from .output.stylesheet import generate_stylesheet
from .renderer import render_markdown
