"""
Core data types for mdpage.

This module defines the values produced by each build step:
- RenderedBody: HTML converted from the content document
- Stylesheet: CSS emitted for a highlighting theme
- BuildResult: What a build target wrote and where
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class RenderedBody:
    """HTML fragment produced from a Markdown content document.

    Attributes:
        html: The converted HTML, exactly as returned by the converter
        toc: Table of contents HTML collected by the toc extension (empty if disabled)
        toc_tokens: Nested heading tokens collected by the toc extension
        source: Path of the content document, if rendered from a file
    """
    html: str
    toc: str = ""
    toc_tokens: list[dict[str, Any]] = field(default_factory=list)
    source: Path | None = None

    @property
    def headings(self) -> list[str]:
        """Flattened list of heading names in document order."""
        names: list[str] = []
        stack = list(reversed(self.toc_tokens))
        while stack:
            token = stack.pop()
            names.append(token.get("name", ""))
            stack.extend(reversed(token.get("children", [])))
        return names


@dataclass
class Stylesheet:
    """CSS for a Pygments colour theme.

    Attributes:
        theme: Pygments style name (e.g., "default", "monokai")
        selector: CSS selector every rule is scoped under
        css: The stylesheet text as produced by Pygments
    """
    theme: str
    selector: str
    css: str


@dataclass
class BuildResult:
    """Outcome of one build target.

    Attributes:
        target: Target name ("body", "page" or "css")
        output: Path of the file written
        size: Number of bytes written
    """
    target: str
    output: Path
    size: int
