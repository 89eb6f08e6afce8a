"""Markdown to HTML conversion for the content document."""

from __future__ import annotations

from pathlib import Path

import markdown

from .config import RenderConfig
from .core.errors import RenderError
from .core.types import RenderedBody
from .utils.fs import require_file


def build_converter(cfg: RenderConfig) -> markdown.Markdown:
    """Create a Markdown converter with the configured extensions.

    Raises:
        RenderError: If an extension cannot be loaded or rejects its settings
    """
    try:
        return markdown.Markdown(
            extensions=list(cfg.extensions),
            extension_configs={
                name: dict(options) for name, options in cfg.extension_configs.items()
            },
            output_format=cfg.output_format,
        )
    except (ImportError, AttributeError, KeyError, TypeError) as exc:
        raise RenderError(f"Cannot set up Markdown converter: {exc}") from exc


def render_markdown(text: str, cfg: RenderConfig | None = None) -> RenderedBody:
    """Render Markdown text to an HTML fragment.

    A fresh converter is built on every call; Python-Markdown keeps
    per-document state (toc, footnotes, reference links) on the instance.
    """
    converter = build_converter(cfg or RenderConfig())
    html = converter.convert(text)
    return RenderedBody(
        html=html,
        toc=getattr(converter, "toc", ""),
        toc_tokens=list(getattr(converter, "toc_tokens", [])),
    )


def render_file(path: Path, cfg: RenderConfig | None = None) -> RenderedBody:
    """Read a UTF-8 Markdown file and render it."""
    require_file(path, "content")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise RenderError(f"Content file is not valid UTF-8: {path}") from exc
    body = render_markdown(text, cfg)
    body.source = path
    return body
