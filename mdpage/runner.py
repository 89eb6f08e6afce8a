"""
Build orchestration for mdpage.

Each target is a plain function that runs its steps in order:
- body:  render the content document into the body fragment
- page:  body, then concatenate header + body + footer into the full page
- css:   write the Pygments stylesheet for the configured theme

Steps run sequentially and nothing is retried. Any error propagates to the
caller unchanged, so a failed step halts the build without writing its
output.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig
from .core.types import BuildResult
from .output.page import write_page
from .output.stylesheet import write_stylesheet
from .renderer import render_file
from .utils.fs import atomic_write_bytes
from .utils.logging import log_event


def build_body(cfg: AppConfig, logger: logging.Logger | None = None) -> BuildResult:
    """Render the content document into the body fragment file."""
    source = cfg.resolve(cfg.source.content)
    output = cfg.resolve(cfg.output.body)
    log_event(logger, "Render start", event="render_start", source=str(source))

    body = render_file(source, cfg.render)
    size = atomic_write_bytes(output, body.html.encode("utf-8"))

    log_event(
        logger,
        "Render complete",
        event="render_complete",
        output=str(output),
        size=size,
        headings=len(body.headings),
    )
    return BuildResult(target="body", output=output, size=size)


def build_page(
    cfg: AppConfig,
    logger: logging.Logger | None = None,
    show_progress: bool = False,
    console: Console | None = None,
) -> BuildResult:
    """Run the body target, then assemble the full page."""
    if not show_progress:
        build_body(cfg, logger)
        return _assemble(cfg, logger)

    progress = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console or Console(),
    )
    with progress:
        stage_task = progress.add_task("Build page", total=2)
        build_body(cfg, logger)
        progress.advance(stage_task, 1)
        result = _assemble(cfg, logger)
        progress.advance(stage_task, 1)
    return result


def _assemble(cfg: AppConfig, logger: logging.Logger | None) -> BuildResult:
    output = cfg.resolve(cfg.output.page)
    size = write_page(
        cfg.resolve(cfg.source.header),
        cfg.resolve(cfg.output.body),
        cfg.resolve(cfg.source.footer),
        output,
    )
    log_event(logger, "Page assembled", event="page_assembled", output=str(output), size=size)
    return BuildResult(target="page", output=output, size=size)


def build_stylesheet(cfg: AppConfig, logger: logging.Logger | None = None) -> BuildResult:
    """Write the highlighting stylesheet for the configured theme."""
    output = cfg.resolve(cfg.style.output)
    size = write_stylesheet(cfg.style.theme, cfg.style.selector, output)
    log_event(
        logger,
        "Stylesheet written",
        event="stylesheet_written",
        theme=cfg.style.theme,
        selector=cfg.style.selector,
        output=str(output),
        size=size,
    )
    return BuildResult(target="css", output=output, size=size)
