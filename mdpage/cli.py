"""
Command-line interface for mdpage.

Uses Typer to expose the build targets as commands:
- page (default): render the content document and assemble the full page
- body: render the content document only
- css: write the Pygments stylesheet
- themes: list the installed Pygments themes

Global options (config file, logging, progress) go before the command,
target options after it. A missing input or unknown theme exits with
status 1.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import NoReturn

import typer
import yaml
from rich.console import Console

from .config import AppConfig, load_config
from .core.errors import BuildError
from .output.stylesheet import available_themes
from .runner import build_body, build_page, build_stylesheet
from .utils.logging import setup_logging

DEFAULT_CONFIG_NAME = "mdpage.yaml"

app = typer.Typer(add_completion=False, help="Build a static HTML page from a Markdown article.")
console = Console()


@dataclass
class _State:
    cfg: AppConfig
    logger: logging.Logger
    progress: bool


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help=f"YAML config file (defaults to ./{DEFAULT_CONFIG_NAME} when present).",
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
):
    """Build a static HTML page from a Markdown article.

    Runs the page target when no command is given.
    """
    if config is None and Path(DEFAULT_CONFIG_NAME).is_file():
        config = Path(DEFAULT_CONFIG_NAME)

    try:
        cfg = load_config(str(config) if config else None)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        console.print(f"[red]Invalid config:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    logger = setup_logging(cfg.logging, cfg.base_dir)
    ctx.obj = _State(cfg=cfg, logger=logger, progress=progress)

    if ctx.invoked_subcommand is None:
        _run_page(ctx.obj)


@app.command()
def page(
    ctx: typer.Context,
    input: Path | None = typer.Option(None, "--input", "-i", help="Markdown content document."),
    header: Path | None = typer.Option(None, "--header", help="Header HTML fragment."),
    footer: Path | None = typer.Option(None, "--footer", help="Footer HTML fragment."),
    body: Path | None = typer.Option(None, "--body", help="Rendered body fragment path."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Assembled page path."),
):
    """Render the content document and assemble the full page."""
    state: _State = ctx.obj
    if input is not None:
        state.cfg.source.content = _cli_path(input)
    if header is not None:
        state.cfg.source.header = _cli_path(header)
    if footer is not None:
        state.cfg.source.footer = _cli_path(footer)
    if body is not None:
        state.cfg.output.body = _cli_path(body)
    if output is not None:
        state.cfg.output.page = _cli_path(output)
    _run_page(state)


@app.command("body")
def body_command(
    ctx: typer.Context,
    input: Path | None = typer.Option(None, "--input", "-i", help="Markdown content document."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Rendered body fragment path."),
):
    """Render the content document to the body fragment only."""
    state: _State = ctx.obj
    if input is not None:
        state.cfg.source.content = _cli_path(input)
    if output is not None:
        state.cfg.output.body = _cli_path(output)
    try:
        result = build_body(state.cfg, state.logger)
    except BuildError as exc:
        _fail(exc)
    console.print(f"Body rendered: {result.output}")


@app.command()
def css(
    ctx: typer.Context,
    theme: str | None = typer.Option(None, "--theme", "-t", help="Pygments theme name."),
    selector: str | None = typer.Option(None, "--selector", help="CSS selector prefix."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Stylesheet path."),
):
    """Write the syntax-highlighting stylesheet."""
    state: _State = ctx.obj
    if theme:
        state.cfg.style.theme = theme
    if selector is not None:
        state.cfg.style.selector = selector
    if output is not None:
        state.cfg.style.output = _cli_path(output)
    try:
        result = build_stylesheet(state.cfg, state.logger)
    except BuildError as exc:
        _fail(exc)
    console.print(f"Stylesheet generated: {result.output}")


@app.command()
def themes():
    """List the installed Pygments themes."""
    for name in available_themes():
        console.print(name, highlight=False)


def _run_page(state: _State) -> None:
    try:
        result = build_page(state.cfg, state.logger, show_progress=state.progress, console=console)
    except BuildError as exc:
        _fail(exc)
    console.print(f"Page generated: {result.output}")


def _cli_path(path: Path) -> str:
    # Command-line paths are relative to the working directory, not the config file.
    return str(path.absolute())


def _fail(exc: BuildError) -> NoReturn:
    console.print(f"[red]Build failed:[/red] {exc}", highlight=False)
    raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
