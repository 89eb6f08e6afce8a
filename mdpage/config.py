"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SourceConfig: Content document and static fragment paths
- OutputConfig: Generated body and page paths
- RenderConfig: Markdown extensions and their settings
- StyleConfig: Pygments theme and stylesheet path
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container

Defaults reproduce the classic layout of a single article directory:
readme.md + header.html + footer.html -> post.html -> full.html, and
codehilite.css for the "default" theme.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml


@dataclass
class SourceConfig:
    """Input file locations.

    Attributes:
        content: Markdown content document
        header: Static HTML fragment placed before the rendered body
        footer: Static HTML fragment placed after the rendered body
    """

    content: str = "readme.md"
    header: str = "header.html"
    footer: str = "footer.html"


@dataclass
class OutputConfig:
    """Generated file locations.

    Attributes:
        body: Rendered body fragment
        page: Assembled full page
    """

    body: str = "post.html"
    page: str = "full.html"


@dataclass
class RenderConfig:
    """Configuration for Markdown conversion.

    Attributes:
        extensions: Python-Markdown extension names, loaded in order
        extension_configs: Per-extension settings keyed by extension name
        output_format: Python-Markdown output format ("html" or "xhtml")
    """

    extensions: list[str] = field(
        default_factory=lambda: [
            "codehilite",
            "fenced_code",
            "markdown.extensions.toc",
            "markdown.extensions.tables",
        ]
    )
    extension_configs: dict[str, dict[str, Any]] = field(default_factory=dict)
    output_format: str = "html"


@dataclass
class StyleConfig:
    """Configuration for the highlighting stylesheet.

    Attributes:
        theme: Pygments style name
        selector: CSS selector prefix for every rule (matches codehilite's css_class)
        output: Stylesheet path
    """

    theme: str = "default"
    selector: str = ".codehilite"
    output: str = "codehilite.css"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file, relative to the base directory
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "build.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections.

    Attributes:
        base_dir: Directory that relative paths are resolved against
    """

    source: SourceConfig = field(default_factory=SourceConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    style: StyleConfig = field(default_factory=StyleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    base_dir: Path = field(default_factory=Path)

    def resolve(self, value: str | Path) -> Path:
        """Resolve a configured path against base_dir."""
        path = Path(value)
        if path.is_absolute():
            return path
        return self.base_dir / path


_SECTIONS: dict[str, type] = {
    "source": SourceConfig,
    "output": OutputConfig,
    "render": RenderConfig,
    "style": StyleConfig,
    "logging": LoggingConfig,
}


DEFAULT_CONFIG = AppConfig()


def load_config(path: str | None, base_dir: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    Relative paths in the result resolve against ``base_dir`` when given,
    otherwise against the config file's directory (or the current
    directory when no file is used).
    """
    if not path:
        cfg = _fromdict(_asdict(DEFAULT_CONFIG))
        cfg.base_dir = base_dir if base_dir is not None else Path(".")
        return cfg

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    cfg = _merge_config(DEFAULT_CONFIG, raw)
    cfg.base_dir = base_dir if base_dir is not None else Path(path).parent
    return cfg


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "source": {
            "content": cfg.source.content,
            "header": cfg.source.header,
            "footer": cfg.source.footer,
        },
        "output": {
            "body": cfg.output.body,
            "page": cfg.output.page,
        },
        "render": {
            "extensions": list(cfg.render.extensions),
            "extension_configs": {
                name: dict(options)
                for name, options in cfg.render.extension_configs.items()
            },
            "output_format": cfg.render.output_format,
        },
        "style": {
            "theme": cfg.style.theme,
            "selector": cfg.style.selector,
            "output": cfg.style.output,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    sections = {}
    for name, section_cls in _SECTIONS.items():
        section_data = data.get(name) or {}
        if not isinstance(section_data, dict):
            raise ValueError(f"Config section '{name}' must be a mapping")
        known = {f.name for f in fields(section_cls)}
        unknown = sorted(set(section_data) - known)
        if unknown:
            raise ValueError(
                f"Unknown option(s) in config section '{name}': {', '.join(unknown)}"
            )
        defaults = section_cls()
        for key, value in section_data.items():
            expected = type(getattr(defaults, key))
            if not isinstance(value, expected) or (expected is not bool and isinstance(value, bool)):
                raise ValueError(
                    f"Config option '{name}.{key}' must be of type {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        sections[name] = section_cls(**section_data)
    return AppConfig(**sections)
