"""
Shared utility functions.

This package contains utility code used across multiple
build steps.
"""

from .fs import atomic_write_bytes, require_file
from .logging import JsonlFormatter, log_event, setup_logging

__all__ = [
    "atomic_write_bytes",
    "require_file",
    "setup_logging",
    "log_event",
    "JsonlFormatter",
]
