"""File helpers shared by the build steps."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from ..core.errors import MissingInputError


def require_file(path: Path, role: str = "input") -> Path:
    """Return ``path`` if it is an existing file, else raise MissingInputError."""
    if not path.is_file():
        raise MissingInputError(path, role)
    return path


def atomic_write_bytes(path: Path, data: bytes) -> int:
    """Write ``data`` to ``path`` in one step.

    The bytes go to a temporary file in the destination directory which then
    replaces ``path``, so readers never observe a partially written file.

    Returns:
        Number of bytes written
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return len(data)
