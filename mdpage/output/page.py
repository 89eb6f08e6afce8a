"""
Full page assembly.

The page is the header fragment, the rendered body and the footer fragment
joined byte for byte. Nothing is inserted between them and nothing is
re-encoded, so the output starts with exactly the header bytes and ends
with exactly the footer bytes.
"""

from __future__ import annotations

from pathlib import Path

from ..utils.fs import atomic_write_bytes, require_file


def assemble_page(header: bytes, body: bytes, footer: bytes) -> bytes:
    """Concatenate the three fragments in order."""
    return b"".join((header, body, footer))


def write_page(header_path: Path, body_path: Path, footer_path: Path, output_path: Path) -> int:
    """Assemble the page from fragment files and write it to ``output_path``.

    Every fragment is checked and read before anything is written; a missing
    fragment raises MissingInputError and leaves ``output_path`` untouched.

    Returns:
        Number of bytes written
    """
    parts = []
    for path, role in ((header_path, "header"), (body_path, "body"), (footer_path, "footer")):
        require_file(path, role)
        parts.append(path.read_bytes())
    return atomic_write_bytes(output_path, assemble_page(*parts))
