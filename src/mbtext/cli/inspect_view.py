"""``mbtext inspect`` — per-code-point breakdown of a UTF-8 buffer.

This module is responsible for:

* Decoding the buffer one code point at a time.
* Rendering a Rich table of index, byte offset, raw bytes, code point
  and glyph for every character.

No string operations live here; decoding errors propagate to the CLI
error boundary untouched.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from mbtext.cli.console import console
from mbtext.core.codec import decode_at
from mbtext.exceptions import MissingDependencyError
from mbtext.utils.formatting import display, truncate

_TITLE_LIMIT: int = 40


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for code-point rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def _import_rich_escape() -> Any:
    """Import rich markup escaping lazily for user-supplied text."""
    try:
        from rich.markup import escape
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return escape


@dataclass(frozen=True, slots=True)
class CodepointRow:
    """One decoded character, ready for display."""

    index: int
    byte_offset: int
    raw: bytes
    codepoint: int


def iter_rows(buffer: bytes) -> Iterator[CodepointRow]:
    """Decode *buffer* into display rows, raising on malformed input."""
    offset = 0
    position = 0
    while offset < len(buffer):
        decoded = decode_at(buffer, offset)
        yield CodepointRow(
            index=position,
            byte_offset=offset,
            raw=buffer[offset:offset + decoded.length],
            codepoint=decoded.codepoint,
        )
        offset += decoded.length
        position += 1


# ---------------------------------------------------------------------------
# Presentation helpers (pure, no I/O)
# ---------------------------------------------------------------------------

def _format_bytes(raw: bytes) -> str:
    """Render raw bytes as ``"C3 A9"``."""
    return " ".join(f"{byte:02X}" for byte in raw)


def _format_codepoint(codepoint: int) -> str:
    """Render a code point as ``"U+00E9"``."""
    return f"U+{codepoint:04X}"


def _format_glyph(codepoint: int) -> str:
    """Render a printable glyph, or a category tag for the rest."""
    if codepoint > 0x10FFFF:
        return "<legacy>"
    char = chr(codepoint)
    category = unicodedata.category(char)
    if category.startswith(("C", "Z")) and char != " ":
        return f"<{category}>"
    return char


# ---------------------------------------------------------------------------
# Rich table display
# ---------------------------------------------------------------------------

def render_inspection(buffer: bytes) -> int:
    """Print the code-point table for *buffer* and return the row count."""
    table_class = _import_rich_table()
    escape = _import_rich_escape()
    rows = list(iter_rows(buffer))

    table = table_class(
        title=f"\"{escape(display(truncate(buffer, _TITLE_LIMIT)))}\"",
        caption=f"{len(rows)} code points, {len(buffer)} bytes",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=4)
    table.add_column("Byte", justify="right", min_width=5)
    table.add_column("Bytes", justify="left", min_width=12)
    table.add_column("Code point", justify="left", min_width=10)
    table.add_column("Glyph", justify="center", min_width=6)

    for row in rows:
        table.add_row(
            str(row.index),
            str(row.byte_offset),
            _format_bytes(row.raw),
            _format_codepoint(row.codepoint),
            escape(_format_glyph(row.codepoint)),
        )

    console.print()
    console.print(table)
    console.print()
    return len(rows)
