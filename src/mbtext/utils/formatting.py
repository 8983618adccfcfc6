"""Truncation and terminal rendering of UTF-8 buffers."""

from __future__ import annotations

from mbtext.core.ops import strlen, substr
from mbtext.exceptions import InvalidArgumentError


def truncate(s: bytes, limit: int, suffix: bytes = b"...") -> bytes:
    """Shorten *s* to at most *limit* code points, *suffix* included.

    Never splits a multi-byte character.  When *suffix* alone does not
    fit, the text is cut without it.

    Raises
    ------
    InvalidArgumentError
        If *limit* is negative.
    """
    if limit < 0:
        raise InvalidArgumentError(f"Limit must be >= 0, got {limit}")
    if strlen(s) <= limit:
        return s
    room = limit - strlen(suffix)
    if room <= 0:
        return substr(s, 0, limit)
    return substr(s, 0, room) + suffix


def display(s: bytes) -> str:
    """Decode *s* for display, replacing undecodable bytes."""
    return s.decode("utf-8", errors="replace")
