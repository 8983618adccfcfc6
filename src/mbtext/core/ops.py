"""Length, slicing, searching and splitting over UTF-8 buffers.

Every function in this module is a **pure** transformation: no I/O,
no side effects.  Each one takes code-point offsets and returns
code-point offsets; byte offsets never leave this module.

Each operation has two explicit code paths: a byte-indexed path taken
when all string arguments are ASCII, and a decoding path for
everything else.  The two must agree on ASCII input.
"""

from __future__ import annotations

from mbtext.core import index
from mbtext.core.classifier import all_ascii
from mbtext.core.codec import decode_at
from mbtext.exceptions import InvalidArgumentError

__all__: list[str] = [
    "ord",
    "str_split",
    "strlen",
    "strpos",
    "strrpos",
    "substr",
    "substr_replace",
]


# ---------------------------------------------------------------------------
# Range normalisation (pure arithmetic on code-point counts)
# ---------------------------------------------------------------------------

def _slice_window(total: int, start: int, length: int | None) -> tuple[int, int]:
    """Resolve ``substr`` arguments to a ``[start, end)`` window.

    A start at or past *total* produces an empty window.
    """
    if start < 0:
        start = max(total + start, 0)
    if start >= total:
        return total, total

    if length is None:
        end = total
    elif length < 0:
        end = total + length
    else:
        end = min(start + length, total)
    return start, max(start, end)


def _splice_window(total: int, offset: int, length: int | None) -> tuple[int, int]:
    """Resolve ``substr_replace`` arguments to a ``[start, end)`` window.

    Unlike :func:`_slice_window`, an offset past *total* clamps to
    *total* so that the replacement is appended.
    """
    if offset < 0:
        offset = max(total + offset, 0)
    offset = min(offset, total)

    if length is None:
        end = total
    elif length < 0:
        end = total + length
    else:
        end = min(offset + length, total)
    return offset, max(offset, end)


def _search_start(total: int, offset: int) -> int | None:
    """Resolve a search offset, or ``None`` when it lies past the end."""
    if offset < 0:
        return max(total + offset, 0)
    if offset > total:
        return None
    return offset


# ---------------------------------------------------------------------------
# Length and slicing
# ---------------------------------------------------------------------------

def strlen(s: bytes) -> int:
    """Return the number of code points in *s*.

    Raises
    ------
    MalformedSequenceError
        If *s* is not well-formed UTF-8.
    """
    if all_ascii(s):
        return len(s)
    return index.length(s)


def substr(s: bytes, start: int, length: int | None = None) -> bytes:
    """Return the code-point slice of *s* described by *start*/*length*.

    * A negative *start* counts from the end, clamped to 0.
    * ``length=None`` runs to the end of *s*.
    * A negative *length* leaves that many code points off the end.
    * A *start* past the end yields ``b""``; it is not an error.
    """
    if all_ascii(s):
        begin, end = _slice_window(len(s), start, length)
        return s[begin:end]

    begin, end = _slice_window(index.length(s), start, length)
    if begin == end:
        return b""
    byte_begin, byte_end = index.byte_range(s, begin, end)
    return s[byte_begin:byte_end]


def substr_replace(
    s: bytes,
    replacement: bytes,
    offset: int,
    length: int | None = None,
) -> bytes:
    """Replace the code points ``[offset, offset + length)`` of *s*.

    ``length=None`` replaces through the end.  An *offset* past the end
    clamps to the end, appending *replacement*.  Negative values count
    from the end, as in :func:`substr`.
    """
    if all_ascii(s, replacement):
        begin, end = _splice_window(len(s), offset, length)
        return s[:begin] + replacement + s[end:]

    chars = index.to_codepoint_array(s)
    begin, end = _splice_window(len(chars), offset, length)
    chars[begin:end] = index.to_codepoint_array(replacement)
    return b"".join(chars)


def str_split(s: bytes, chunk_size: int = 1) -> list[bytes]:
    """Split *s* into chunks of *chunk_size* code points.

    The final chunk may be shorter.  When *s* holds no more than
    *chunk_size* code points the result is ``[s]``, which makes
    ``str_split(b"")`` equal to ``[b""]``.

    Raises
    ------
    InvalidArgumentError
        If *chunk_size* is below 1.
    """
    if chunk_size < 1:
        raise InvalidArgumentError(
            f"Chunk size must be at least 1, got {chunk_size}",
        )

    if all_ascii(s):
        if len(s) <= chunk_size:
            return [s]
        return [s[i:i + chunk_size] for i in range(0, len(s), chunk_size)]

    starts = [
        offset
        for position, offset in enumerate(index.iter_boundaries(s))
        if position % chunk_size == 0
    ]
    if len(starts) <= 1:
        return [s]
    starts.append(len(s))
    return [s[begin:end] for begin, end in zip(starts, starts[1:])]


# ---------------------------------------------------------------------------
# Searching
# ---------------------------------------------------------------------------

def strpos(s: bytes, needle: bytes, offset: int = 0) -> int | None:
    """Return the first code-point index ``>= offset`` of *needle* in *s*.

    Returns ``None`` when there is no match.  A negative *offset* counts
    from the end; an *offset* past the end never matches.
    """
    if all_ascii(s, needle):
        begin = _search_start(len(s), offset)
        if begin is None:
            return None
        position = s.find(needle, begin)
        return position if position >= 0 else None

    index.length(needle)  # rejects a malformed needle
    begin = _search_start(index.length(s), offset)
    if begin is None:
        return None
    byte_begin = index.byte_offset_for(s, begin)
    position = s.find(needle, byte_begin)
    if position < 0:
        return None
    return begin + index.length(s[byte_begin:position])


def strrpos(s: bytes, needle: bytes, offset: int = 0) -> int | None:
    """Return the last code-point index ``>= offset`` of *needle* in *s*.

    Same offset rules as :func:`strpos`.
    """
    if all_ascii(s, needle):
        begin = _search_start(len(s), offset)
        if begin is None:
            return None
        position = s.rfind(needle, begin)
        return position if position >= 0 else None

    index.length(needle)  # rejects a malformed needle
    begin = _search_start(index.length(s), offset)
    if begin is None:
        return None
    byte_begin = index.byte_offset_for(s, begin)
    position = s.rfind(needle, byte_begin)
    if position < 0:
        return None
    return begin + index.length(s[byte_begin:position])


# ---------------------------------------------------------------------------
# Ordinal decode
# ---------------------------------------------------------------------------

def ord(chunk: bytes) -> int:  # noqa: A001
    """Return the numeric value of the code point at the start of *chunk*.

    Fails exactly like ``decode_at(chunk, 0)`` on a truncated sequence or
    an invalid lead byte.
    """
    return decode_at(chunk, 0).codepoint
