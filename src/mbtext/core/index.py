"""Translation between code-point offsets and byte offsets.

Every function walks the buffer with :func:`~mbtext.core.codec.decode_at`
and lets its errors propagate unchanged, so an index is only ever
computed over well-formed input.  ASCII buffers short-circuit to plain
byte arithmetic.
"""

from __future__ import annotations

from collections.abc import Iterator

from mbtext.core.classifier import is_ascii
from mbtext.core.codec import decode_at
from mbtext.exceptions import InvalidArgumentError


def iter_boundaries(buffer: bytes) -> Iterator[int]:
    """Yield the byte offset at which each code point of *buffer* starts."""
    if is_ascii(buffer):
        yield from range(len(buffer))
        return

    offset = 0
    end = len(buffer)
    while offset < end:
        yield offset
        offset += decode_at(buffer, offset).length


def length(buffer: bytes) -> int:
    """Return the number of code points in *buffer*.

    Raises
    ------
    MalformedSequenceError
        If any sequence in *buffer* fails to decode.
    """
    if is_ascii(buffer):
        return len(buffer)

    count = 0
    offset = 0
    end = len(buffer)
    while offset < end:
        offset += decode_at(buffer, offset).length
        count += 1
    return count


def byte_offset_for(buffer: bytes, codepoint_offset: int) -> int:
    """Return the byte offset where code point *codepoint_offset* starts.

    Offsets at or beyond the end of the text resolve to ``len(buffer)``.
    """
    start, _ = byte_range(buffer, codepoint_offset, codepoint_offset)
    return start


def byte_range(buffer: bytes, start: int, end: int) -> tuple[int, int]:
    """Resolve the code-point range ``[start, end)`` to byte offsets.

    Both boundaries are found in a single walk from the start of the
    buffer.  Boundaries past the end clamp to ``len(buffer)``.

    Raises
    ------
    InvalidArgumentError
        If *start* is negative or *end* is smaller than *start*.
    """
    if start < 0 or end < start:
        raise InvalidArgumentError(
            f"Invalid code-point range [{start}, {end})",
        )
    if is_ascii(buffer):
        size = len(buffer)
        return min(start, size), min(end, size)

    byte_start = len(buffer)
    for index, offset in enumerate(iter_boundaries(buffer)):
        if index == start:
            byte_start = offset
        if index == end:
            return byte_start, offset
    return byte_start, len(buffer)


def to_codepoint_array(buffer: bytes) -> list[bytes]:
    """Split *buffer* into a list of one-code-point slices.

    One full pass; the result gives random access to characters for
    splice-style operations without re-decoding.
    """
    if is_ascii(buffer):
        return [buffer[i:i + 1] for i in range(len(buffer))]

    chars: list[bytes] = []
    offset = 0
    end = len(buffer)
    while offset < end:
        size = decode_at(buffer, offset).length
        chars.append(buffer[offset:offset + size])
        offset += size
    return chars
