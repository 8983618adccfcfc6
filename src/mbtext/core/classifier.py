"""ASCII detection used to gate the byte-indexed fast paths.

For 7-bit ASCII text byte offsets and code-point offsets coincide, so
every operation in :mod:`mbtext.core` checks its string arguments here
before choosing between the byte-indexed and the decoding code path.
"""

from __future__ import annotations


def is_ascii(buffer: bytes) -> bool:
    """Return ``True`` iff every byte of *buffer* is below ``0x80``.

    Stops at the first non-ASCII byte.  An empty buffer is ASCII.
    """
    return buffer.isascii()


def all_ascii(*buffers: bytes) -> bool:
    """Return ``True`` iff every buffer in *buffers* is pure ASCII."""
    return all(is_ascii(buffer) for buffer in buffers)
