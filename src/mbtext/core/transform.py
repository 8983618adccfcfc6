"""Reversal, trimming, padding, stripping and code-point conversion."""

from __future__ import annotations

import re
from collections.abc import Iterable

from mbtext.core import index
from mbtext.core.classifier import all_ascii
from mbtext.core.codec import decode_at, encode
from mbtext.core.models import PadType
from mbtext.exceptions import InvalidArgumentError

__all__: list[str] = [
    "from_unicode",
    "ltrim",
    "rtrim",
    "str_pad",
    "strip_ascii_ctrl",
    "strip_non_ascii",
    "strrev",
    "to_unicode",
    "trim",
]

DEFAULT_TRIM_CHARS: bytes = b" \t\n\r\x00\x0b"

# None of these bytes can occur inside a multi-byte sequence, so both
# patterns are safe to run directly over UTF-8.
_ASCII_CTRL = re.compile(rb"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]+")
_NON_ASCII = re.compile(rb"[\x80-\xff]+")


def strrev(s: bytes) -> bytes:
    """Return *s* with its code points in reverse order."""
    if all_ascii(s):
        return s[::-1]
    return b"".join(reversed(index.to_codepoint_array(s)))


# ---------------------------------------------------------------------------
# Trimming
# ---------------------------------------------------------------------------

def _strip(s: bytes, chars: bytes | None, *, left: bool, right: bool) -> bytes:
    if chars is None:
        chars = DEFAULT_TRIM_CHARS

    if all_ascii(s, chars):
        if left and right:
            return s.strip(chars)
        return s.lstrip(chars) if left else s.rstrip(chars)

    strip_set = set(index.to_codepoint_array(chars))
    units = index.to_codepoint_array(s)
    begin, end = 0, len(units)
    if left:
        while begin < end and units[begin] in strip_set:
            begin += 1
    if right:
        while end > begin and units[end - 1] in strip_set:
            end -= 1
    return b"".join(units[begin:end])


def trim(s: bytes, chars: bytes | None = None) -> bytes:
    """Strip code points listed in *chars* from both ends of *s*.

    *chars* defaults to space, tab, line feed, carriage return, NUL and
    vertical tab.
    """
    return _strip(s, chars, left=True, right=True)


def ltrim(s: bytes, chars: bytes | None = None) -> bytes:
    """Strip code points listed in *chars* from the start of *s*."""
    return _strip(s, chars, left=True, right=False)


def rtrim(s: bytes, chars: bytes | None = None) -> bytes:
    """Strip code points listed in *chars* from the end of *s*."""
    return _strip(s, chars, left=False, right=True)


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------

def _repeat_to(units: list[bytes], count: int) -> bytes:
    """Cycle through *units* until *count* code points are produced."""
    whole, rest = divmod(count, len(units))
    return b"".join(units) * whole + b"".join(units[:rest])


def str_pad(
    s: bytes,
    length: int,
    pad: bytes = b" ",
    pad_type: PadType = PadType.RIGHT,
) -> bytes:
    """Pad *s* with *pad* up to *length* code points.

    For :attr:`PadType.BOTH` the left side receives the smaller half of
    the padding.  *s* is returned unchanged when it is already at least
    *length* code points long.

    Raises
    ------
    InvalidArgumentError
        If *pad* is empty.
    """
    if not pad:
        raise InvalidArgumentError("Padding must not be empty")

    if all_ascii(s, pad):
        missing = length - len(s)
        pad_units = [pad[i:i + 1] for i in range(len(pad))]
    else:
        missing = length - index.length(s)
        pad_units = index.to_codepoint_array(pad)
    if missing <= 0:
        return s

    if pad_type is PadType.LEFT:
        return _repeat_to(pad_units, missing) + s
    if pad_type is PadType.RIGHT:
        return s + _repeat_to(pad_units, missing)
    left = missing // 2
    return _repeat_to(pad_units, left) + s + _repeat_to(pad_units, missing - left)


# ---------------------------------------------------------------------------
# Byte-class stripping
# ---------------------------------------------------------------------------

def strip_ascii_ctrl(s: bytes) -> bytes:
    """Remove ASCII control bytes, keeping tab, line feed and carriage return."""
    return _ASCII_CTRL.sub(b"", s)


def strip_non_ascii(s: bytes) -> bytes:
    """Remove every byte at or above ``0x80``."""
    return _NON_ASCII.sub(b"", s)


# ---------------------------------------------------------------------------
# Code-point arrays
# ---------------------------------------------------------------------------

def to_unicode(s: bytes) -> list[int]:
    """Return the code-point values of *s*, in order."""
    if all_ascii(s):
        return list(s)

    codepoints: list[int] = []
    offset = 0
    end = len(s)
    while offset < end:
        decoded = decode_at(s, offset)
        codepoints.append(decoded.codepoint)
        offset += decoded.length
    return codepoints


def from_unicode(codepoints: Iterable[int]) -> bytes:
    """Encode *codepoints* and join them into one UTF-8 buffer.

    Raises
    ------
    InvalidArgumentError
        If any value is outside ``0``–``0x7FFFFFFF``.
    """
    return b"".join(encode(codepoint) for codepoint in codepoints)
