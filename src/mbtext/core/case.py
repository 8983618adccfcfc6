"""Case conversion and case-insensitive matching over UTF-8 buffers.

Case mapping is strictly one code point to one code point through
:mod:`mbtext.core.casemap`.  Because a mapped character may need a
different number of bytes than the original, positions found in a
lowered copy are converted to code-point offsets before being applied
to the original buffer.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from mbtext.core import index
from mbtext.core.casemap import lower_codepoint, upper_codepoint
from mbtext.core.classifier import all_ascii
from mbtext.core.codec import decode_at, encode

__all__: list[str] = [
    "str_ireplace",
    "strcasecmp",
    "stristr",
    "strtolower",
    "strtoupper",
    "ucfirst",
    "ucwords",
]

# Form feed, tab, vertical tab, line feed, carriage return, space.
WORD_BOUNDARIES: frozenset[int] = frozenset(b"\x0c\x09\x0b\x0a\x0d\x20")


def _map_codepoints(
    s: bytes,
    mapping: Callable[[int], int],
    *,
    select: Callable[[int, int], bool],
) -> bytes:
    """Apply *mapping* to the code points of *s* for which *select* holds.

    *select* receives the code-point position and the previous code
    point (``-1`` at the start).  Unchanged characters keep their
    original bytes.
    """
    out = bytearray()
    offset = 0
    position = 0
    previous = -1
    end = len(s)
    while offset < end:
        decoded = decode_at(s, offset)
        codepoint = decoded.codepoint
        mapped = mapping(codepoint) if select(position, previous) else codepoint
        if mapped == codepoint:
            out += s[offset:offset + decoded.length]
        else:
            out += encode(mapped)
        offset += decoded.length
        position += 1
        previous = codepoint
    return bytes(out)


def _every(position: int, previous: int) -> bool:
    return True


def _first(position: int, previous: int) -> bool:
    return position == 0


def _word_start(position: int, previous: int) -> bool:
    return position == 0 or previous in WORD_BOUNDARIES


def _sign(a: bytes, b: bytes) -> int:
    return (a > b) - (a < b)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

def strtolower(s: bytes) -> bytes:
    """Return *s* with every code point mapped to lowercase."""
    if all_ascii(s):
        return s.lower()
    return _map_codepoints(s, lower_codepoint, select=_every)


def strtoupper(s: bytes) -> bytes:
    """Return *s* with every code point mapped to uppercase."""
    if all_ascii(s):
        return s.upper()
    return _map_codepoints(s, upper_codepoint, select=_every)


def ucfirst(s: bytes) -> bytes:
    """Return *s* with its first code point uppercased."""
    if all_ascii(s):
        return s[:1].upper() + s[1:]
    return _map_codepoints(s, upper_codepoint, select=_first)


def ucwords(s: bytes) -> bytes:
    """Uppercase the first code point of every word in *s*.

    A word starts at the beginning of the string or right after one of
    form feed, tab, vertical tab, line feed, carriage return or space.
    """
    if all_ascii(s):
        out = bytearray(s)
        at_word_start = True
        for position, byte in enumerate(out):
            if at_word_start and 0x61 <= byte <= 0x7A:
                out[position] = byte - 0x20
            at_word_start = byte in WORD_BOUNDARIES
        return bytes(out)
    return _map_codepoints(s, upper_codepoint, select=_word_start)


# ---------------------------------------------------------------------------
# Case-insensitive comparison and search
# ---------------------------------------------------------------------------

def strcasecmp(s1: bytes, s2: bytes) -> int:
    """Three-way compare *s1* and *s2* ignoring case.

    Returns ``-1``, ``0`` or ``1``.  Lowercased buffers are compared byte
    by byte, which for UTF-8 is code-point order.
    """
    if all_ascii(s1, s2):
        return _sign(s1.lower(), s2.lower())
    return _sign(strtolower(s1), strtolower(s2))


def stristr(s: bytes, needle: bytes) -> bytes | None:
    """Return *s* from the first case-insensitive match of *needle* onward.

    Returns ``None`` when there is no match and *s* itself when *needle*
    is empty.
    """
    if all_ascii(s, needle):
        position = s.lower().find(needle.lower())
        return s[position:] if position >= 0 else None

    if not needle:
        return s
    lowered = strtolower(s)
    position = lowered.find(strtolower(needle))
    if position < 0:
        return None
    start = index.length(lowered[:position])
    return s[index.byte_offset_for(s, start):]


def str_ireplace(s: bytes, search: bytes, replacement: bytes) -> bytes:
    """Replace every case-insensitive occurrence of *search* in *s*.

    Matches are found left to right and never overlap.  An empty
    *search* leaves *s* unchanged.
    """
    if not search:
        return s

    if all_ascii(s, search):
        pattern = re.compile(re.escape(search), re.IGNORECASE)
        return pattern.sub(lambda _match: replacement, s)

    lowered = strtolower(s)
    target = strtolower(search)

    # Both copies hold the same code points, possibly at different byte
    # offsets; map lowered offsets to code-point positions, then back.
    original_starts = [*index.iter_boundaries(s), len(s)]
    lowered_positions = {
        offset: position
        for position, offset in enumerate(index.iter_boundaries(lowered))
    }
    lowered_positions[len(lowered)] = len(original_starts) - 1

    out = bytearray()
    copied = 0
    found = lowered.find(target)
    while found >= 0:
        match_end = found + len(target)
        begin = original_starts[lowered_positions[found]]
        end = original_starts[lowered_positions[match_end]]
        out += s[copied:begin]
        out += replacement
        copied = end
        found = lowered.find(target, match_end)
    out += s[copied:]
    return bytes(out)
