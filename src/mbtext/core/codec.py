"""Single code point UTF-8 decoding and encoding.

The lead byte alone determines the sequence length:

======================  ======  ==============================
Lead byte               Length  Notes
======================  ======  ==============================
``0x00``–``0x7F``       1       value is the byte itself
``0x80``–``0xBF``       —       stray continuation byte
``0xC0``–``0xDF``       2
``0xE0``–``0xEF``       3
``0xF0``–``0xF7``       4
``0xF8``–``0xFB``       5       legacy form
``0xFC``–``0xFD``       6       legacy form
``0xFE``–``0xFF``       —       reserved, always invalid
======================  ======  ==============================

The 5- and 6-byte forms predate the 4-byte cap of RFC 3629 and are
still accepted so that historical data keeps decoding.  Over-long
encodings are not rejected.
"""

from __future__ import annotations

from mbtext.core.models import DecodeResult
from mbtext.exceptions import (
    InvalidArgumentError,
    InvalidLeadByteError,
    MalformedSequenceError,
    TruncatedSequenceError,
)

MAX_CODEPOINT: int = 0x7FFFFFFF
"""Largest value representable by the 6-byte legacy form."""

_CONTINUATION: int = 0
_RESERVED: int = -1

# (first lead byte, last lead byte, sequence length)
_LEAD_CLASSES: tuple[tuple[int, int, int], ...] = (
    (0x00, 0x7F, 1),
    (0x80, 0xBF, _CONTINUATION),
    (0xC0, 0xDF, 2),
    (0xE0, 0xEF, 3),
    (0xF0, 0xF7, 4),
    (0xF8, 0xFB, 5),
    (0xFC, 0xFD, 6),
    (0xFE, 0xFF, _RESERVED),
)


def _build_length_table() -> tuple[int, ...]:
    table = [0] * 256
    for first, last, length in _LEAD_CLASSES:
        for lead in range(first, last + 1):
            table[lead] = length
    return tuple(table)


_SEQUENCE_LENGTH: tuple[int, ...] = _build_length_table()

# Payload mask applied to the lead byte, keyed by sequence length.
_LEAD_PAYLOAD: dict[int, int] = {2: 0x1F, 3: 0x0F, 4: 0x07, 5: 0x03, 6: 0x01}

# Marker bits of the lead byte, keyed by sequence length.
_LEAD_MARKER: dict[int, int] = {2: 0xC0, 3: 0xE0, 4: 0xF0, 5: 0xF8, 6: 0xFC}

# Exclusive upper bound of the code points each length can encode.
_ENCODE_LIMITS: tuple[tuple[int, int], ...] = (
    (0x80, 1),
    (0x800, 2),
    (0x10000, 3),
    (0x200000, 4),
    (0x4000000, 5),
    (MAX_CODEPOINT + 1, 6),
)


def sequence_length(lead: int, *, offset: int = 0) -> int:
    """Return the total length of the sequence introduced by *lead*.

    Raises
    ------
    MalformedSequenceError
        If *lead* is a continuation byte.
    InvalidLeadByteError
        If *lead* is ``0xFE`` or ``0xFF``.
    """
    length = _SEQUENCE_LENGTH[lead]
    if length == _CONTINUATION:
        raise MalformedSequenceError(
            f"Unexpected continuation byte 0x{lead:02X} at byte {offset}",
            offset=offset,
        )
    if length == _RESERVED:
        raise InvalidLeadByteError(lead=lead, offset=offset)
    return length


def decode_at(buffer: bytes, byte_offset: int = 0) -> DecodeResult:
    """Decode the code point starting at *byte_offset* in *buffer*.

    Returns
    -------
    DecodeResult
        The code point value and the number of bytes it occupies.

    Raises
    ------
    InvalidArgumentError
        If *byte_offset* is negative.
    TruncatedSequenceError
        If the buffer ends before the sequence is complete (including an
        offset at the very end of the buffer).
    InvalidLeadByteError
        If the lead byte is ``0xFE`` or ``0xFF``.
    MalformedSequenceError
        If the lead byte is a continuation byte, or a continuation byte
        falls outside ``0x80``–``0xBF``.
    """
    if byte_offset < 0:
        raise InvalidArgumentError(f"Byte offset must be >= 0, got {byte_offset}")

    available = len(buffer) - byte_offset
    if available <= 0:
        raise TruncatedSequenceError(expected=1, available=0, offset=byte_offset)

    lead = buffer[byte_offset]
    if lead < 0x80:
        return DecodeResult(lead, 1)

    length = sequence_length(lead, offset=byte_offset)
    if available < length:
        raise TruncatedSequenceError(
            expected=length, available=available, offset=byte_offset,
        )

    value = lead & _LEAD_PAYLOAD[length]
    for position in range(byte_offset + 1, byte_offset + length):
        byte = buffer[position]
        if not 0x80 <= byte <= 0xBF:
            raise MalformedSequenceError(
                f"Invalid continuation byte 0x{byte:02X} at byte {position} "
                f"in sequence starting at byte {byte_offset}",
                offset=byte_offset,
            )
        value = value * 64 + (byte - 128)
    return DecodeResult(value, length)


def encoded_length(codepoint: int) -> int:
    """Return how many bytes :func:`encode` produces for *codepoint*."""
    if codepoint < 0 or codepoint > MAX_CODEPOINT:
        raise InvalidArgumentError(
            f"Code point out of range: {codepoint}",
            hint=f"Valid code points are 0 through 0x{MAX_CODEPOINT:X}.",
        )
    for limit, length in _ENCODE_LIMITS:
        if codepoint < limit:
            return length
    raise AssertionError("unreachable")  # pragma: no cover


def encode(codepoint: int) -> bytes:
    """Encode *codepoint* as its shortest UTF-8 byte sequence.

    Values above U+10FFFF use the legacy 4-, 5- and 6-byte forms, which
    :func:`decode_at` reads back unchanged.

    Raises
    ------
    InvalidArgumentError
        If *codepoint* is negative or above ``0x7FFFFFFF``.
    """
    length = encoded_length(codepoint)
    if length == 1:
        return bytes((codepoint,))

    tail = bytearray()
    value = codepoint
    for _ in range(length - 1):
        tail.append(0x80 | (value & 0x3F))
        value >>= 6
    tail.append(_LEAD_MARKER[length] | value)
    tail.reverse()
    return bytes(tail)
