"""Value types shared across the core layer.

All models are **frozen**: immutable value objects with no behaviour
beyond data access.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """One decoded code point and the number of bytes it occupied."""

    codepoint: int
    """Numeric value of the decoded character."""

    length: int
    """Bytes consumed from the buffer, 1 through 6."""


class PadType(enum.Enum):
    """Which side(s) :func:`~mbtext.core.transform.str_pad` fills."""

    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"
