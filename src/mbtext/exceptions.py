"""Custom exception hierarchy for mbtext.

Every failure raised by the library inherits from :class:`MbTextError`.
Decode failures carry the absolute byte offset of the offending
sequence so callers can choose their own recovery policy; the library
never substitutes a replacement character.

Hierarchy
---------
MbTextError
├── DecodeError
│   └── MalformedSequenceError
│       ├── TruncatedSequenceError
│       └── InvalidLeadByteError
├── InvalidArgumentError
└── MissingDependencyError
"""

from __future__ import annotations


class MbTextError(Exception):
    """Base exception for all mbtext errors.

    The CLI error boundary renders these as a clean message plus an
    optional hint, without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Decoding --------------------------------------------------------------

class DecodeError(MbTextError):
    """Raised when a buffer cannot be decoded as UTF-8 at some offset."""

    def __init__(
        self,
        message: str,
        *,
        offset: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.offset: int = offset
        """Byte offset of the sequence that failed to decode."""


class MalformedSequenceError(DecodeError):
    """Raised for an unrecognised lead byte or a bad continuation byte."""


class TruncatedSequenceError(MalformedSequenceError):
    """Raised when the buffer ends before a multi-byte sequence completes."""

    def __init__(self, *, expected: int, available: int, offset: int) -> None:
        super().__init__(
            f"Short sequence at byte {offset}: "
            f"{expected} bytes expected, only {available} seen",
            offset=offset,
            hint="The input was probably cut in the middle of a character.",
        )
        self.expected: int = expected
        self.available: int = available


class InvalidLeadByteError(MalformedSequenceError):
    """Raised for a lead byte in the permanently reserved 0xFE–0xFF range."""

    def __init__(self, *, lead: int, offset: int) -> None:
        super().__init__(
            f"Invalid UTF-8 lead byte 0x{lead:02X} at byte {offset}",
            offset=offset,
        )
        self.lead: int = lead


# --- Arguments -------------------------------------------------------------

class InvalidArgumentError(MbTextError):
    """Raised when an operation receives an out-of-domain argument."""


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(MbTextError):
    """Raised when an optional CLI dependency (e.g. Rich) is not installed."""
