"""Per-code-point upper/lower case mapping tables.

The tables are derived once from the interpreter's Unicode database and
shared read-only by every caller.  Only one-to-one mappings are kept:
a character whose case partner spans several code points (``ß`` →
``SS``) maps to itself, as do values beyond ``sys.maxunicode`` that the
legacy decoder can produce.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Exclusive bound of the code points that carry a case mapping (Adlam
# ends at U+1E943).
_CASED_LIMIT: int = 0x1E944


@dataclass(frozen=True, slots=True)
class CaseTables:
    """Read-only upper and lower mappings, keyed by code point."""

    upper: Mapping[int, int]
    lower: Mapping[int, int]


@functools.cache
def case_tables() -> CaseTables:
    """Build the case tables on first use and return the shared instance."""
    upper: dict[int, int] = {}
    lower: dict[int, int] = {}
    for codepoint in range(_CASED_LIMIT):
        char = chr(codepoint)
        mapped_upper = char.upper()
        if len(mapped_upper) == 1 and mapped_upper != char:
            upper[codepoint] = ord(mapped_upper)
        mapped_lower = char.lower()
        if len(mapped_lower) == 1 and mapped_lower != char:
            lower[codepoint] = ord(mapped_lower)

    logger.debug(
        "Built case tables: %d upper and %d lower mappings",
        len(upper),
        len(lower),
    )
    return CaseTables(
        upper=MappingProxyType(upper),
        lower=MappingProxyType(lower),
    )


def upper_codepoint(codepoint: int) -> int:
    """Return the uppercase partner of *codepoint*, or *codepoint* itself."""
    return case_tables().upper.get(codepoint, codepoint)


def lower_codepoint(codepoint: int) -> int:
    """Return the lowercase partner of *codepoint*, or *codepoint* itself."""
    return case_tables().lower.get(codepoint, codepoint)


def table_sizes() -> tuple[int, int]:
    """Return ``(upper_count, lower_count)`` for diagnostics."""
    tables = case_tables()
    return len(tables.upper), len(tables.lower)
