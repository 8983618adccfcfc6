"""Tests for the per-code-point case tables (core/casemap.py)."""

from __future__ import annotations

import pytest

from mbtext.core.casemap import (
    case_tables,
    lower_codepoint,
    table_sizes,
    upper_codepoint,
)


class TestCaseTables:
    def test_built_once(self) -> None:
        assert case_tables() is case_tables()

    def test_sizes_are_populated(self) -> None:
        upper_count, lower_count = table_sizes()
        assert upper_count > 1000
        assert lower_count > 1000

    def test_ascii_letters(self) -> None:
        assert upper_codepoint(0x61) == 0x41
        assert lower_codepoint(0x41) == 0x61

    def test_latin_and_greek(self) -> None:
        assert upper_codepoint(0xE9) == 0xC9
        assert lower_codepoint(0x3A9) == 0x3C9

    def test_multi_codepoint_mappings_are_skipped(self) -> None:
        # "ß".upper() == "SS"
        assert upper_codepoint(0xDF) == 0xDF

    def test_uncased_maps_to_itself(self) -> None:
        assert upper_codepoint(0x2713) == 0x2713
        assert lower_codepoint(0x31) == 0x31

    def test_beyond_unicode_range_maps_to_itself(self) -> None:
        assert upper_codepoint(0x7FFFFFFF) == 0x7FFFFFFF

    def test_shared_tables_are_read_only(self) -> None:
        tables = case_tables()
        with pytest.raises(TypeError):
            tables.upper[0x61] = 0x5A  # type: ignore[index]
        with pytest.raises(TypeError):
            tables.lower[0x41] = 0x7A  # type: ignore[index]
        assert upper_codepoint(0x61) == 0x41
