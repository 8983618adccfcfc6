"""Tests for length, slicing, search and split (core/ops.py).

Every test is a pure function call.  Cases that matter for the
byte/code-point distinction are run twice — once through the normal
dispatch and once with the ``force_general_path`` fixture.
"""

from __future__ import annotations

import pytest

from mbtext.core.ops import (
    ord,
    str_split,
    strlen,
    strpos,
    strrpos,
    substr,
    substr_replace,
)
from mbtext.exceptions import (
    InvalidArgumentError,
    InvalidLeadByteError,
    MalformedSequenceError,
    TruncatedSequenceError,
)

CAFE = "café crème".encode()


# ---------------------------------------------------------------------------
# strlen
# ---------------------------------------------------------------------------

class TestStrlen:
    def test_ascii(self) -> None:
        assert strlen(b"hello") == 5

    def test_multibyte(self) -> None:
        assert strlen(CAFE) == 10
        assert len(CAFE) == 12

    def test_empty(self) -> None:
        assert strlen(b"") == 0

    def test_malformed(self) -> None:
        with pytest.raises(MalformedSequenceError):
            strlen(b"abc\xe2\x9c")

    def test_general_path_on_ascii(self, force_general_path: None) -> None:
        assert strlen(b"hello") == 5


# ---------------------------------------------------------------------------
# substr
# ---------------------------------------------------------------------------

class TestSubstr:
    @pytest.mark.parametrize(
        ("start", "length", "expected"),
        [
            (0, None, "café crème"),
            (0, 4, "café"),
            (3, 1, "é"),
            (5, None, "crème"),
            (-5, None, "crème"),
            (-5, 3, "crè"),
            (0, -6, "café"),
            (2, -2, "fé crè"),
            (-100, 2, "ca"),
            (10, None, ""),
            (42, 3, ""),
            (3, 0, ""),
            (6, -8, ""),
        ],
    )
    def test_multibyte_windows(
        self, start: int, length: int | None, expected: str
    ) -> None:
        assert substr(CAFE, start, length) == expected.encode()

    def test_ascii_matches_byte_slice(self) -> None:
        text = b"hello world"
        assert substr(text, 6) == b"world"
        assert substr(text, -5, 2) == b"wo"
        assert substr(text, 0, -6) == b"hello"

    def test_whole_string_round_trip(self) -> None:
        assert substr(CAFE, 0, strlen(CAFE)) == CAFE

    def test_empty_input(self) -> None:
        assert substr(b"", 0) == b""
        assert substr(b"", 0, strlen(b"")) == b""

    def test_never_splits_a_character(self) -> None:
        text = "✓✓✓".encode()
        assert substr(text, 1, 1) == "✓".encode()

    def test_general_path_on_ascii(self, force_general_path: None) -> None:
        assert substr(b"hello world", -5, 2) == b"wo"


# ---------------------------------------------------------------------------
# strpos / strrpos
# ---------------------------------------------------------------------------

class TestStrpos:
    def test_ascii(self) -> None:
        assert strpos(b"hello hello", b"llo") == 2

    def test_returns_codepoint_offset(self) -> None:
        assert strpos(CAFE, b"cr") == 5

    def test_multibyte_needle(self) -> None:
        assert strpos(CAFE, "è".encode()) == 7

    def test_offset(self) -> None:
        assert strpos("éaéa".encode(), b"a", 2) == 3

    def test_negative_offset(self) -> None:
        assert strpos("éaéa".encode(), "é".encode(), -2) == 2

    def test_offset_past_end(self) -> None:
        assert strpos(CAFE, b"c", 11) is None

    def test_not_found(self) -> None:
        assert strpos(CAFE, b"xyz") is None
        assert strpos(b"abc", b"z") is None

    def test_empty_needle_matches_at_offset(self) -> None:
        assert strpos(CAFE, b"", 3) == 3
        assert strpos(b"abc", b"", 1) == 1

    def test_substr_at_result_is_needle(self) -> None:
        needle = "crè".encode()
        position = strpos(CAFE, needle)
        assert position is not None
        assert substr(CAFE, position, strlen(needle)) == needle

    def test_malformed_needle(self) -> None:
        with pytest.raises(MalformedSequenceError):
            strpos(CAFE, b"\xa9")

    def test_general_path_on_ascii(self, force_general_path: None) -> None:
        assert strpos(b"hello hello", b"llo", 3) == 8


class TestStrrpos:
    def test_ascii(self) -> None:
        assert strrpos(b"hello hello", b"llo") == 8

    def test_returns_codepoint_offset(self) -> None:
        assert strrpos("é-é-é".encode(), "é".encode()) == 4

    def test_offset_limits_search(self) -> None:
        assert strrpos("é-é-é".encode(), b"-", 2) == 3
        assert strrpos("é-é-é".encode(), b"-", 4) is None

    def test_negative_offset(self) -> None:
        assert strrpos("é-é-é".encode(), b"-", -2) == 3
        assert strrpos("é-é-é".encode(), b"-", -1) is None

    def test_not_found(self) -> None:
        assert strrpos(CAFE, b"q") is None

    def test_empty_needle_matches_at_end(self) -> None:
        assert strrpos(CAFE, b"") == strlen(CAFE)

    def test_general_path_on_ascii(self, force_general_path: None) -> None:
        assert strrpos(b"a-b-c", b"-") == 3


# ---------------------------------------------------------------------------
# str_split
# ---------------------------------------------------------------------------

class TestStrSplit:
    def test_checkmark_chunks_on_codepoint_boundaries(self) -> None:
        chunks = str_split("ab✓cd".encode(), 2)
        assert chunks == [b"ab", "✓c".encode(), b"d"]

    def test_default_chunk_size(self) -> None:
        assert str_split("né".encode()) == [b"n", "é".encode()]

    def test_ascii(self) -> None:
        assert str_split(b"abcde", 2) == [b"ab", b"cd", b"e"]

    def test_short_input_is_single_chunk(self) -> None:
        assert str_split("né".encode(), 5) == ["né".encode()]
        assert str_split(b"ab", 2) == [b"ab"]

    def test_empty_input(self) -> None:
        assert str_split(b"") == [b""]

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_chunk_size(self, size: int) -> None:
        with pytest.raises(InvalidArgumentError):
            str_split(b"abc", size)

    def test_invalid_chunk_size_checked_before_dispatch(self) -> None:
        with pytest.raises(InvalidArgumentError):
            str_split("é".encode(), 0)

    def test_join_preserves_length(self) -> None:
        for size in range(1, 6):
            chunks = str_split(CAFE, size)
            assert strlen(b"".join(chunks)) == strlen(CAFE)
            assert all(strlen(chunk) <= size for chunk in chunks)

    def test_general_path_on_ascii(self, force_general_path: None) -> None:
        assert str_split(b"abcde", 2) == [b"ab", b"cd", b"e"]


# ---------------------------------------------------------------------------
# substr_replace
# ---------------------------------------------------------------------------

class TestSubstrReplace:
    TEXT = "añb".encode()

    def test_offset_zero(self) -> None:
        assert substr_replace(self.TEXT, b"X", 0, 1) == "Xñb".encode()

    def test_offset_zero_without_length_replaces_everything(self) -> None:
        assert substr_replace(self.TEXT, b"X", 0) == b"X"

    def test_offset_at_length_appends(self) -> None:
        assert substr_replace(self.TEXT, "é".encode(), 3) == "añbé".encode()
        assert substr_replace(self.TEXT, "é".encode(), 3, 2) == "añbé".encode()

    def test_offset_past_length_clamps_and_appends(self) -> None:
        assert substr_replace(self.TEXT, b"!", 10) == "añb!".encode()
        assert substr_replace(self.TEXT, b"!", 10, 1) == "añb!".encode()

    def test_replaces_multibyte_character(self) -> None:
        assert substr_replace(self.TEXT, b"n", 1, 1) == b"anb"

    def test_insertion_with_zero_length(self) -> None:
        assert substr_replace(self.TEXT, "✓".encode(), 1, 0) == "a✓ñb".encode()

    def test_negative_offset(self) -> None:
        assert substr_replace(self.TEXT, b"N", -2, 1) == b"aNb"

    def test_negative_length(self) -> None:
        assert substr_replace(self.TEXT, b"-", 0, -1) == b"-b"

    def test_ascii_subject_multibyte_replacement(self) -> None:
        assert substr_replace(b"abc", "é".encode(), 1, 1) == "aéc".encode()

    def test_malformed_replacement(self) -> None:
        with pytest.raises(MalformedSequenceError):
            substr_replace(self.TEXT, b"\xc3", 0)

    def test_general_path_on_ascii(self, force_general_path: None) -> None:
        assert substr_replace(b"hello", b"J", 0, 1) == b"Jello"
        assert substr_replace(b"hello", b"!", 99) == b"hello!"


# ---------------------------------------------------------------------------
# ord
# ---------------------------------------------------------------------------

class TestOrd:
    def test_e_acute(self) -> None:
        assert ord(b"\xc3\xa9") == 233

    def test_reads_only_leading_codepoint(self) -> None:
        assert ord("✓abc".encode()) == 0x2713

    def test_ascii(self) -> None:
        assert ord(b"A") == 65

    def test_legacy_six_byte_form(self) -> None:
        assert ord(b"\xfd\xbf\xbf\xbf\xbf\xbf") == 0x7FFFFFFF

    def test_truncated(self) -> None:
        with pytest.raises(TruncatedSequenceError):
            ord(b"\xe2\x9c")

    def test_invalid_lead(self) -> None:
        with pytest.raises(InvalidLeadByteError):
            ord(b"\xff")

    def test_empty(self) -> None:
        with pytest.raises(TruncatedSequenceError):
            ord(b"")
