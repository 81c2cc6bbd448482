"""
Tests for strutil case transforms, predicates and trimming.
"""

from __future__ import annotations

import re

import pytest

from src.components.strutil import (
    TextBuffer,
    capitalize,
    capitalize_first_char,
    compare_ignore_case,
    contains,
    ends_with,
    ends_with_char,
    is_alphanumeric,
    matches,
    starts_with,
    starts_with_char,
    to_lower,
    to_upper,
    trim,
    trim_copy,
    trim_left,
    trim_left_copy,
    trim_right,
    trim_right_copy,
)

# --- Case Transforms ---


class TestCase:
    """Test case conversion."""

    def test_to_lower(self) -> None:
        assert to_lower("HeLlo StRUTIL") == "hello strutil"
        assert to_lower("") == ""

    def test_to_upper(self) -> None:
        assert to_upper("HeLlo StRUTIL") == "HELLO STRUTIL"
        assert to_upper("") == ""

    def test_case_mapping_is_ascii_only(self) -> None:
        """Non-ASCII letters are left alone."""
        assert to_upper("straße é") == "STRAßE é"
        assert to_lower("ÉCOLE") == "École"

    def test_non_alphabetic_unchanged(self) -> None:
        assert to_upper("123 +-_!") == "123 +-_!"

    def test_capitalize(self) -> None:
        """First character upper, rest lower."""
        assert capitalize("heLlo StRUTIL") == "Hello strutil"
        assert capitalize("+ is an operator.") == "+ is an operator."
        assert capitalize("") == ""
        assert capitalize("a") == "A"

    def test_capitalize_first_char(self) -> None:
        assert capitalize_first_char("HeLlo StRUTIL") == "Hello strutil"
        assert capitalize_first_char("+ is an operator.") == "+ is an operator."
        assert capitalize_first_char("") == ""

    def test_capitalize_variants_agree_on_ascii(self) -> None:
        for text in ["wORLD", "x", "9lives", "ALL CAPS HERE"]:
            assert capitalize(text) == capitalize_first_char(text)


# --- Predicates ---


class TestContains:
    """Test substring and character search."""

    def test_contains_substring(self) -> None:
        assert contains("DiffuseTexture_m", "fuse") is True
        assert contains("", "") is True
        assert contains("DiffuseTexture_m", "fuser") is False
        assert contains("abc", "abc_") is False
        assert contains("", "abc") is False

    def test_contains_char(self) -> None:
        assert contains("DiffuseTexture_m", "f") is True
        assert contains("DiffuseTexture_m", "z") is False
        assert contains("", "z") is False


class TestCompareIgnoreCase:
    """Test case-insensitive comparison."""

    def test_equal_ignoring_case(self) -> None:
        assert compare_ignore_case("PoKeMoN!", "pokemon!") is True
        assert compare_ignore_case("", "") is True

    def test_not_equal(self) -> None:
        assert compare_ignore_case("", "non-empty string") is False
        assert compare_ignore_case("c1", "c2") is False
        assert compare_ignore_case("PoKeMoN!", "POKEMON") is False


class TestStartsEndsWith:
    """Test prefix and suffix checks."""

    @pytest.mark.parametrize(
        ("text", "prefix", "expected"),
        [
            ("m_DiffuseTexture", "m_", True),
            ("This is a simple test case", "This ", True),
            ("This is a simple test case", "This is a simple test case", True),
            ("This is a simple test case", "", True),
            ("", "", True),
            ("p_DiffuseTexture", "m_", False),
            ("This is a simple test case", "his ", False),
            ("abc", "abc_", False),
            ("abc", "_abc", False),
            ("", "m_", False),
        ],
    )
    def test_starts_with(self, text: str, prefix: str, expected: bool) -> None:
        assert starts_with(text, prefix) is expected

    @pytest.mark.parametrize(
        ("text", "suffix", "expected"),
        [
            ("DiffuseTexture_m", "_m", True),
            ("This is a simple test case", " test case", True),
            ("This is a simple test case", "This is a simple test case", True),
            ("This is a simple test case", "", True),
            ("", "", True),
            ("DiffuseTexture_p", "_m", False),
            ("This is a simple test case", "test cas", False),
            ("abc", "_abc", False),
            ("abc", "abc_", False),
            ("", "_m", False),
        ],
    )
    def test_ends_with(self, text: str, suffix: str, expected: bool) -> None:
        assert ends_with(text, suffix) is expected

    def test_starts_with_char(self) -> None:
        assert starts_with_char("m_DiffuseTexture", "m") is True
        assert starts_with_char("This is a simple test case", "T") is True
        assert starts_with_char("p_DiffuseTexture", "m") is False
        assert starts_with_char("This is a simple test case", "h") is False
        assert starts_with_char("", "m") is False

    def test_ends_with_char(self) -> None:
        assert ends_with_char("DiffuseTexture_m", "m") is True
        assert ends_with_char("This is a simple test case", "e") is True
        assert ends_with_char("DiffuseTexture_p", "m") is False
        assert ends_with_char("This is a simple test case", "s") is False
        assert ends_with_char("", "m") is False

    def test_char_form_rejects_strings(self) -> None:
        with pytest.raises(ValueError):
            starts_with_char("abc", "ab")
        with pytest.raises(ValueError):
            ends_with_char("abc", "")


class TestIsAlphanumeric:
    """Test the ASCII alphanumeric check."""

    @pytest.mark.parametrize(
        "text", ["", "a", "Z", "0", "9", "ioshnaet", "io9s8hnae8t0123456780"]
    )
    def test_alphanumeric(self, text: str) -> None:
        assert is_alphanumeric(text) is True

    @pytest.mark.parametrize(
        "text", ["_", "-", "A!Z", "0.", "aaaaaa ", " aaaaaa", "...", "é"]
    )
    def test_not_alphanumeric(self, text: str) -> None:
        assert is_alphanumeric(text) is False


class TestMatches:
    """Test whole-string regex matching."""

    EMAIL = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"

    def test_matches_email(self) -> None:
        assert matches("jon.doe@somehost.com", self.EMAIL) is True
        assert matches("jon.doe@", self.EMAIL) is False

    def test_compiled_pattern(self) -> None:
        assert matches("abc123", re.compile(r"[a-z]+\d+")) is True

    def test_full_match_not_search(self) -> None:
        """A match on part of the string is not enough."""
        assert matches("abc123", r"[a-z]+") is False
        assert matches("xabc", r"abc") is False


# --- Trimming ---


class TestTrimInPlace:
    """Test in-place trimming on a TextBuffer."""

    def test_trim_left(self) -> None:
        buffer = TextBuffer("   HeLlo StRUTIL ")
        trim_left(buffer)
        assert buffer.value == "HeLlo StRUTIL "

    def test_trim_right(self) -> None:
        buffer = TextBuffer(" HeLlo StRUTIL    ")
        trim_right(buffer)
        assert buffer.value == " HeLlo StRUTIL"

    def test_trim_both(self) -> None:
        buffer = TextBuffer("   HeLlo StRUTIL    ")
        trim(buffer)
        assert buffer.value == "HeLlo StRUTIL"

    def test_trim_all_whitespace_kinds(self) -> None:
        buffer = TextBuffer(" \t\n\r\f\vword\v\f\r\n\t ")
        trim(buffer)
        assert buffer.value == "word"

    def test_only_whitespace_becomes_empty(self) -> None:
        buffer = TextBuffer(" \t \n ")
        trim(buffer)
        assert buffer.value == ""

    def test_same_buffer_object(self) -> None:
        buffer = TextBuffer("  x  ")
        original = buffer
        trim(buffer)
        assert buffer is original
        assert str(buffer) == "x"

    def test_emptied_buffer_stays_truthy(self) -> None:
        """Emptiness is read from value, not from the buffer itself."""
        buffer = TextBuffer("   ")
        trim(buffer)
        assert buffer
        assert buffer.value == ""


class TestTrimCopy:
    """Test copying trim variants."""

    def test_trim_left_copy(self) -> None:
        assert trim_left_copy("     HeLlo StRUTIL") == "HeLlo StRUTIL"

    def test_trim_right_copy(self) -> None:
        assert trim_right_copy("HeLlo StRUTIL       ") == "HeLlo StRUTIL"

    def test_trim_copy(self) -> None:
        assert trim_copy("    HeLlo StRUTIL      ") == "HeLlo StRUTIL"

    def test_no_edge_whitespace_unchanged(self) -> None:
        assert trim_copy("a b\tc") == "a b\tc"

    def test_non_ascii_space_kept(self) -> None:
        """Only the C locale whitespace set is trimmed."""
        assert trim_copy("\u00a0x\u00a0") == "\u00a0x\u00a0"
