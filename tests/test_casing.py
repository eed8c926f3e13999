"""Unit tests for the code page case mapping.

WHY: Case mapping is the one place where this library deliberately
differs from ``str.upper()`` / ``str.lower()``. A wrong band edge silently
corrupts names and addresses in legacy exports.

HOW: Tests cover the byte tables over all 256 values, the band edges,
str vs bytes input, code page selection, and length preservation.

RULES:
- Expected bytes are written in hex to make band edges obvious.
- str tests pass the encoding explicitly unless testing the default.
"""

import pytest

from strutil.core.casing import (
    LOWER_TABLE,
    UPPER_TABLE,
    char_to_lower,
    char_to_upper,
    to_lower_case,
    to_upper_case,
)


def _legacy_upper(c):
    """Reference rule with the guard read as ``c != 0``."""
    if c != 0 and c >= 224:
        return c - 32
    return c - 32 if 0x61 <= c <= 0x7A else c


def _legacy_lower(c):
    if c != 0 and 192 <= c <= 223:
        return c + 32
    return c + 32 if 0x41 <= c <= 0x5A else c


class TestCharMapping:
    """char_to_upper / char_to_lower on single bytes."""

    def test_band_start(self):
        assert char_to_upper(0xE0) == 0xC0
        assert char_to_lower(0xC0) == 0xE0

    def test_accented_pairs(self, accented_pairs):
        for upper, lower in accented_pairs:
            assert char_to_upper(lower) == upper
            assert char_to_lower(upper) == lower

    def test_band_edges_applied_as_is(self):
        assert char_to_upper(0xFF) == 0xDF
        assert char_to_upper(0xF7) == 0xD7
        assert char_to_lower(0xDF) == 0xFF
        assert char_to_lower(0xD7) == 0xF7

    def test_ascii(self):
        assert char_to_upper(ord("a")) == ord("A")
        assert char_to_upper(ord("z")) == ord("Z")
        assert char_to_lower(ord("A")) == ord("a")
        assert char_to_upper(ord("1")) == ord("1")
        assert char_to_upper(0) == 0

    def test_high_range_outside_bands_unchanged(self):
        for c in range(0x80, 0xC0):
            assert char_to_upper(c) == c
            assert char_to_lower(c) == c

    def test_guard_readings_agree_on_every_byte(self):
        """The bitwise high-bit test and a non-zero test give identical tables."""
        assert UPPER_TABLE == bytes(_legacy_upper(c) for c in range(256))
        assert LOWER_TABLE == bytes(_legacy_lower(c) for c in range(256))

    def test_bytes_and_str_characters(self):
        assert char_to_upper(b"\xe9") == b"\xc9"
        assert char_to_lower(b"A") == b"a"
        assert char_to_upper("é") == "É"
        assert char_to_lower("Ñ") == "ñ"

    def test_bytearray_character_keeps_its_kind(self):
        result = char_to_upper(bytearray(b"\xe0"))
        assert isinstance(result, bytearray)
        assert result == bytearray(b"\xc0")

    def test_rejects_out_of_range_byte(self):
        with pytest.raises(ValueError):
            char_to_upper(256)
        with pytest.raises(ValueError):
            char_to_lower(-1)

    def test_rejects_multi_character_input(self):
        with pytest.raises(ValueError):
            char_to_upper("ab")


class TestStringMapping:
    """to_upper_case / to_lower_case on whole strings."""

    def test_latin1_text(self, latin1_sample):
        assert to_upper_case(latin1_sample["text"], encoding="latin-1") == latin1_sample["upper"]
        assert to_lower_case(latin1_sample["text"], encoding="latin-1") == latin1_sample["lower"]

    def test_length_preserved(self, latin1_sample):
        for text in (latin1_sample["text"], "", "ß", "straße", "ÿ"):
            assert len(to_upper_case(text, encoding="latin-1")) == len(text)
            assert len(to_lower_case(text, encoding="latin-1")) == len(text)

    def test_sharp_s_is_not_expanded(self):
        assert to_upper_case("straße", encoding="latin-1") == "STRAßE"

    def test_ascii_round_trip(self):
        text = "Hello, World! 123"
        upper = to_upper_case(text)
        assert upper == text.upper()
        assert to_upper_case(to_lower_case(upper)) == upper

    def test_accented_round_trip(self):
        text = "àéîõü"
        assert to_lower_case(to_upper_case(text, "latin-1"), "latin-1") == text

    def test_characters_outside_code_page_unchanged(self):
        assert to_upper_case("α€ŝ", encoding="latin-1") == "α€ŝ"

    def test_bytes_input(self):
        assert to_upper_case(b"caf\xe9") == b"CAF\xc9"
        assert to_lower_case(bytearray(b"CAF\xc9")) == b"caf\xe9"

    def test_input_not_mutated(self):
        data = bytearray(b"abc\xe0")
        result = to_upper_case(data)
        assert result == b"ABC\xc0"
        assert data == bytearray(b"abc\xe0")

    def test_cp1250_code_page(self):
        assert to_upper_case("řeka", encoding="cp1250") == "ŘEKA"
        assert to_lower_case("ŘEKA", encoding="cp1250") == "řeka"

    def test_cp1252_undefined_bytes_skipped(self):
        # 0x81 is undefined in cp1252; only defined characters are mapped
        assert to_upper_case("é", encoding="cp1252") == "É"

    def test_multibyte_encoding_rejected(self):
        with pytest.raises(ValueError):
            to_upper_case("abc", encoding="utf-8")
