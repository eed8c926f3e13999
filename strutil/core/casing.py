"""Latin-1 / Windows-125x aware case mapping.

WHY: ``str.upper()`` follows full Unicode rules (``"ß".upper() == "SS"``)
and changes string length. Data bound for 8-bit Western European code
pages needs the simple rule those code pages were laid out for: accented
capitals at 0xC0-0xDF sit exactly 32 below their lowercase forms at
0xE0-0xFF, the same offset as ASCII A-Z / a-z.

HOW: Two 256-entry byte tables are built once at import. ``bytes`` input
goes through ``bytes.translate()``. ``str`` input goes through a
``str.translate()`` mapping derived from the byte table for the chosen
code page, cached per code page.

RULES:
- char_to_upper: high bit set and value >= 0xE0 -> value - 32, else ASCII upper
- char_to_lower: high bit set and value in 0xC0-0xDF -> value + 32, else ASCII lower
- 0xFF maps to 0xDF and 0xF7 to 0xD7 (and back); the band is applied as is
- Length preserving: one byte / character in, one out
- Characters outside the code page are returned unchanged
"""

from __future__ import annotations

import functools
from typing import Union

from strutil.config import DEFAULT_ENCODING, validate_encoding

_HIGH_BIT = 0x80

CharLike = Union[int, bytes, str]
TextLike = Union[str, bytes, bytearray]


def _upper_byte(c: int) -> int:
    if c & _HIGH_BIT:
        if c >= 0xE0:
            return c - 32
        return c
    return ord(chr(c).upper())


def _lower_byte(c: int) -> int:
    if c & _HIGH_BIT:
        if 0xC0 <= c <= 0xDF:
            return c + 32
        return c
    return ord(chr(c).lower())


UPPER_TABLE = bytes(_upper_byte(c) for c in range(256))
LOWER_TABLE = bytes(_lower_byte(c) for c in range(256))


@functools.lru_cache(maxsize=None)
def _text_table(encoding: str, upper: bool) -> dict[int, int]:
    """Code point mapping for ``str.translate()`` under a single-byte code page."""
    table = UPPER_TABLE if upper else LOWER_TABLE
    mapping: dict[int, int] = {}
    for byte, mapped in enumerate(table):
        if byte == mapped:
            continue
        try:
            source = bytes([byte]).decode(encoding)
            target = bytes([mapped]).decode(encoding)
        except UnicodeDecodeError:
            # cp1252 and friends leave a few byte values undefined
            continue
        mapping[ord(source)] = ord(target)
    return mapping


def _map_char(ch: CharLike, upper: bool) -> CharLike:
    table = UPPER_TABLE if upper else LOWER_TABLE
    if isinstance(ch, int):
        if not 0 <= ch <= 0xFF:
            raise ValueError("byte value out of range 0-255: {}".format(ch))
        return table[ch]
    if len(ch) != 1:
        raise ValueError("expected a single character, got {!r}".format(ch))
    if isinstance(ch, (bytes, bytearray)):
        return type(ch)(bytes(ch).translate(table))
    return ch.translate(_text_table(validate_encoding(DEFAULT_ENCODING), upper))


def char_to_upper(ch: CharLike) -> CharLike:
    """Uppercase one byte (int 0-255, 1-byte bytes, or 1-char str).

    Returns the same kind it was given.
    """
    return _map_char(ch, upper=True)


def char_to_lower(ch: CharLike) -> CharLike:
    """Lowercase one byte (int 0-255, 1-byte bytes, or 1-char str)."""
    return _map_char(ch, upper=False)


def _map_text(text: TextLike, upper: bool, encoding: str | None) -> TextLike:
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).translate(UPPER_TABLE if upper else LOWER_TABLE)
    codepage = validate_encoding(encoding or DEFAULT_ENCODING)
    return text.translate(_text_table(codepage, upper))


def to_upper_case(text: TextLike, encoding: str | None = None) -> TextLike:
    """Return an uppercase copy of ``text`` using the code page casing bands.

    Args:
        text: ``str`` or ``bytes``; bytes come back as ``bytes``.
        encoding: Single-byte code page for ``str`` input. Defaults to
                  STRUTIL_ENCODING (latin-1).

    Raises:
        ValueError: If the encoding is not a supported single-byte code page.
    """
    return _map_text(text, True, encoding)


def to_lower_case(text: TextLike, encoding: str | None = None) -> TextLike:
    """Return a lowercase copy of ``text``. See ``to_upper_case()``."""
    return _map_text(text, False, encoding)
