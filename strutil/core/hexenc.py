"""Hex encoding of string bytes.

WHY: Logs and protocol dumps need the raw byte values of a string in a
form that survives any terminal: two uppercase hex digits per byte,
optionally separated.

HOW: ``str`` input is encoded with the configured single-byte code page
(unencodable characters become "?"), then each byte is formatted with
``"{:02X}"`` and followed by the separator.

RULES:
- Two uppercase digits per byte, no "0x" prefix
- The separator follows every byte, the last one included
- trailing_separator=False drops the final separator only
- Empty input yields ""
"""

from __future__ import annotations

from typing import Union

from strutil.config import DEFAULT_ENCODING, validate_encoding


def to_hex_string(
    text: Union[str, bytes, bytearray],
    separator: str = "",
    encoding: str | None = None,
    trailing_separator: bool = True,
) -> str:
    """Encode each byte of ``text`` as two uppercase hex digits.

    Args:
        text: ``str`` or ``bytes``.
        separator: Text emitted after each byte.
        encoding: Code page for ``str`` input; defaults to STRUTIL_ENCODING.
        trailing_separator: Keep the separator after the final byte.

    Returns:
        ``to_hex_string("AB", "-") == "41-42-"``;
        with ``trailing_separator=False`` it is ``"41-42"``.
    """
    if isinstance(text, str):
        codepage = validate_encoding(encoding or DEFAULT_ENCODING)
        data = text.encode(codepage, errors="replace")
    else:
        data = bytes(text)

    if not trailing_separator:
        return separator.join("{:02X}".format(b) for b in data)
    return "".join("{:02X}{}".format(b, separator) for b in data)
