"""Configuration constants and .env loading.

WHY: The case-mapping and hex-encoding functions work on bytes, but most
callers hand in ``str``. Which single-byte code page bridges the two is a
deployment decision, so it lives here rather than in the functions.

HOW: python-dotenv loads the .env file on import. Defaults are plain
module-level constants that environment variables can override.
``validate_encoding()`` rejects code pages the byte tables cannot use.

RULES:
- STRUTIL_ENCODING must name a single-byte code page (latin-1, cp1252, ...)
- STRUTIL_HEX_SEPARATOR is only the CLI default; the library default is ""
- STRUTIL_LOG_LEVEL is read by the CLI, never by library code
"""

from __future__ import annotations

import codecs
import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Code pages
# ---------------------------------------------------------------------------

SINGLE_BYTE_ENCODINGS: set[str] = {
    "iso8859-1", "iso8859-2", "iso8859-15",
    "cp1250", "cp1252", "cp1254", "cp1257",
}
"""Code pages with the 0xC0-0xDF / 0xE0-0xFF casing bands (normalized names)."""

DEFAULT_ENCODING = os.getenv("STRUTIL_ENCODING", "latin-1")
DEFAULT_HEX_SEPARATOR = os.getenv("STRUTIL_HEX_SEPARATOR", "")
LOG_LEVEL = os.getenv("STRUTIL_LOG_LEVEL", "WARNING").upper()


def validate_encoding(name: str) -> str:
    """Normalize a code page name and check it is usable for byte mapping.

    RULES:
    - Unknown codec names raise ValueError
    - Multi-byte codecs (utf-8, utf-16, ...) raise ValueError
    - Returns the codec's canonical name
    """
    try:
        canonical = codecs.lookup(name).name
    except LookupError:
        raise ValueError("Unknown encoding '{}'".format(name)) from None
    if canonical not in SINGLE_BYTE_ENCODINGS:
        raise ValueError(
            "Encoding '{}' is not a supported single-byte code page. "
            "Available: {}".format(name, ", ".join(sorted(SINGLE_BYTE_ENCODINGS)))
        )
    return canonical
