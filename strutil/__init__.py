"""strutil: small string utilities for 8-bit Western European text.

WHY: Code that talks to legacy systems keeps needing the same handful of
helpers: format a number with a fixed number of decimals, read a number
back out of messy text without crashing, upper/lowercase text the way
Latin-1 and Windows-125x code pages define it, and dump bytes as hex.

HOW: All functions live in ``strutil.core`` and are re-exported here.
``strutil.cli`` exposes them on the command line via ``python -m strutil``.

RULES:
- Every public function is pure and safe to call from any thread
- The lenient conversions never raise on bad data; ``*_checked`` variants do
- Byte-oriented functions take ``str`` (via STRUTIL_ENCODING) or ``bytes``
"""

from strutil.core.casing import char_to_lower, char_to_upper, to_lower_case, to_upper_case
from strutil.core.conversion import (
    ConversionError,
    ConversionResult,
    from_string,
    from_string_checked,
    parse_scalar,
    to_string,
)
from strutil.core.hexenc import to_hex_string
from strutil.core.scalars import SCALAR_TYPES, ScalarType, resolve_scalar_type

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ConversionResult",
    "SCALAR_TYPES",
    "ScalarType",
    "char_to_lower",
    "char_to_upper",
    "from_string",
    "from_string_checked",
    "parse_scalar",
    "resolve_scalar_type",
    "to_hex_string",
    "to_lower_case",
    "to_string",
    "to_upper_case",
]
