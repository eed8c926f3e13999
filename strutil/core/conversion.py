"""Generic value-to-text and text-to-value conversion.

WHY: Callers need one pair of functions that turn any scalar into text
with controlled decimal precision, and pull a scalar back out of text
without having to guard every call with try/except. The lenient pair
never raises on bad data; a checked variant exists for callers that
want to know.

HOW: ``to_string()`` picks the ScalarType (explicit or inferred), stores
the value into it, and formats by kind: plain decimal for integers,
fixed-point for floating and decimal kinds. ``parse_scalar()`` matches the
longest valid prefix after leading whitespace and reports value, consumed
length, and error. ``from_string()`` and ``from_string_checked()`` are thin
wrappers over it.

RULES:
- precision > 0: exactly that many fractional digits
- precision == 0: the type's digits10 fractional digits
- Integral kinds ignore precision; booleans print "1" / "0"
- Values with no text form of their own print as an address ("0x...")
- No parseable prefix: the type's default value (0, 0.0, False, "")
- Out-of-range integers clamp to the type's nearest bound
- Trailing unparsed characters are ignored
- Only ASCII whitespace is skipped; integers of any length are accepted
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from strutil.core.scalars import (
    ScalarTarget,
    ScalarType,
    resolve_scalar_type,
    scalar_type_of,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOATING_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# C-locale isspace: U+00A0 and other Unicode spaces are data, not padding
_ASCII_SPACE = " \t\n\r\f\v"
_TOKEN_RE = re.compile(r"[^ \t\n\r\f\v]+")

# Stays under the interpreter's int/str digit limit (4300 by default)
_CHUNK_DIGITS = 4000
_CHUNK_BASE = 10 ** _CHUNK_DIGITS


class ConversionError(ValueError):
    """Raised by the checked conversion path when text holds no valid value."""


@dataclass
class ConversionResult:
    """Outcome of parsing text into a scalar.

    Attributes:
        value: The parsed value, or the type's default / clamped value when
               parsing failed. This is what ``from_string()`` returns.
        consumed: Characters of the input used, leading whitespace included.
        error: Description of the failure, None on success.
    """

    value: Any
    consumed: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# value -> text
# ---------------------------------------------------------------------------


def _has_text_form(value: Any) -> bool:
    cls = type(value)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def _address_of(value: Any) -> str:
    return "0x{:x}".format(id(value))


def to_string(
    value: Any,
    precision: int = 0,
    scalar_type: Optional[ScalarTarget] = None,
) -> str:
    """Convert a scalar value into text.

    Args:
        value: The value to format.
        precision: Fractional digits for floating/decimal kinds. 0 means
                   the type's full decimal digit capacity.
        scalar_type: Optional target type; the value is stored into it
                     first (wrapping integers, rounding float32).

    Returns:
        The formatted text. Never raises for unformattable values.

    Raises:
        ValueError: If precision is negative or scalar_type is unknown.
    """
    if precision < 0:
        raise ValueError("precision must be non-negative, got {}".format(precision))

    stype = resolve_scalar_type(scalar_type) if scalar_type is not None else scalar_type_of(value)
    if stype is None:
        if _has_text_form(value):
            return str(value)
        logger.debug("No text form for %s, falling back to its address", type(value).__name__)
        return _address_of(value)

    try:
        stored = stype.coerce(value)
    except (TypeError, ValueError, OverflowError, InvalidOperation):
        logger.debug("Cannot store %r as %s, falling back to its address", value, stype.name)
        return _address_of(value)

    return _format(stored, stype, precision or stype.digits10)


def _int_to_text(number: int) -> str:
    """Decimal text of an int of any size."""
    if -_CHUNK_BASE < number < _CHUNK_BASE:
        return str(number)
    sign = "-" if number < 0 else ""
    number = abs(number)
    chunks = []
    while number >= _CHUNK_BASE:
        number, low = divmod(number, _CHUNK_BASE)
        chunks.append(str(low).zfill(_CHUNK_DIGITS))
    chunks.append(str(number))
    return sign + "".join(reversed(chunks))


def _text_to_int(literal: str) -> int:
    """Parse a matched ``[+-]?[0-9]+`` literal of any length."""
    sign = -1 if literal[0] == "-" else 1
    digits = literal.lstrip("+-").lstrip("0") or "0"
    if len(digits) <= _CHUNK_DIGITS:
        return sign * int(digits)
    number = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start:start + _CHUNK_DIGITS]
        number = number * 10 ** len(chunk) + int(chunk)
    return sign * number


def _format(value: Any, stype: ScalarType, digits: int) -> str:
    if stype.kind == "boolean":
        return "1" if value else "0"
    if stype.kind == "integer":
        return _int_to_text(int(value))
    if stype.kind in ("floating", "decimal"):
        return format(value, ".{}f".format(digits))
    return str(value)


# ---------------------------------------------------------------------------
# text -> value
# ---------------------------------------------------------------------------


def parse_scalar(text: str, target: ScalarTarget) -> ConversionResult:
    """Parse the leading value of ``target`` type from ``text``.

    Leading whitespace is skipped and counted in ``consumed``. The result
    always carries a usable value; check ``ok`` to tell a real parse from
    a fallback.

    Raises:
        ValueError: If target is not a known scalar type.
    """
    stype = resolve_scalar_type(target)
    rest = text.lstrip(_ASCII_SPACE)
    skipped = len(text) - len(rest)

    if stype.kind == "text":
        match = _TOKEN_RE.match(rest)
        if match is None:
            return ConversionResult(stype.default(), skipped, "no token in {!r}".format(text))
        return ConversionResult(match.group(), skipped + match.end())

    pattern = _INTEGER_RE if stype.kind in ("integer", "boolean") else _FLOATING_RE
    match = pattern.match(rest)
    if match is None:
        return ConversionResult(
            stype.default(), skipped, "no {} prefix in {!r}".format(stype.name, text)
        )
    consumed = skipped + match.end()
    literal = match.group()

    if stype.kind == "floating":
        return ConversionResult(stype.coerce(float(literal)), consumed)
    if stype.kind == "decimal":
        return ConversionResult(Decimal(literal), consumed)

    number = _text_to_int(literal)
    if stype.kind == "boolean":
        if number in (0, 1):
            return ConversionResult(bool(number), consumed)
        return ConversionResult(
            stype.default(), consumed, "{} is not a boolean (0 or 1)".format(literal)
        )
    if not stype.in_range(number):
        return ConversionResult(
            stype.clamp(number), consumed, "{} out of range for {}".format(literal, stype.name)
        )
    return ConversionResult(number, consumed)


def from_string(text: str, target: ScalarTarget) -> Any:
    """Parse a value of ``target`` type from the start of ``text``.

    Unparseable text yields the type's default value instead of an error,
    e.g. ``from_string("abc", int) == 0``. Use ``from_string_checked()``
    to be told about it.
    """
    result = parse_scalar(text, target)
    if not result.ok:
        logger.debug("from_string fallback: %s", result.error)
    return result.value


def from_string_checked(text: str, target: ScalarTarget) -> Any:
    """Like ``from_string()`` but raises instead of falling back.

    Raises:
        ConversionError: If no valid prefix exists or the value is out of
            range for the target type.
    """
    result = parse_scalar(text, target)
    if not result.ok:
        raise ConversionError(result.error)
    return result.value
