"""Scalar type descriptors for value/text conversion.

WHY: Conversion rules depend on the target type: how many decimal digits
it can hold, whether it is integral, and what its range is. Python values
carry no fixed width, so callers name the width they mean ("int32",
"float32") or pass a Python type and get the natural default.

HOW: ``ScalarType`` is a frozen dataclass. ``SCALAR_TYPES`` maps names to
instances, the same way presets are looked up by name elsewhere.
``resolve_scalar_type()`` turns whatever the caller passed into a
``ScalarType``; ``scalar_type_of()`` infers one from a value.

RULES:
- kind is one of "boolean", "integer", "floating", "decimal", "text"
- digits10 is the number of decimal digits the type holds without loss
- Integer bounds are inclusive; None means unbounded (Python int)
- Unknown names raise ValueError
"""

from __future__ import annotations

import math
import numbers
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union


@dataclass(frozen=True)
class ScalarType:
    """One target type for conversion.

    Attributes:
        name: Registry key, e.g. ``"int32"``.
        kind: Parsing/formatting family.
        digits10: Decimal digits representable without loss.
        min_value: Inclusive lower bound for integer kinds.
        max_value: Inclusive upper bound for integer kinds.
    """

    name: str
    kind: str
    digits10: int
    min_value: Optional[int] = None
    max_value: Optional[int] = None

    def default(self) -> Any:
        """Value produced when text has no parseable prefix."""
        if self.kind == "boolean":
            return False
        if self.kind == "integer":
            return 0
        if self.kind == "floating":
            return 0.0
        if self.kind == "decimal":
            return Decimal(0)
        return ""

    def clamp(self, value: int) -> int:
        if self.min_value is not None and value < self.min_value:
            return self.min_value
        if self.max_value is not None and value > self.max_value:
            return self.max_value
        return value

    def in_range(self, value: int) -> bool:
        return self.clamp(value) == value

    def coerce(self, value: Any) -> Any:
        """Store ``value`` into this type the way a fixed-width variable would.

        Integers wrap modulo 2**bits, float32 rounds to single precision.
        """
        if self.kind == "integer" and self.max_value is not None:
            span = self.max_value - self.min_value + 1
            return (int(value) - self.min_value) % span + self.min_value
        if self.name == "float32":
            try:
                return struct.unpack("f", struct.pack("f", float(value)))[0]
            except OverflowError:
                return math.copysign(math.inf, float(value))
        if self.kind == "floating":
            return float(value)
        if self.kind == "decimal":
            return value if isinstance(value, Decimal) else Decimal(str(value))
        return value


def _int_type(name: str, bits: int, signed: bool, digits10: int) -> ScalarType:
    if signed:
        return ScalarType(name, "integer", digits10, -(1 << (bits - 1)), (1 << (bits - 1)) - 1)
    return ScalarType(name, "integer", digits10, 0, (1 << bits) - 1)


SCALAR_TYPES: dict[str, ScalarType] = {
    "bool": ScalarType("bool", "boolean", 0, 0, 1),
    "int8": _int_type("int8", 8, True, 2),
    "uint8": _int_type("uint8", 8, False, 2),
    "int16": _int_type("int16", 16, True, 4),
    "uint16": _int_type("uint16", 16, False, 4),
    "int32": _int_type("int32", 32, True, 9),
    "uint32": _int_type("uint32", 32, False, 9),
    "int64": _int_type("int64", 64, True, 18),
    "uint64": _int_type("uint64", 64, False, 19),
    "int": ScalarType("int", "integer", 0),
    "float32": ScalarType("float32", "floating", 6),
    "float64": ScalarType("float64", "floating", 15),
    "float": ScalarType("float", "floating", 15),
    "decimal": ScalarType("decimal", "decimal", 28),
    "str": ScalarType("str", "text", 0),
}

_PYTHON_TYPES: dict[type, str] = {
    bool: "bool",
    int: "int",
    float: "float",
    Decimal: "decimal",
    str: "str",
}

ScalarTarget = Union[str, type, ScalarType]


def resolve_scalar_type(target: ScalarTarget) -> ScalarType:
    """Return the ScalarType for a registry name, Python type, or ScalarType.

    Raises:
        ValueError: If the target is not registered.
    """
    if isinstance(target, ScalarType):
        return target
    if isinstance(target, type):
        name = _PYTHON_TYPES.get(target)
        if name is None:
            raise ValueError("Unsupported scalar type {!r}".format(target))
        return SCALAR_TYPES[name]
    if isinstance(target, str) and target.lower() in SCALAR_TYPES:
        return SCALAR_TYPES[target.lower()]
    raise ValueError(
        "Unknown scalar type {!r}. Available: {}".format(
            target, ", ".join(SCALAR_TYPES.keys())
        )
    )


def scalar_type_of(value: Any) -> Optional[ScalarType]:
    """Infer the ScalarType of a value, or None for non-scalar objects."""
    # bool before int: bool is an int subclass
    for py_type, name in _PYTHON_TYPES.items():
        if isinstance(value, py_type):
            return SCALAR_TYPES[name]
    if isinstance(value, numbers.Integral):
        return SCALAR_TYPES["int"]
    if isinstance(value, numbers.Real):
        return SCALAR_TYPES["float"]
    return None
