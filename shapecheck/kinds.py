from __future__ import annotations

import math
import numbers
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class Kind(str, Enum):
    """Primitive kinds a leaf schema can check."""

    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    FUNCTION = "function"
    ANY = "any"
    UNKNOWN = "unknown"


INTEGER_NAMES = {"int", "integer"}
NUMBER_NAMES = {"number", "float", "double"}
STRING_NAMES = {"string", "str"}
BOOLEAN_NAMES = {"bool", "boolean"}
NULL_NAMES = {"null", "nil", "none", "nullish"}
FUNCTION_NAMES = {"function", "func", "callable"}
ANY_NAMES = {"any"}
UNKNOWN_NAMES = {"unknown"}

_KIND_ALIASES = {
    Kind.INTEGER: INTEGER_NAMES,
    Kind.NUMBER: NUMBER_NAMES,
    Kind.STRING: STRING_NAMES,
    Kind.BOOLEAN: BOOLEAN_NAMES,
    Kind.NULL: NULL_NAMES,
    Kind.FUNCTION: FUNCTION_NAMES,
    Kind.ANY: ANY_NAMES,
    Kind.UNKNOWN: UNKNOWN_NAMES,
}

_TEXT_TYPES = (str, bytes, bytearray)


def normalize_kind_name(kind_name: Any) -> Optional[Kind]:
    """Map a kind name such as ``"int"`` or ``"Boolean"`` to a :class:`Kind`.

    Returns None for names that do not denote a primitive kind.
    """
    if kind_name is None:
        return None
    if isinstance(kind_name, Kind):
        return kind_name
    text = str(kind_name).strip().lower()
    for kind, names in _KIND_ALIASES.items():
        if text in names:
            return kind
    return None


def is_number(value: Any) -> bool:
    # bool is an int subclass but a kind of its own here
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """Integral types, or any finite number whose value is whole (3.0, Decimal("3"), Fraction(4, 2))."""
    if not is_number(value):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, numbers.Rational):
        return value.denominator == 1
    return math.isfinite(value) and float(value).is_integer()


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Sequence-like containers; text is a Sequence in Python but never a list of values."""
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def matches_kind(kind: Kind, value: Any) -> bool:
    if kind is Kind.INTEGER:
        return is_integer(value)
    if kind is Kind.NUMBER:
        return is_number(value)
    if kind is Kind.STRING:
        return isinstance(value, str)
    if kind is Kind.BOOLEAN:
        return isinstance(value, bool)
    if kind is Kind.NULL:
        return value is None
    if kind is Kind.FUNCTION:
        return callable(value)
    if kind in (Kind.ANY, Kind.UNKNOWN):
        return True
    raise ValueError(f"Unknown kind: {kind}")
