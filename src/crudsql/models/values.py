"""Scalar value variants. Raw request values are converted once, at the boundary."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class NullValue:
    """SQL NULL (also covers a missing value)."""


@dataclass(frozen=True)
class BoolValue:
    value: bool


@dataclass(frozen=True)
class NumberValue:
    """An integer or decimal number, rendered unquoted."""

    value: int | float | Decimal


@dataclass(frozen=True)
class TextValue:
    """Anything else, rendered as a quoted string literal."""

    value: str


Scalar = NullValue | BoolValue | NumberValue | TextValue

NULL = NullValue()


def to_scalar(raw: Any) -> Scalar:
    """Classify a raw input value.

    ``bool`` is checked before numbers because it subclasses ``int``.
    Unrecognized types are coerced with ``str()`` rather than rejected.
    """
    match raw:
        case None:
            return NULL
        case NullValue() | BoolValue() | NumberValue() | TextValue():
            return raw
        case bool():
            return BoolValue(raw)
        case int() | float() | Decimal():
            return NumberValue(raw)
        case str():
            return TextValue(raw)
        case _:
            return TextValue(str(raw))


def to_python(value: Scalar) -> str | int | float | Decimal | bool | None:
    """Unwrap a scalar back into a plain Python value (for metadata and JSON)."""
    if isinstance(value, NullValue):
        return None
    return value.value
