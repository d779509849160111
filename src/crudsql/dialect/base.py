"""Abstract base dialect: identifier quoting and literal rendering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from crudsql.models.values import BoolValue, NullValue, NumberValue, Scalar, TextValue, to_scalar


class Dialect(ABC):
    """Abstract base for all SQL dialects.

    Statement assembly is dialect-neutral; a dialect only decides how
    identifiers are quoted and how literals are spelled.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Character used to delimit identifiers."""

    def quote_identifier(self, name: str) -> str:
        """Wrap ``name`` in quote characters, doubling any embedded ones.

        No validation of length, character set or reserved words; an empty
        name yields an empty quoted identifier.
        """
        q = self.quote_char
        return f"{q}{name.replace(q, q + q)}{q}"

    def render_bool(self, value: bool) -> str:
        return "1" if value else "0"

    def render_number(self, value: int | float | Decimal) -> str:
        """Plain decimal text: ``10.0`` -> ``10``, ``1e-05`` -> ``0.00001``.

        Floats use exponent notation only outside ``1e-7 <= |x| < 1e21``.
        No NaN/Infinity guard: the text goes into the statement as-is.
        """
        if isinstance(value, float) and 1e-7 <= abs(value) < 1e21:
            if value.is_integer():
                return str(int(value))
            return format(Decimal(repr(value)), "f")
        if isinstance(value, float) and value == 0:
            return "0"
        return str(value)

    def render_string(self, value: str) -> str:
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    def escape_value(self, value: Scalar | Any) -> str:
        """Render a value as a SQL literal. Total over all inputs."""
        match to_scalar(value):
            case NullValue():
                return "NULL"
            case BoolValue(value=b):
                return self.render_bool(b)
            case NumberValue(value=n):
                return self.render_number(n)
            case TextValue(value=s):
                return self.render_string(s)
        raise AssertionError("unreachable")
