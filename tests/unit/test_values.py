"""Tests for scalar value classification."""

from __future__ import annotations

from decimal import Decimal

import pytest

from crudsql.models.values import (
    NULL,
    BoolValue,
    NullValue,
    NumberValue,
    TextValue,
    to_python,
    to_scalar,
)


class TestToScalar:
    def test_none_is_null(self) -> None:
        assert to_scalar(None) == NullValue()
        assert to_scalar(None) is NULL

    def test_bool_before_number(self) -> None:
        assert to_scalar(True) == BoolValue(True)
        assert to_scalar(False) == BoolValue(False)

    @pytest.mark.parametrize("raw", [0, 5, -12, 3.25, Decimal("10.50")])
    def test_numbers(self, raw: int | float | Decimal) -> None:
        assert to_scalar(raw) == NumberValue(raw)

    def test_string(self) -> None:
        assert to_scalar("Ann") == TextValue("Ann")

    def test_unknown_type_coerced_to_text(self) -> None:
        assert to_scalar([1, 2]) == TextValue("[1, 2]")

    def test_existing_scalar_passes_through(self) -> None:
        value = TextValue("x")
        assert to_scalar(value) is value


class TestToPython:
    def test_unwraps(self) -> None:
        assert to_python(NULL) is None
        assert to_python(BoolValue(True)) is True
        assert to_python(NumberValue(7)) == 7
        assert to_python(TextValue("a")) == "a"
