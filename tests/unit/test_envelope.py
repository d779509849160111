"""Tests for response envelope formatting."""

from __future__ import annotations

from crudsql.compiler.errors import MissingIdentifierError
from crudsql.response.envelope import error_envelope, format_error, format_rows


class TestFormatRows:
    def test_no_rows(self) -> None:
        assert format_rows([]).model_dump() == {"success": True, "data": [], "error": None}
        assert format_rows(None).data == []

    def test_single_row_mapping(self) -> None:
        envelope = format_rows({"id": 1, "name": "Ann"})
        assert envelope.success is True
        assert envelope.data == {"id": 1, "name": "Ann"}

    def test_single_row_in_list_is_flattened(self) -> None:
        assert format_rows([{"id": 1}]).data == {"id": 1}

    def test_many_rows(self) -> None:
        envelope = format_rows([{"id": 1}, {"id": 2}])
        assert envelope.data == [{"id": 1}, {"id": 2}]


class TestFormatError:
    def test_error(self) -> None:
        envelope = format_error("NOT_FOUND", "Employee not found")
        assert envelope.success is False
        assert envelope.data is None
        assert envelope.error is not None
        assert envelope.error.code == "NOT_FOUND"
        assert envelope.error.message == "Employee not found"

    def test_from_compile_error(self) -> None:
        envelope = error_envelope(MissingIdentifierError("DELETE"))
        assert envelope.error is not None
        assert envelope.error.code == "MISSING_IDENTIFIER"
        assert "DELETE" in envelope.error.message
