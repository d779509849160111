"""Orchestrates compilation: raw input → descriptor → statement → validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from crudsql.compiler.statement import CompiledStatement, StatementCompiler
from crudsql.compiler.validator import validate_sql
from crudsql.dialect import DEFAULT_DIALECT, DialectRegistry
from crudsql.models.request import RequestDescriptor, RequestInput


@dataclass
class CompilationResult:
    """A compiled statement plus the dialect it targets and validation findings."""

    statement: CompiledStatement
    dialect: str
    warnings: list[str] = field(default_factory=list)
    sql_valid: bool = True

    @property
    def sql(self) -> str:
        return self.statement.sql


class CompilationPipeline:
    """Orchestrates: Input → RequestDescriptor → CompiledStatement → validation."""

    def __init__(self, *, validate: bool = True) -> None:
        self._validate = validate

    def compile(
        self,
        request: RequestDescriptor | RequestInput | Mapping[str, Any],
        dialect_name: str = DEFAULT_DIALECT,
    ) -> CompilationResult:
        """Compile one request for the named dialect.

        Compiler errors propagate unchanged; validation problems only add
        warnings.
        """
        if not isinstance(request, RequestDescriptor):
            request = RequestDescriptor.from_input(request)

        dialect = DialectRegistry.get(dialect_name)
        statement = StatementCompiler(dialect).compile(request)

        warnings: list[str] = []
        if self._validate:
            warnings = [f"SQL validation: {e}" for e in validate_sql(statement.sql, dialect_name)]

        return CompilationResult(
            statement=statement,
            dialect=dialect_name,
            warnings=warnings,
            sql_valid=not warnings,
        )


def compile_request(
    data: Mapping[str, Any] | RequestInput,
    dialect_name: str = DEFAULT_DIALECT,
) -> CompiledStatement:
    """Compile a raw request mapping without validation."""
    return CompilationPipeline(validate=False).compile(data, dialect_name).statement
