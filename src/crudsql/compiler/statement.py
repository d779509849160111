"""Statement compiler: dispatches a request descriptor to one CRUD strategy."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from crudsql.compiler.clauses import build_joins, build_order_by, build_select, build_where
from crudsql.compiler.errors import (
    EmptyBodyError,
    MissingIdentifierError,
    MissingTableError,
    UnsupportedMethodError,
)
from crudsql.compiler.metadata import (
    DebugInfo,
    StatementMetadata,
    debug_info,
    delete_metadata,
    insert_metadata,
    select_metadata,
    update_metadata,
)
from crudsql.dialect import DEFAULT_DIALECT, Dialect, DialectRegistry
from crudsql.models.request import HttpMethod, RequestDescriptor

logger = logging.getLogger("crudsql.compiler")

SOFT_DELETE_COLUMN = "is_active"

# Routing keys that may arrive with the path params but never filter rows.
NON_FILTER_PARAMS = ("table", "lookup_type")


class Operation(StrEnum):
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class CompiledStatement:
    """The compiler's output. The compiler keeps no reference to it."""

    sql: str
    operation: Operation
    method: str
    table: str
    metadata: StatementMetadata
    debug: DebugInfo


def table_alias(table: str) -> str:
    """Short alias used to qualify columns in reads: the first two characters."""
    return table[:2]


def _assemble(*clauses: str) -> str:
    """Join non-empty clauses one per line and terminate the statement."""
    text = "\n".join(clause for clause in clauses if clause)
    return f"{text};".strip()


class StatementCompiler:
    """Compiles a ``RequestDescriptor`` into a ``CompiledStatement``.

    Pure: no I/O and no state shared between calls, so one instance can serve
    any number of concurrent callers.
    """

    def __init__(self, dialect: Dialect | None = None) -> None:
        self._dialect = dialect if dialect is not None else DialectRegistry.get(DEFAULT_DIALECT)
        self._strategies: dict[str, Callable[[RequestDescriptor, str], CompiledStatement]] = {
            HttpMethod.GET: self._select,
            HttpMethod.POST: self._insert,
            HttpMethod.PUT: self._update,
            HttpMethod.PATCH: self._update,
            HttpMethod.DELETE: self._delete,
        }

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    def compile(self, request: RequestDescriptor) -> CompiledStatement:
        if not request.table:
            raise MissingTableError()
        strategy = self._strategies.get(request.method)
        if strategy is None:
            raise UnsupportedMethodError(request.method)

        compiled = strategy(request, request.table)
        logger.debug(
            "Compiled %s %s -> %s", request.method, request.table, compiled.operation
        )
        logger.debug("SQL: %s", compiled.sql)
        return compiled

    def _quote(self, name: str) -> str:
        return self._dialect.quote_identifier(name)

    def _select(self, request: RequestDescriptor, table: str) -> CompiledStatement:
        alias = table_alias(table)
        where_params = {**request.path_params, **request.query_params}
        for key in NON_FILTER_PARAMS:
            where_params.pop(key, None)

        select_clause = build_select(request.select_columns, self._dialect, alias)
        join_clause = build_joins(request.joins, self._dialect)
        where_clause = build_where(where_params, self._dialect, alias)
        order_by_clause = build_order_by(request.order_by, self._dialect)

        sql = _assemble(
            f"SELECT {select_clause}",
            f"FROM {self._quote(table)} {alias}",
            join_clause,
            where_clause,
            order_by_clause,
        )
        return CompiledStatement(
            sql=sql,
            operation=Operation.SELECT,
            method=request.method,
            table=table,
            metadata=select_metadata(
                alias,
                where_params,
                join_clause=join_clause,
                where_clause=where_clause,
                order_by_clause=order_by_clause,
            ),
            debug=debug_info(request),
        )

    def _insert(self, request: RequestDescriptor, table: str) -> CompiledStatement:
        if not request.body:
            raise EmptyBodyError(request.method)

        columns = ", ".join(self._quote(column) for column in request.body)
        values = ", ".join(self._dialect.escape_value(v) for v in request.body.values())
        sql = _assemble(
            f"INSERT INTO {self._quote(table)} ({columns})",
            f"VALUES ({values})",
        )
        return CompiledStatement(
            sql=sql,
            operation=Operation.INSERT,
            method=request.method,
            table=table,
            metadata=insert_metadata(request.body),
            debug=debug_info(request),
        )

    def _update(self, request: RequestDescriptor, table: str) -> CompiledStatement:
        if not request.body:
            raise EmptyBodyError(request.method)
        where_clause = self._bounded_where(request)

        assignments = ", ".join(
            f"{self._quote(column)} = {self._dialect.escape_value(value)}"
            for column, value in request.body.items()
        )
        sql = _assemble(f"UPDATE {self._quote(table)}", f"SET {assignments}", where_clause)
        return CompiledStatement(
            sql=sql,
            operation=Operation.UPDATE,
            method=request.method,
            table=table,
            metadata=update_metadata(request.body, request.path_params),
            debug=debug_info(request),
        )

    def _delete(self, request: RequestDescriptor, table: str) -> CompiledStatement:
        where_clause = self._bounded_where(request)

        if request.soft_delete:
            inactive = self._dialect.render_bool(False)
            sql = _assemble(
                f"UPDATE {self._quote(table)}",
                f"SET {self._quote(SOFT_DELETE_COLUMN)} = {inactive}",
                where_clause,
            )
            operation = Operation.UPDATE
        else:
            sql = _assemble(f"DELETE FROM {self._quote(table)}", where_clause)
            operation = Operation.DELETE

        return CompiledStatement(
            sql=sql,
            operation=operation,
            method=request.method,
            table=table,
            metadata=delete_metadata(request.soft_delete, request.path_params),
            debug=debug_info(request),
        )

    def _bounded_where(self, request: RequestDescriptor) -> str:
        """WHERE clause from path params; refuses to build an unbounded write."""
        where_clause = build_where(request.path_params, self._dialect)
        if not where_clause:
            raise MissingIdentifierError(request.method)
        return where_clause
