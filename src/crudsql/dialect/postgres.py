"""PostgreSQL dialect: double-quoted identifiers, native boolean literals."""

from __future__ import annotations

from crudsql.dialect.base import Dialect
from crudsql.dialect.registry import DialectRegistry


@DialectRegistry.register
class PostgresDialect(Dialect):
    @property
    def name(self) -> str:
        return "postgres"

    @property
    def quote_char(self) -> str:
        return '"'

    def render_bool(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"
