"""MySQL / MariaDB dialect: backtick identifiers, booleans as 1/0."""

from __future__ import annotations

from crudsql.dialect.base import Dialect
from crudsql.dialect.registry import DialectRegistry


@DialectRegistry.register
class MySQLDialect(Dialect):
    @property
    def name(self) -> str:
        return "mysql"

    @property
    def quote_char(self) -> str:
        return "`"
