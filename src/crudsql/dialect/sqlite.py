"""SQLite dialect.

SQLite accepts MySQL-style backtick identifiers, and has no boolean type, so
booleans stay 1/0. Kept separate so validation parses with SQLite's grammar.
"""

from __future__ import annotations

from crudsql.dialect.base import Dialect
from crudsql.dialect.registry import DialectRegistry


@DialectRegistry.register
class SQLiteDialect(Dialect):
    @property
    def name(self) -> str:
        return "sqlite"

    @property
    def quote_char(self) -> str:
        return "`"
