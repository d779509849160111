"""Post-generation SQL validation using sqlglot."""

from __future__ import annotations

import sqlglot
from sqlglot.errors import SqlglotError

# Map crudsql dialect names to sqlglot dialect identifiers.
_DIALECT_MAP: dict[str, str] = {
    "mysql": "mysql",
    "postgres": "postgres",
    "sqlite": "sqlite",
}


def validate_sql(sql: str, dialect_name: str) -> list[str]:
    """Parse SQL with sqlglot for the given dialect.

    Returns a list of error messages (empty if valid).
    Validation is non-blocking — callers should treat errors as warnings.
    Raw JOIN conditions and ORDER BY text reach the parser unchecked, so this
    is the only place a malformed fragment gets noticed before execution.
    """
    sg_dialect = _DIALECT_MAP.get(dialect_name)
    if sg_dialect is None:
        return [f"Unknown dialect '{dialect_name}' — skipping SQL validation"]

    errors: list[str] = []
    try:
        sqlglot.parse(sql, read=sg_dialect)
    except SqlglotError as exc:
        errors.append(str(exc))
    return errors
