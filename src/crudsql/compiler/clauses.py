"""Clause builders. Each returns one clause fragment, or ``""`` when not applicable."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from crudsql.dialect.base import Dialect
from crudsql.models.request import (
    WILDCARD,
    JoinSpec,
    OrderBy,
    OrderByColumn,
    OrderByList,
    OrderByText,
)
from crudsql.models.values import NullValue, Scalar, to_scalar

_EXPLICIT_ALIAS = re.compile(r" AS ", re.IGNORECASE)


def _qualified(column: str, dialect: Dialect, alias: str | None) -> str:
    prefix = f"{alias}." if alias else ""
    return f"{prefix}{dialect.quote_identifier(column)}"


def build_where(
    params: Mapping[str, Scalar],
    dialect: Dialect,
    alias: str | None = None,
) -> str:
    """Equality conjuncts over ``params`` in insertion order.

    ``None``/NULL values compare with ``IS NULL``. The alias prefix, when
    given, is emitted unquoted.
    """
    conditions: list[str] = []
    for key, raw in params.items():
        column = _qualified(key, dialect, alias)
        value = to_scalar(raw)
        if isinstance(value, NullValue):
            conditions.append(f"{column} IS NULL")
        else:
            conditions.append(f"{column} = {dialect.escape_value(value)}")
    if not conditions:
        return ""
    return "WHERE " + " AND ".join(conditions)


def build_joins(joins: Sequence[JoinSpec], dialect: Dialect) -> str:
    """One JOIN line per spec, in caller order. ``on`` text is never escaped."""
    lines = []
    for join in joins:
        source = dialect.quote_identifier(join.table)
        if join.alias:
            source += f" {dialect.quote_identifier(join.alias)}"
        lines.append(f"{join.type.value} JOIN {source} ON {join.on}")
    return "\n".join(lines)


def build_select(
    columns: Sequence[str],
    dialect: Dialect,
    alias: str | None = None,
) -> str:
    """Projection list. A wildcard anywhere wins over every other entry."""
    if WILDCARD in columns:
        return f"{alias}.{WILDCARD}" if alias else WILDCARD
    parts = []
    for column in columns:
        if _EXPLICIT_ALIAS.search(column):
            # "expr AS name" is trusted and passed through
            parts.append(column)
        else:
            parts.append(_qualified(column, dialect, alias))
    return ", ".join(parts)


def build_order_by(order_by: OrderBy | None, dialect: Dialect) -> str:
    """ORDER BY clause. Text forms are used verbatim; only a structured column is quoted."""
    match order_by:
        case None:
            return ""
        case OrderByText(text=text):
            return f"ORDER BY {text}"
        case OrderByList(items=items):
            return f"ORDER BY {', '.join(items)}"
        case OrderByColumn(column=column, direction=direction):
            return f"ORDER BY {dialect.quote_identifier(column)} {direction.value}"
    raise TypeError(f"Unknown order_by variant: {type(order_by).__name__}")
