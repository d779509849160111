"""Shared test fixtures for crudsql."""

from __future__ import annotations

import pytest

from crudsql.compiler.statement import StatementCompiler
from crudsql.dialect.mysql import MySQLDialect
from crudsql.dialect.postgres import PostgresDialect


@pytest.fixture
def mysql() -> MySQLDialect:
    return MySQLDialect()


@pytest.fixture
def postgres() -> PostgresDialect:
    return PostgresDialect()


@pytest.fixture
def compiler(mysql: MySQLDialect) -> StatementCompiler:
    return StatementCompiler(mysql)


def flat(sql: str) -> str:
    """Collapse all whitespace runs so assertions ignore line layout."""
    return " ".join(sql.split())


EMPLOYEE_LIST_REQUEST = {
    "method": "GET",
    "table": "employees",
    "query": {"is_active": True, "department_id": 3},
    "joins": [
        {
            "type": "left",
            "table": "departments",
            "alias": "d",
            "on": "d.id = em.department_id",
        }
    ],
    "select": ["*"],
    "orderBy": {"column": "last_name", "direction": "asc"},
}
