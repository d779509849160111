"""Integration tests for the FastAPI REST API."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from crudsql.api.app import create_app
from crudsql.api.deps import reset_pipeline
from crudsql.settings import Settings
from tests.conftest import EMPLOYEE_LIST_REQUEST, flat


@pytest.fixture
def app():
    application = create_app(settings=Settings(default_dialect="mysql", validate_sql=True))
    yield application
    reset_pipeline()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# ---------------------------------------------------------------------------
# Health & Dialects
# ---------------------------------------------------------------------------


class TestHealthEndpoint:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data

    async def test_timing_header(self, client: AsyncClient) -> None:
        response = await client.get("/health")
        assert "x-request-duration-ms" in response.headers


class TestDialectsEndpoint:
    async def test_list_dialects(self, client: AsyncClient) -> None:
        response = await client.get("/dialects")
        assert response.status_code == 200
        data = response.json()
        quotes = {d["name"]: d["quote_char"] for d in data["dialects"]}
        assert quotes["mysql"] == "`"
        assert quotes["postgres"] == '"'
        assert "sqlite" in quotes
        assert data["default"] == "mysql"


# ---------------------------------------------------------------------------
# Compile endpoint
# ---------------------------------------------------------------------------


class TestCompileEndpoint:
    async def test_select(self, client: AsyncClient) -> None:
        response = await client.post("/compile", json=EMPLOYEE_LIST_REQUEST)
        assert response.status_code == 200
        data = response.json()
        assert data["operation"] == "SELECT"
        assert data["method"] == "GET"
        assert data["table"] == "employees"
        assert data["dialect"] == "mysql"
        assert data["sql_valid"] is True
        assert data["pretty_sql"] is None
        assert "LEFT JOIN `departments` `d`" in data["sql"]
        assert data["metadata"]["table_alias"] == "em"
        assert data["metadata"]["where_params"] == {"is_active": True, "department_id": 3}
        assert data["debug"]["has_joins"] is True

    async def test_debug_keeps_caller_key_order(self, client: AsyncClient) -> None:
        response = await client.post(
            "/compile", json={"orderBy": "id", "table": "t", "method": "GET"}
        )
        assert response.status_code == 200
        assert response.json()["debug"]["input_keys"] == ["orderBy", "table", "method"]

    async def test_soft_delete(self, client: AsyncClient) -> None:
        response = await client.post(
            "/compile", json={"method": "DELETE", "table": "employees", "params": {"id": 5}}
        )
        assert response.status_code == 200
        data = response.json()
        assert flat(data["sql"]) == "UPDATE `employees` SET `is_active` = 0 WHERE `id` = 5;"
        assert data["metadata"] == {"delete_type": "soft", "where_params": {"id": 5}}

    async def test_hard_delete(self, client: AsyncClient) -> None:
        response = await client.post(
            "/compile",
            json={
                "method": "DELETE",
                "table": "employees",
                "params": {"id": 5},
                "softDelete": False,
            },
        )
        assert response.status_code == 200
        assert flat(response.json()["sql"]) == "DELETE FROM `employees` WHERE `id` = 5;"

    async def test_dialect_query_param(self, client: AsyncClient) -> None:
        response = await client.post(
            "/compile?dialect=postgres",
            json={"table": "employees", "query": {"is_active": True}},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["dialect"] == "postgres"
        assert 'em."is_active" = TRUE' in data["sql"]

    async def test_pretty(self, client: AsyncClient) -> None:
        response = await client.post("/compile?pretty=true", json=EMPLOYEE_LIST_REQUEST)
        assert response.status_code == 200
        pretty = response.json()["pretty_sql"]
        assert pretty is not None
        assert "SELECT" in pretty
        assert "ORDER BY" in pretty

    async def test_empty_body_is_400(self, client: AsyncClient) -> None:
        response = await client.post(
            "/compile", json={"method": "POST", "table": "employees", "body": {}}
        )
        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert data["error"]["code"] == "EMPTY_BODY"

    async def test_unbounded_update_is_400(self, client: AsyncClient) -> None:
        response = await client.post(
            "/compile", json={"method": "PATCH", "table": "employees", "body": {"name": "Ann"}}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_IDENTIFIER"

    async def test_missing_table_is_400(self, client: AsyncClient) -> None:
        response = await client.post("/compile", json={"method": "GET"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_TABLE"

    async def test_unsupported_method_is_400(self, client: AsyncClient) -> None:
        response = await client.post("/compile", json={"method": "OPTIONS", "table": "t"})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "UNSUPPORTED_METHOD"

    async def test_unknown_dialect_is_400(self, client: AsyncClient) -> None:
        response = await client.post("/compile?dialect=oracle", json={"table": "t"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"]["code"] == "UNSUPPORTED_DIALECT"
        assert "mysql" in data["error"]["details"]["available"]

    async def test_malformed_descriptor_is_422(self, client: AsyncClient) -> None:
        response = await client.post("/compile", json={"table": "t", "joins": "nope"})
        assert response.status_code == 422


class TestSettings:
    async def test_default_dialect_from_settings(self) -> None:
        app = create_app(settings=Settings(default_dialect="postgres", validate_sql=False))
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                response = await c.post("/compile", json={"table": "employees"})
        finally:
            reset_pipeline()
        assert response.status_code == 200
        data = response.json()
        assert data["dialect"] == "postgres"
        assert data["sql"] == 'SELECT em.*\nFROM "employees" em;'

    def test_port_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9090")
        monkeypatch.setenv("DEFAULT_DIALECT", "sqlite")
        settings = Settings()
        assert settings.effective_port == 9090
        assert settings.default_dialect == "sqlite"
