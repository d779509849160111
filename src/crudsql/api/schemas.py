"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CompileResponse(BaseModel):
    """Response body for POST /compile."""

    sql: str
    pretty_sql: str | None = Field(None, description="sqlparse-formatted SQL when pretty=true")
    operation: str
    method: str
    table: str
    dialect: str
    metadata: dict[str, Any] = {}
    debug: dict[str, Any] = {}
    warnings: list[str] = []
    sql_valid: bool = True


class DialectInfo(BaseModel):
    """Information about a supported dialect."""

    name: str
    quote_char: str


class DialectListResponse(BaseModel):
    """Response for GET /dialects."""

    dialects: list[DialectInfo] = []
    default: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
