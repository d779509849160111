"""Compile endpoint: POST /compile."""

from __future__ import annotations

import logging
from dataclasses import asdict

import sqlparse
from fastapi import APIRouter, Depends

from crudsql.api.deps import get_default_dialect, get_pipeline
from crudsql.api.schemas import CompileResponse
from crudsql.compiler.pipeline import CompilationPipeline
from crudsql.models.request import RequestInput

logger = logging.getLogger("crudsql.api")

router = APIRouter()


def _format_sql(sql: str) -> str:
    """Pretty-print SQL with keyword-per-line formatting."""
    return sqlparse.format(sql, reindent=True, keyword_case="upper", indent_width=2)


@router.post("", response_model=CompileResponse)
async def compile_statement(
    body: RequestInput,
    dialect: str | None = None,
    pretty: bool = False,
    pipeline: CompilationPipeline = Depends(get_pipeline),  # noqa: B008
    default_dialect: str = Depends(get_default_dialect),  # noqa: B008
) -> CompileResponse:
    """Compile a request descriptor into a SQL statement.

    Compiler failures and unknown dialects are turned into 400 error
    envelopes by the handlers registered in ``create_app``.
    """
    dialect_name = dialect or default_dialect
    result = pipeline.compile(body, dialect_name)
    statement = result.statement
    if result.warnings:
        logger.warning("Compiled %s with warnings: %s", statement.table, result.warnings)

    return CompileResponse(
        sql=statement.sql,
        pretty_sql=_format_sql(statement.sql) if pretty else None,
        operation=statement.operation,
        method=statement.method,
        table=statement.table,
        dialect=result.dialect,
        metadata=asdict(statement.metadata),
        debug=asdict(statement.debug),
        warnings=result.warnings,
        sql_valid=result.sql_valid,
    )
