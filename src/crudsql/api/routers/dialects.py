"""Dialect listing endpoint: GET /dialects."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from crudsql.api.deps import get_default_dialect
from crudsql.api.schemas import DialectInfo, DialectListResponse
from crudsql.dialect.registry import DialectRegistry

router = APIRouter()


@router.get("", response_model=DialectListResponse)
async def list_dialects(
    default: str = Depends(get_default_dialect),  # noqa: B008
) -> DialectListResponse:
    """List all available SQL dialects."""
    dialects = []
    for name in DialectRegistry.available():
        dialect = DialectRegistry.get(name)
        dialects.append(DialectInfo(name=name, quote_char=dialect.quote_char))
    return DialectListResponse(dialects=dialects, default=default)
