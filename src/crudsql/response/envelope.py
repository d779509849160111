"""Uniform response envelopes for rows returned by the database layer.

The compiler never calls into this module; it is the collaborator that runs
after the statement has been executed elsewhere.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from crudsql.compiler.errors import CompileError

Row = Mapping[str, Any]


class ErrorBody(BaseModel):
    code: str
    message: str
    details: Any = None


class Envelope(BaseModel):
    """``{success, data}`` on success, ``{success: false, error}`` on failure."""

    success: bool
    data: Any = None
    error: ErrorBody | None = None


def format_rows(rows: Row | Sequence[Row] | None) -> Envelope:
    """Flatten database output into a success envelope.

    No rows gives an empty list. A single row, bare or as the only element of
    a sequence, gives that row as an object (a lookup by id). Anything else
    gives a list of rows.
    """
    if not rows:
        return Envelope(success=True, data=[])
    if isinstance(rows, Mapping):
        return Envelope(success=True, data=dict(rows))
    if len(rows) == 1:
        return Envelope(success=True, data=dict(rows[0]))
    return Envelope(success=True, data=[dict(row) for row in rows])


def format_error(code: str, message: str, details: Any = None) -> Envelope:
    return Envelope(
        success=False,
        error=ErrorBody(code=code, message=message, details=details),
    )


def error_envelope(exc: CompileError) -> Envelope:
    """Translate a compiler failure into an error envelope."""
    return format_error(exc.code, exc.message)
