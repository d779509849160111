"""Descriptive metadata about what the compiler built. Never feeds back into SQL."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from crudsql.models.request import RequestDescriptor
from crudsql.models.values import Scalar, to_python


@dataclass(frozen=True)
class SelectMetadata:
    table_alias: str
    where_params: dict[str, Any] = field(default_factory=dict)
    has_joins: bool = False
    has_where: bool = False
    has_order_by: bool = False


@dataclass(frozen=True)
class InsertMetadata:
    columns: list[str] = field(default_factory=list)
    value_count: int = 0


@dataclass(frozen=True)
class UpdateMetadata:
    update_fields: list[str] = field(default_factory=list)
    where_params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteMetadata:
    delete_type: Literal["soft", "hard"]
    where_params: dict[str, Any] = field(default_factory=dict)


StatementMetadata = SelectMetadata | InsertMetadata | UpdateMetadata | DeleteMetadata


@dataclass(frozen=True)
class DebugInfo:
    """Echo of the inputs, for tracing a statement back to its request."""

    input_keys: list[str] = field(default_factory=list)
    path_params: dict[str, Any] = field(default_factory=dict)
    query_params: dict[str, Any] = field(default_factory=dict)
    body_keys: list[str] = field(default_factory=list)
    has_joins: bool = False
    select_columns: list[str] = field(default_factory=list)


def plain(params: Mapping[str, Scalar]) -> dict[str, Any]:
    """Unwrap scalar variants into plain values, keeping key order."""
    return {key: to_python(value) for key, value in params.items()}


def select_metadata(
    alias: str,
    where_params: Mapping[str, Scalar],
    *,
    join_clause: str,
    where_clause: str,
    order_by_clause: str,
) -> SelectMetadata:
    return SelectMetadata(
        table_alias=alias,
        where_params=plain(where_params),
        has_joins=bool(join_clause),
        has_where=bool(where_clause),
        has_order_by=bool(order_by_clause),
    )


def insert_metadata(body: Mapping[str, Scalar]) -> InsertMetadata:
    return InsertMetadata(columns=list(body), value_count=len(body))


def update_metadata(
    body: Mapping[str, Scalar], where_params: Mapping[str, Scalar]
) -> UpdateMetadata:
    return UpdateMetadata(update_fields=list(body), where_params=plain(where_params))


def delete_metadata(soft: bool, where_params: Mapping[str, Scalar]) -> DeleteMetadata:
    return DeleteMetadata(
        delete_type="soft" if soft else "hard",
        where_params=plain(where_params),
    )


def debug_info(request: RequestDescriptor) -> DebugInfo:
    return DebugInfo(
        input_keys=list(request.input_keys),
        path_params=plain(request.path_params),
        query_params=plain(request.query_params),
        body_keys=list(request.body),
        has_joins=len(request.joins) > 0,
        select_columns=list(request.select_columns),
    )
