"""Request descriptor models: the raw webhook-style input and its normalized form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator

from crudsql.models.values import Scalar, to_scalar

WILDCARD = "*"


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class JoinType(StrEnum):
    LEFT = "LEFT"
    INNER = "INNER"
    RIGHT = "RIGHT"
    FULL = "FULL"
    CROSS = "CROSS"


class SortDirection(StrEnum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class CustomJoinType:
    """Unrecognized join keyword, passed through upper-cased."""

    value: str


@dataclass(frozen=True)
class CustomDirection:
    """Unrecognized sort direction, passed through upper-cased."""

    value: str


def parse_join_type(raw: str | None) -> JoinType | CustomJoinType:
    keyword = (raw or JoinType.LEFT).upper()
    try:
        return JoinType(keyword)
    except ValueError:
        return CustomJoinType(keyword)


def parse_direction(raw: str | None) -> SortDirection | CustomDirection:
    keyword = (raw or SortDirection.ASC).upper()
    try:
        return SortDirection(keyword)
    except ValueError:
        return CustomDirection(keyword)


# -- ORDER BY variants -------------------------------------------------------


@dataclass(frozen=True)
class OrderByText:
    """A raw ORDER BY expression, e.g. ``"created_at DESC"``. Used verbatim."""

    text: str


@dataclass(frozen=True)
class OrderByList:
    """Several raw ORDER BY expressions, comma-joined verbatim."""

    items: tuple[str, ...]


@dataclass(frozen=True)
class OrderByColumn:
    """A single column with a direction; the column is quoted."""

    column: str = "id"
    direction: SortDirection | CustomDirection = SortDirection.ASC


OrderBy = OrderByText | OrderByList | OrderByColumn


# -- Raw input (wire format) -------------------------------------------------


class JoinInput(BaseModel):
    """One join as supplied by the caller. ``on`` is raw SQL."""

    type: str | None = None
    table: str
    alias: str | None = None
    on: str


class OrderByInput(BaseModel):
    """Structured ``{column, direction}`` ordering."""

    column: str | None = None
    direction: str | None = None


class RequestInput(BaseModel):
    """Raw request descriptor as produced by an upstream webhook adapter."""

    method: str | None = None
    table: str | None = None
    params: dict[str, Any] = {}
    query: dict[str, Any] = {}
    body: dict[str, Any] = {}
    joins: list[JoinInput] = []
    select: list[str] = [WILDCARD]
    order_by: str | list[str] | OrderByInput | None = Field(None, alias="orderBy")
    soft_delete: bool = Field(True, alias="softDelete")

    model_config = {"populate_by_name": True, "extra": "allow"}

    _input_keys: tuple[str, ...] = PrivateAttr(default=())

    @field_validator("params", "query", "body", mode="before")
    @classmethod
    def _none_as_empty_mapping(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("joins", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("select", mode="before")
    @classmethod
    def _default_wildcard(cls, value: Any) -> Any:
        return [WILDCARD] if not value else value

    @field_validator("soft_delete", mode="before")
    @classmethod
    def _only_false_disables(cls, value: Any) -> Any:
        return value is not False

    @field_validator("order_by", mode="before")
    @classmethod
    def _empty_order_by(cls, value: Any) -> Any:
        return None if value in ("", []) else value

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler: Any) -> Any:
        model = handler(data)
        if isinstance(data, Mapping):
            model._input_keys = tuple(data.keys())
        return model

    @property
    def input_keys(self) -> tuple[str, ...]:
        """Top-level keys exactly as the caller sent them, in their order."""
        return self._input_keys


# -- Normalized descriptor ---------------------------------------------------


@dataclass(frozen=True)
class JoinSpec:
    table: str
    on: str
    type: JoinType | CustomJoinType = JoinType.LEFT
    alias: str | None = None


@dataclass(frozen=True)
class RequestDescriptor:
    """One CRUD-style operation to compile.

    ``method`` is upper-cased but not validated here; the statement compiler
    rejects unsupported methods. ``table`` is ``None`` when neither the
    explicit field nor ``params.table`` supplied one.
    """

    method: str
    table: str | None
    path_params: dict[str, Scalar] = field(default_factory=dict)
    query_params: dict[str, Scalar] = field(default_factory=dict)
    body: dict[str, Scalar] = field(default_factory=dict)
    joins: tuple[JoinSpec, ...] = ()
    select_columns: tuple[str, ...] = (WILDCARD,)
    order_by: OrderBy | None = None
    soft_delete: bool = True
    input_keys: tuple[str, ...] = ()

    @classmethod
    def from_input(cls, data: Mapping[str, Any] | RequestInput) -> RequestDescriptor:
        """Normalize a raw mapping (or an already-parsed ``RequestInput``)."""
        raw = data if isinstance(data, RequestInput) else RequestInput.model_validate(data)

        table = raw.table or raw.params.get("table")
        return cls(
            method=(raw.method or HttpMethod.GET).upper(),
            table=str(table) if table else None,
            path_params=_scalars(raw.params),
            query_params=_scalars(raw.query),
            body=_scalars(raw.body),
            joins=tuple(
                JoinSpec(
                    table=j.table,
                    on=j.on,
                    type=parse_join_type(j.type),
                    alias=j.alias,
                )
                for j in raw.joins
            ),
            select_columns=tuple(raw.select),
            order_by=_order_by(raw.order_by),
            soft_delete=raw.soft_delete,
            input_keys=raw.input_keys,
        )


def _scalars(values: Mapping[str, Any]) -> dict[str, Scalar]:
    return {key: to_scalar(value) for key, value in values.items()}


def _order_by(raw: str | list[str] | OrderByInput | None) -> OrderBy | None:
    match raw:
        case None:
            return None
        case str():
            return OrderByText(raw)
        case list():
            return OrderByList(tuple(raw))
        case OrderByInput(column=column, direction=direction):
            return OrderByColumn(column=column or "id", direction=parse_direction(direction))
