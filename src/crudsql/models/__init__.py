"""Request descriptor and scalar value models for crudsql."""

from crudsql.models.request import (
    HttpMethod,
    JoinSpec,
    JoinType,
    OrderBy,
    OrderByColumn,
    OrderByList,
    OrderByText,
    RequestDescriptor,
    RequestInput,
    SortDirection,
)
from crudsql.models.values import BoolValue, NullValue, NumberValue, Scalar, TextValue, to_scalar

__all__ = [
    "BoolValue",
    "HttpMethod",
    "JoinSpec",
    "JoinType",
    "NullValue",
    "NumberValue",
    "OrderBy",
    "OrderByColumn",
    "OrderByList",
    "OrderByText",
    "RequestDescriptor",
    "RequestInput",
    "Scalar",
    "SortDirection",
    "TextValue",
    "to_scalar",
]
