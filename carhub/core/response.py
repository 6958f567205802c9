"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ListResponse(BaseModel, Generic[T]):
    """List response envelope: `{ data: [...] }` (lists are never paginated)."""

    data: list[T]

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }
