"""Shared schema definitions.

This module defines the camelCase base model, the response envelope and the
paginated result used by every list endpoint.
"""

import math
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

import pytz
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` in UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


class CamelModel(BaseModel):
    """Base model exposing camelCase names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """The envelope returned by every API endpoint."""

    success: bool = Field(description="Whether the operation succeeded.")
    data: Optional[T] = Field(default=None, description="Operation result.")
    error: Optional[str] = Field(default=None, description="Error message on failure.")
    message: Optional[str] = Field(default=None, description="Informational message.")


class PaginatedResult(CamelModel, Generic[T]):
    """One page of entities plus the pagination arithmetic."""

    data: List[T]
    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def build(cls, items: List[T], total: int, page: int, limit: int) -> "PaginatedResult[T]":
        """Create a page, computing ``total_pages = ceil(total / limit)``."""
        return cls(
            data=items,
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages(total, limit),
        )


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` items ``limit`` at a time."""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def envelope(
    success: bool,
    data: Any = None,
    error: Optional[str] = None,
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a JSON-ready envelope, omitting unset optional keys.

    Args:
        success: Outcome flag.
        data: Payload; pydantic models are dumped by alias.
        error: Error message for failures.
        message: Informational message.

    Returns:
        Dictionary ready for ``JSONResponse``.
    """
    body: Dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = jsonable_encoder(data)
    if error is not None:
        body["error"] = error
    if message is not None:
        body["message"] = message
    return body
