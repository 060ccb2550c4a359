"""
Shared response envelopes and request parameter structs.

List endpoints answer either with ``ItemList`` (``{"items": [...]}``)
or with ``Page`` (``{"page", "limit", "total", "pages", "data"}``).
``PageParams`` coerces raw ``page``/``limit`` query strings into
bounded integers, falling back to the defaults instead of failing.

Stored entries travel as ``Item`` (a plain dict): they are returned
exactly as they sit in the document, extra keys included.
"""

from typing import Any, Dict, Generic, List, TypeVar

from pydantic import BaseModel, Field, field_validator

from explorer_api.app.services.query import DEFAULT_LIMIT, DEFAULT_PAGE, clamp_limit, clamp_page

T = TypeVar("T")

Item = Dict[str, Any]


class ItemList(BaseModel, Generic[T]):
    """Unpaginated list envelope."""

    items: List[T]


class Page(BaseModel, Generic[T]):
    """Paginated list envelope."""

    page: int = Field(..., examples=[1])
    limit: int = Field(..., examples=[10])
    total: int = Field(..., examples=[2])
    pages: int = Field(..., examples=[1])
    data: List[T]


class PageParams(BaseModel):
    """Pagination parameters after parse-or-default coercion."""

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @field_validator("page", mode="before")
    @classmethod
    def coerce_page(cls, v: Any) -> int:
        return clamp_page(v)

    @field_validator("limit", mode="before")
    @classmethod
    def coerce_limit(cls, v: Any) -> int:
        return clamp_limit(v)


class HealthRead(BaseModel):
    status: str = Field(..., examples=["ok"])
    time: str = Field(..., examples=["2025-01-01T12:00:00.000Z"])
