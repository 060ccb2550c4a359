"""
Shared FastAPI dependencies for v1 routes.

``StoreDep`` injects the document store and ``PaginationDep`` the
coerced ``page``/``limit`` pair.  Query values arrive as raw strings so
that garbage falls back to defaults instead of producing a 400.
"""

from typing import Annotated, Optional

from fastapi import Depends, Query

from explorer_api.app.core.store import DocumentStore, get_store
from explorer_api.app.schemas.common import PageParams


def page_params(
    page: Optional[str] = Query(None, description="Page number, 1-based"),
    limit: Optional[str] = Query(None, description="Page size, 1 to 100"),
) -> PageParams:
    return PageParams(page=page, limit=limit)


StoreDep = Annotated[DocumentStore, Depends(get_store)]
PaginationDep = Annotated[PageParams, Depends(page_params)]
