"""
Unified search endpoint for API v1.

``q`` is mandatory; a request without it (or with an empty value) is
rejected with 400 ``q parameter required``.
"""

from typing import Any, Dict

from fastapi import APIRouter, Query

from explorer_api.app.api.v1.dependencies import PaginationDep, StoreDep
from explorer_api.app.schemas.common import Item, Page
from explorer_api.app.services.search_service import SearchService

router = APIRouter()


@router.get("", response_model=Page[Item])
async def search(
    store: StoreDep,
    pagination: PaginationDep,
    q: str = Query(..., min_length=1, description="Text searched in articles and images"),
) -> Dict[str, Any]:
    """Search articles then images; hits carry ``type`` ``news`` or ``image``."""
    return await SearchService(store).search(q, page=pagination.page, limit=pagination.limit)
