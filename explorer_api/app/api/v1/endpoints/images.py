"""Image endpoints for API v1."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Query, Response

from explorer_api.app.api.v1.dependencies import PaginationDep, StoreDep
from explorer_api.app.schemas.common import Item, Page
from explorer_api.app.services.image_service import ImageService

router = APIRouter()

CACHE_CONTROL = "public, max-age=60"


@router.get("", response_model=Page[Item])
async def list_images(
    response: Response,
    store: StoreDep,
    pagination: PaginationDep,
    q: Optional[str] = Query(None, description="Text searched in the title"),
) -> Dict[str, Any]:
    """Return a paginated list of images."""
    result = await ImageService(store).list_images(q=q, page=pagination.page, limit=pagination.limit)
    response.headers["Cache-Control"] = CACHE_CONTROL
    return result
