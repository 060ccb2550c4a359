"""Highlight endpoints for API v1."""

from typing import Any, Dict

from fastapi import APIRouter, Response

from explorer_api.app.api.v1.dependencies import StoreDep
from explorer_api.app.schemas.common import Item, ItemList
from explorer_api.app.services.content_service import ContentService

router = APIRouter()

CACHE_CONTROL = "public, max-age=60"


@router.get("", response_model=ItemList[Item])
async def list_highlights(response: Response, store: StoreDep) -> Dict[str, Any]:
    """Return all highlights in display order."""
    items = await ContentService(store).list_highlights()
    response.headers["Cache-Control"] = CACHE_CONTROL
    return {"items": items}
