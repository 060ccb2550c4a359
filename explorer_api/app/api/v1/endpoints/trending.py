"""Trending topic endpoints for API v1."""

from typing import Any, Dict

from fastapi import APIRouter

from explorer_api.app.api.v1.dependencies import StoreDep
from explorer_api.app.schemas.common import Item, ItemList
from explorer_api.app.services.content_service import ContentService

router = APIRouter()


@router.get("", response_model=ItemList[Item])
async def list_trending(store: StoreDep) -> Dict[str, Any]:
    """Return trending topics in stored order (not sorted by score)."""
    return {"items": await ContentService(store).list_trending()}
