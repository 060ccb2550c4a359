"""Like endpoint for API v1."""

from typing import Any, Dict

from fastapi import APIRouter

from explorer_api.app.api.v1.dependencies import StoreDep
from explorer_api.app.schemas.like import LikeCreate, LikeRead
from explorer_api.app.services.like_service import LikeService

router = APIRouter()


@router.post("", response_model=LikeRead)
async def like(payload: LikeCreate, store: StoreDep) -> Dict[str, Any]:
    """Add one like to an article or an image and return the new total.

    ``type`` must be ``article`` or ``image``; anything else is
    rejected with 400 before the store is touched.
    """
    return await LikeService(store).like(payload.type, payload.id)
