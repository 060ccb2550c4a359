"""Liveness endpoint for API v1."""

from fastapi import APIRouter

from explorer_api.app.core.utils import utcnow_iso
from explorer_api.app.schemas.common import HealthRead

router = APIRouter()


@router.get("", response_model=HealthRead)
async def health() -> HealthRead:
    """Return ``ok`` and the server time.  Does not touch the store."""
    return HealthRead(status="ok", time=utcnow_iso())
