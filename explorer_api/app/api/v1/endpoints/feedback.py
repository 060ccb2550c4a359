"""Feedback endpoint for API v1."""

from fastapi import APIRouter

from explorer_api.app.api.v1.dependencies import StoreDep
from explorer_api.app.schemas.feedback import FeedbackCreate, StatusRead
from explorer_api.app.services.feedback_service import FeedbackService

router = APIRouter()


@router.post("", response_model=StatusRead)
async def send_feedback(payload: FeedbackCreate, store: StoreDep) -> StatusRead:
    """Store a feedback message with optional context."""
    await FeedbackService(store).add_feedback(payload)
    return StatusRead()
