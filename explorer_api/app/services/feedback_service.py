"""Service layer for user feedback."""

import logging
from typing import Any, Dict

from explorer_api.app.core.store import DocumentStore
from explorer_api.app.core.utils import generate_id, utcnow_iso
from explorer_api.app.schemas.feedback import FeedbackCreate

logger = logging.getLogger(__name__)


class FeedbackService:
    """Service class for feedback entries."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def add_feedback(self, data: FeedbackCreate) -> Dict[str, Any]:
        """Append a feedback entry with a generated id and timestamp."""
        document = self.store.load()
        entry = {
            "id": generate_id(8),
            "message": data.message,
            "context": data.context,
            "createdAt": utcnow_iso(),
        }
        document.setdefault("feedback", []).append(entry)
        self.store.save(document)
        logger.info("Stored feedback %s", entry["id"])
        return entry
