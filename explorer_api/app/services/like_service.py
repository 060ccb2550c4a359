"""
Service layer for likes.

Counters live under ``likes.articles`` and ``likes.images`` in the
document, keyed by entity id.  Liking an id that is not (or no longer)
in its collection still counts; references are not checked.
"""

import logging
from typing import Any, Dict

from explorer_api.app.core.store import DocumentStore
from explorer_api.app.schemas.like import LikeKind

logger = logging.getLogger(__name__)


class LikeService:
    """Service class for like counters."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def like(self, kind: LikeKind, entity_id: str) -> Dict[str, Any]:
        """Increment the counter for ``(kind, entity_id)`` and return it."""
        document = self.store.load()
        counters = document.setdefault("likes", {}).setdefault(kind.table, {})
        counters[entity_id] = counters.get(entity_id, 0) + 1
        self.store.save(document)
        logger.info("Liked %s %s (%d)", kind.value, entity_id, counters[entity_id])
        return {"id": entity_id, "type": kind, "likes": counters[entity_id]}
