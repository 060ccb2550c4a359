"""
Service layer for highlights, sources and trending topics.

These collections are returned whole and in stored order; there is no
filtering or pagination.
"""

from typing import Any, Dict, List

from explorer_api.app.core.store import DocumentStore


class ContentService:
    """Read access to the static content collections."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def list_highlights(self) -> List[Dict[str, Any]]:
        return self.store.load().get("highlights", [])

    async def list_sources(self) -> List[Dict[str, Any]]:
        return self.store.load().get("sources", [])

    async def list_trending(self) -> List[Dict[str, Any]]:
        """Return trending topics as stored; they are not re-sorted by score."""
        return self.store.load().get("trending", [])
