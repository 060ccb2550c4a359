"""Service layer for images."""

from typing import Any, Dict, Optional

from explorer_api.app.core.store import DocumentStore
from explorer_api.app.services.query import filter_by_substring, paginate


class ImageService:
    """Service class for images."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def list_images(self, q: Optional[str] = None, page: Any = None, limit: Any = None) -> Dict[str, Any]:
        """Return one page of images whose title contains ``q``."""
        items = self.store.load().get("images", [])
        items = filter_by_substring(items, "title", q)
        return paginate(items, page, limit)
