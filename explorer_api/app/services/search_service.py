"""
Unified search across articles and images.

Matching articles (title or summary) come first, then matching images
(title), each tagged with its kind in ``type``.  Pagination applies to
the combined list.
"""

from typing import Any, Dict

from explorer_api.app.core.store import DocumentStore
from explorer_api.app.services.news_service import TEXT_FIELDS
from explorer_api.app.services.query import filter_by_substring, paginate


class SearchService:
    """Service class for unified search."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def search(self, q: str, page: Any = None, limit: Any = None) -> Dict[str, Any]:
        document = self.store.load()
        news = [
            {**item, "type": "news"}
            for item in filter_by_substring(document.get("news", []), TEXT_FIELDS, q)
        ]
        images = [
            {**item, "type": "image"}
            for item in filter_by_substring(document.get("images", []), "title", q)
        ]
        return paginate(news + images, page, limit)
