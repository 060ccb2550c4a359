"""
Service layer for news articles.

Articles are listed with an optional exact source filter and a
case-insensitive text query over title and summary, fetched one at a
time together with their like count, and created through the admin
endpoint.  New articles are prepended so they show up first.
"""

import logging
from typing import Any, Dict, Optional

from explorer_api.app.core.errors import NotFoundError
from explorer_api.app.core.store import DocumentStore
from explorer_api.app.core.utils import generate_id, utcnow_iso
from explorer_api.app.schemas.news import ArticleCreate
from explorer_api.app.services.query import filter_by_field, filter_by_substring, paginate

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("title", "summary")


class NewsService:
    """Service class for news articles."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def list_news(
        self,
        q: Optional[str] = None,
        source: Optional[str] = None,
        page: Any = None,
        limit: Any = None,
    ) -> Dict[str, Any]:
        """Return one page of articles.

        ``source`` must equal the article's ``sourceId`` exactly; ``q``
        is matched as a substring of title or summary.
        """
        items = self.store.load().get("news", [])
        items = filter_by_field(items, "sourceId", source)
        items = filter_by_substring(items, TEXT_FIELDS, q)
        return paginate(items, page, limit)

    async def get_article(self, article_id: str) -> Dict[str, Any]:
        """Return an article merged with its like count.

        Raises ``NotFoundError`` when no article has ``article_id``.
        """
        document = self.store.load()
        for item in document.get("news", []):
            if item.get("id") == article_id:
                likes = document.get("likes", {}).get("articles", {}).get(article_id, 0)
                return {**item, "likes": likes}
        raise NotFoundError("Not found")

    async def create_article(self, data: ArticleCreate) -> Dict[str, Any]:
        """Prepend a new article and persist the document."""
        document = self.store.load()
        item = {
            "id": generate_id(6, prefix="n"),
            "title": data.title,
            "summary": data.summary or "",
            "url": data.url,
            "image": data.image or "",
            "publishedAt": utcnow_iso(),
            "sourceId": data.source_id or None,
        }
        document.setdefault("news", []).insert(0, item)
        self.store.save(document)
        logger.info("Created article %s", item["id"])
        return item
