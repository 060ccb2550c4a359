"""
News endpoints for API v1.

Listing supports an exact ``source`` filter, a free text ``q`` over
title and summary and ``page``/``limit`` pagination.  Both routes may
be cached by clients and proxies for 30 seconds.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Query, Response

from explorer_api.app.api.v1.dependencies import PaginationDep, StoreDep
from explorer_api.app.schemas.common import Item, Page
from explorer_api.app.services.news_service import NewsService

router = APIRouter()

CACHE_CONTROL = "public, max-age=30"


@router.get("", response_model=Page[Item])
async def list_news(
    response: Response,
    store: StoreDep,
    pagination: PaginationDep,
    q: Optional[str] = Query(None, description="Text searched in title and summary"),
    source: Optional[str] = Query(None, description="Source id, exact match"),
) -> Dict[str, Any]:
    """Return a paginated list of articles, newest admin additions first."""
    result = await NewsService(store).list_news(
        q=q,
        source=source,
        page=pagination.page,
        limit=pagination.limit,
    )
    response.headers["Cache-Control"] = CACHE_CONTROL
    return result


@router.get("/{article_id}", response_model=Item)
async def get_article(article_id: str, response: Response, store: StoreDep) -> Dict[str, Any]:
    """Retrieve a single article with its like count.

    Returns HTTP 404 if the article is not found.
    """
    article = await NewsService(store).get_article(article_id)
    response.headers["Cache-Control"] = CACHE_CONTROL
    return article
