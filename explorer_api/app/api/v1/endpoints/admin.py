"""
Administrative endpoints for API v1.

Currently a single route to publish an article.  There is no
authentication on these routes.
"""

from typing import Any, Dict

from fastapi import APIRouter

from explorer_api.app.api.v1.dependencies import StoreDep
from explorer_api.app.schemas.news import ArticleCreate, ArticleCreated
from explorer_api.app.services.news_service import NewsService

router = APIRouter()


@router.post("/news", response_model=ArticleCreated)
async def create_article(payload: ArticleCreate, store: StoreDep) -> Dict[str, Any]:
    """Publish an article; it is placed first in the news list."""
    item = await NewsService(store).create_article(payload)
    return {"created": item}
