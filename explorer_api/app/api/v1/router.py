"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When new endpoints are added, update this file to include their
routers.
"""

from fastapi import APIRouter

from .endpoints import (
    admin,
    feedback,
    health,
    highlights,
    images,
    likes,
    news,
    search,
    sources,
    trending,
)

router = APIRouter()

router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(highlights.router, prefix="/highlights", tags=["highlights"])
router.include_router(news.router, prefix="/news", tags=["news"])
router.include_router(images.router, prefix="/images", tags=["images"])
router.include_router(sources.router, prefix="/sources", tags=["sources"])
router.include_router(trending.router, prefix="/trending", tags=["trending"])
router.include_router(search.router, prefix="/search", tags=["search"])
router.include_router(likes.router, prefix="/like", tags=["likes"])
router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
# Admin routes are not protected; keep the service off public networks
# or put an authenticating proxy in front of ``/admin``.
router.include_router(admin.router, prefix="/admin", tags=["admin"])
