"""
Pydantic models for news articles.

``ArticleCreate`` is the body accepted by ``POST /admin/news`` and
``ArticleRead`` the article it creates.  Articles read back from the
store are returned as stored, so they have no read schema.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleRead(BaseModel):
    """Schema for an article created through the admin endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., examples=["n1"])
    title: str = Field(..., examples=["Mercados subiram hoje"])
    summary: str = ""
    url: str = Field(..., examples=["https://noticias.ex/n1"])
    image: str = ""
    published_at: str = Field(..., alias="publishedAt")
    source_id: Optional[str] = Field(None, alias="sourceId")


class ArticleCreate(BaseModel):
    """Schema for creating an article.

    ``title`` and ``url`` are required and may not be empty; the other
    fields default to an empty string (``summary``, ``image``) or null
    (``sourceId``).  Numbers are accepted and stored as strings.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    title: str = Field(..., min_length=1, examples=["Nova notícia"])
    url: str = Field(..., min_length=1, examples=["https://noticias.ex/nova"])
    summary: Optional[str] = None
    image: Optional[str] = None
    source_id: Optional[str] = Field(None, alias="sourceId")


class ArticleCreated(BaseModel):
    created: ArticleRead
