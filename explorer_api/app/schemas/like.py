"""
Pydantic models for likes.

``LikeKind`` enumerates what can be liked and maps each kind to its
counter table in the document, so no other key can ever be written.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LikeKind(str, Enum):
    article = "article"
    image = "image"

    @property
    def table(self) -> str:
        """Name of the counter mapping under ``likes`` in the document."""
        return {LikeKind.article: "articles", LikeKind.image: "images"}[self]


class LikeCreate(BaseModel):
    """Body of ``POST /like``.  Numeric ids are accepted as strings."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: LikeKind = Field(..., examples=["article"])
    id: str = Field(..., min_length=1, examples=["n1"])


class LikeRead(BaseModel):
    id: str
    type: LikeKind
    likes: int
