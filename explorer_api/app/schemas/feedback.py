"""Pydantic models for user feedback."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class FeedbackCreate(BaseModel):
    """Body of ``POST /feedback``.

    ``context`` is any JSON object the client wants to attach (page,
    article id, user agent...).  A numeric message is stored as a string.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    message: str = Field(..., min_length=1, examples=["Ótimo site!"])
    context: Optional[Dict[str, Any]] = None


class StatusRead(BaseModel):
    status: str = "ok"
