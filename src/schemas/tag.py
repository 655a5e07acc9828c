"""Pydantic schemas for tag endpoints."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TagResponse(BaseModel):
    """Schema for a tag with its usage statistics."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    frequency: int
    last_used: datetime
    frecency_score: float


class TagListResponse(BaseModel):
    """Schema for the tags list response."""

    tags: list[TagResponse]
