"""Pydantic schemas for webhook and url endpoints."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator


def normalize_tags(tags: list[str]) -> list[str]:
    """
    Normalize tags: strip surrounding whitespace and drop empty names.

    Case and inner characters are preserved; tag names are stored exactly as sent.
    """
    normalized = []
    for tag in tags:
        normalized_tag = tag.strip()
        if not normalized_tag:
            continue
        normalized.append(normalized_tag)
    return normalized


class WebhookItem(BaseModel):
    """A single url entry in a webhook payload. Entries without a url are skipped."""

    url: str | None = None
    tags: list[str] = []

    @field_validator("url", mode="before")
    @classmethod
    def check_url(cls, v: Any) -> str | None:
        """
        Treat non-string and blank urls as missing.

        Other urls are kept exactly as sent, since saved urls are deduplicated by exact
        string match.
        """
        if not isinstance(v, str) or not v.strip():
            return None
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: list[str] | None) -> list[str]:
        """Accept null tags as an empty list."""
        if v is None:
            return []
        return v

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v: list[str]) -> list[str]:
        """Normalize tags."""
        return normalize_tags(v)


class WebhookPayload(BaseModel):
    """Schema for the webhook request body."""

    urls: list[WebhookItem] = []

    @field_validator("urls", mode="before")
    @classmethod
    def default_urls(cls, v: Any) -> list:
        """Treat a missing or non-list urls field as empty and skip non-object entries."""
        if not isinstance(v, list):
            return []
        return [item for item in v if isinstance(item, dict)]


class SavedUrlRef(BaseModel):
    """Reference to a url saved by the webhook."""

    id: str
    url: str


class WebhookResponse(BaseModel):
    """Schema for the webhook response."""

    received: bool = True
    saved_count: int
    saved: list[SavedUrlRef]


class SavedUrl(BaseModel):
    """A saved url with its current tag set."""

    id: str
    url: str
    saved_at: datetime  # created_at of the url row
    tags: list[str]


class UrlListResponse(BaseModel):
    """Schema for the url list response."""

    urls: list[SavedUrl]


class UrlTagsUpdate(BaseModel):
    """Schema for replacing the tags of a url."""

    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: list[str] | None) -> list[str]:
        """Accept null tags as an empty list."""
        if v is None:
            return []
        return v

    @field_validator("tags")
    @classmethod
    def check_tags(cls, v: list[str]) -> list[str]:
        """Normalize tags."""
        return normalize_tags(v)


class UrlTagsUpdateResponse(BaseModel):
    """Schema for the tag update response. updated is False for unknown ids."""

    updated: bool


class UrlDeleteResponse(BaseModel):
    """Schema for the delete response. deleted is False for unknown ids."""

    deleted: bool
