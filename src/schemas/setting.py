"""Pydantic schemas for settings endpoints."""
from pydantic import BaseModel


class SettingUpdate(BaseModel):
    """Schema for writing a setting."""

    value: str


class SettingResponse(BaseModel):
    """Schema for a setting. value is None when the key has never been set."""

    key: str
    value: str | None
