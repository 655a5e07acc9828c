"""Url model for storing saved links."""
import uuid
from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin, UTCDateTime


def generate_url_id() -> str:
    """Generate a new random UUID string for a url row."""
    return str(uuid.uuid4())


class Url(Base, TimestampMixin):
    """Url model - one row per distinct saved url string."""

    __tablename__ = "urls"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_url_id)
    url: Mapped[str] = mapped_column(Text, unique=True, index=True)
    deleted_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime, nullable=True, index=True,
    )
