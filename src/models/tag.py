"""Tag model and url-tag association table."""
from datetime import datetime

from sqlalchemy import Column, Float, ForeignKey, Index, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, TimestampMixin, UTCDateTime

# Junction table: the current tag set of each url (replaced wholesale on update)
url_tags = Table(
    "url_tags",
    Base.metadata,
    Column("url_id", String(36), ForeignKey("urls.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", UTCDateTime, nullable=False),
)


class Tag(Base, TimestampMixin):
    """
    Tag model - globally unique tag names with usage statistics.

    frecency_score is derived from frequency and last_used at write time and is never
    set independently. Tags outlive the urls they were attached to.
    """

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    frequency: Mapped[int] = mapped_column(Integer, default=0)
    last_used: Mapped[datetime] = mapped_column(UTCDateTime)
    frecency_score: Mapped[float] = mapped_column(Float, default=0.0)


Index("ix_tags_frecency_score", Tag.frecency_score.desc())
