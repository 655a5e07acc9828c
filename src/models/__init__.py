"""SQLAlchemy models."""
from models.base import Base, TimestampMixin, UTCDateTime, utc_now
from models.setting import Setting
from models.tag import Tag, url_tags
from models.url import Url

__all__ = ["Base", "Setting", "Tag", "TimestampMixin", "UTCDateTime", "Url", "url_tags", "utc_now"]
