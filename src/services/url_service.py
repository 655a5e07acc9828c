"""Service layer for saved urls: upsert by url string and tag-set replacement."""
import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import utc_now
from models.tag import Tag, url_tags
from models.url import Url
from schemas.url import SavedUrl
from services.tag_service import get_or_create_tag

logger = logging.getLogger(__name__)


async def _replace_url_tags(
    db: AsyncSession,
    url_id: str,
    tags: Sequence[str],
    timestamp: datetime,
) -> None:
    """
    Replace the tag set of a url.

    Removes every existing association, then records one use of every tag name in
    the list and associates it. A name repeated in the list counts as a use each
    time but yields a single association. Runs inside the caller's transaction, so a
    failure part-way leaves the previous tag set intact once the caller rolls back.
    """
    await db.execute(delete(url_tags).where(url_tags.c.url_id == url_id))

    for tag_name in tags:
        tag_id = await get_or_create_tag(db, tag_name, timestamp)
        await db.execute(
            insert(url_tags)
            .values(url_id=url_id, tag_id=tag_id, created_at=timestamp)
            .on_conflict_do_nothing(),
        )


async def _get_tags_for_urls(
    db: AsyncSession,
    url_ids: list[str],
) -> dict[str, list[str]]:
    """
    Fetch tag names for a list of urls in a single query.

    Returns a dict mapping url id -> sorted list of tag names.
    """
    result: dict[str, list[str]] = {url_id: [] for url_id in url_ids}
    if not url_ids:
        return result

    rows = await db.execute(
        select(url_tags.c.url_id, Tag.name)
        .join(Tag, url_tags.c.tag_id == Tag.id)
        .where(url_tags.c.url_id.in_(url_ids))
        .order_by(Tag.name),
    )
    for url_id, tag_name in rows:
        result[url_id].append(tag_name)
    return result


async def save_url(db: AsyncSession, url: str, tags: Sequence[str] = ()) -> str:
    """
    Save a url with its tags, deduplicating by exact url string.

    Saving a url that already exists reuses its id, bumps updated_at, and replaces
    its tags with the given set. Returns the url id.
    """
    timestamp = utc_now()

    result = await db.execute(
        select(Url).where(Url.url == url, Url.deleted_at.is_(None)),
    )
    url_row = result.scalar_one_or_none()
    created = url_row is None

    if url_row is None:
        url_row = Url(url=url, created_at=timestamp, updated_at=timestamp)
        db.add(url_row)
    else:
        url_row.updated_at = timestamp
    await db.flush()

    await _replace_url_tags(db, url_row.id, tags, timestamp)

    logger.info(
        "url_saved",
        extra={"url_id": url_row.id, "is_new": created, "tag_count": len(tags)},
    )
    return url_row.id


async def get_saved_urls(db: AsyncSession) -> list[SavedUrl]:
    """Get all saved urls with their tags, most recently added first."""
    result = await db.execute(
        select(Url)
        .where(Url.deleted_at.is_(None))
        .order_by(Url.created_at.desc()),
    )
    urls = result.scalars().all()

    tags_map = await _get_tags_for_urls(db, [u.id for u in urls])

    return [
        SavedUrl(id=u.id, url=u.url, saved_at=u.created_at, tags=tags_map[u.id])
        for u in urls
    ]


async def delete_url(db: AsyncSession, url_id: str) -> bool:
    """
    Permanently delete a url and its tag associations.

    Tags themselves are kept. Deleting an unknown id is a no-op.

    Returns:
        True if a url row was removed.
    """
    await db.execute(delete(url_tags).where(url_tags.c.url_id == url_id))
    result = await db.execute(delete(Url).where(Url.id == url_id))
    deleted = result.rowcount > 0

    logger.info("url_deleted", extra={"url_id": url_id, "deleted": deleted})
    return deleted


async def update_url_tags(db: AsyncSession, url_id: str, tags: Sequence[str]) -> bool:
    """
    Replace the tags of an existing url. An empty list clears all tags.

    Unknown ids are a no-op so no orphaned associations are created.

    Returns:
        True if the url exists and its tags were replaced.
    """
    url_row = await db.get(Url, url_id)
    if url_row is None:
        logger.info("url_tags_update_skipped", extra={"url_id": url_id})
        return False

    timestamp = utc_now()
    await _replace_url_tags(db, url_id, tags, timestamp)
    url_row.updated_at = timestamp
    await db.flush()

    logger.info("url_tags_updated", extra={"url_id": url_id, "tag_count": len(tags)})
    return True
