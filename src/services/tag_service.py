"""Service layer for tags and frecency scoring."""
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import utc_now
from models.tag import Tag

# Frecency tuning: each use is worth FREQUENCY_WEIGHT points; the decay halves the
# score once DECAY_HALF_LIFE_DAYS have passed since the tag was last used.
FREQUENCY_WEIGHT = 10.0
DECAY_HALF_LIFE_DAYS = 7.0

SECONDS_PER_DAY = 86400.0


def calculate_frecency(
    frequency: int,
    last_used: datetime,
    now: datetime | None = None,
) -> float:
    """
    Calculate a frecency score from usage count and recency.

    score = frequency * 10 * 1 / (1 + days_since_last_use / 7)

    Args:
        frequency: Number of times the tag has been used.
        last_used: When the tag was last used.
        now: Reference time; defaults to the current wall clock.

    Returns:
        The score. Strictly positive for frequency > 0. A last_used in the future is
        treated as zero elapsed days.
    """
    if now is None:
        now = utc_now()
    days_since_use = max(0.0, (now - last_used).total_seconds() / SECONDS_PER_DAY)
    decay = 1.0 / (1.0 + days_since_use / DECAY_HALF_LIFE_DAYS)
    return frequency * FREQUENCY_WEIGHT * decay


async def get_or_create_tag(db: AsyncSession, name: str, timestamp: datetime) -> int:
    """
    Record one use of a tag, creating it on first use.

    Increments frequency, sets last_used to the timestamp, and recomputes the
    frecency score as of that timestamp, so a fresh write always scores
    frequency * 10. Returns the tag id.
    """
    result = await db.execute(select(Tag).where(Tag.name == name))
    tag = result.scalar_one_or_none()

    if tag is not None:
        tag.frequency += 1
        tag.last_used = timestamp
        tag.frecency_score = calculate_frecency(tag.frequency, timestamp, now=timestamp)
        tag.updated_at = timestamp
        await db.flush()
        return tag.id

    tag = Tag(
        name=name,
        frequency=1,
        last_used=timestamp,
        frecency_score=calculate_frecency(1, timestamp, now=timestamp),
        created_at=timestamp,
        updated_at=timestamp,
    )
    db.add(tag)
    await db.flush()
    return tag.id


async def get_tags_by_frecency(db: AsyncSession) -> list[Tag]:
    """
    Get all tags, highest frecency first.

    Scores are those stored at the last write; ties keep insertion order.
    """
    result = await db.execute(
        select(Tag).order_by(Tag.frecency_score.desc(), Tag.id.asc()),
    )
    return list(result.scalars().all())
