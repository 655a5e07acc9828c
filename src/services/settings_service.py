"""Service layer for the key/value settings store."""
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession

from models.setting import Setting


async def get_setting(db: AsyncSession, key: str) -> str | None:
    """Get a setting value, or None if the key has never been set."""
    result = await db.execute(select(Setting.value).where(Setting.key == key))
    return result.scalar_one_or_none()


async def set_setting(db: AsyncSession, key: str, value: str) -> None:
    """Insert or overwrite a setting."""
    stmt = insert(Setting).values(key=key, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Setting.key],
        set_={"value": stmt.excluded.value},
    )
    await db.execute(stmt)
