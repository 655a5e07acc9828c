"""Key/value settings endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.setting import SettingResponse, SettingUpdate
from services import settings_service

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/{key}", response_model=SettingResponse)
async def get_setting(
    key: str,
    db: AsyncSession = Depends(get_async_session),
) -> SettingResponse:
    """Get a setting. value is null when the key has never been set."""
    value = await settings_service.get_setting(db, key)
    return SettingResponse(key=key, value=value)


@router.put("/{key}", response_model=SettingResponse)
async def put_setting(
    key: str,
    data: SettingUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> SettingResponse:
    """Create or overwrite a setting."""
    await settings_service.set_setting(db, key, data.value)
    return SettingResponse(key=key, value=data.value)
