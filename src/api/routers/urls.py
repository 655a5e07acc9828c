"""Saved url endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.url import (
    UrlDeleteResponse,
    UrlListResponse,
    UrlTagsUpdate,
    UrlTagsUpdateResponse,
)
from services import url_service

router = APIRouter(prefix="/urls", tags=["urls"])


@router.get("", response_model=UrlListResponse)
async def list_urls(
    db: AsyncSession = Depends(get_async_session),
) -> UrlListResponse:
    """List all saved urls with their tags, most recently added first."""
    urls = await url_service.get_saved_urls(db)
    return UrlListResponse(urls=urls)


@router.delete("/{url_id}", response_model=UrlDeleteResponse)
async def delete_url(
    url_id: str,
    db: AsyncSession = Depends(get_async_session),
) -> UrlDeleteResponse:
    """Permanently delete a url. Its tags are kept. Unknown ids are not an error."""
    deleted = await url_service.delete_url(db, url_id)
    return UrlDeleteResponse(deleted=deleted)


@router.patch("/{url_id}/tags", response_model=UrlTagsUpdateResponse)
async def update_url_tags(
    url_id: str,
    data: UrlTagsUpdate,
    db: AsyncSession = Depends(get_async_session),
) -> UrlTagsUpdateResponse:
    """Replace the tags of a url. An empty list clears them."""
    updated = await url_service.update_url_tags(db, url_id, data.tags)
    return UrlTagsUpdateResponse(updated=updated)
