"""Tag endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.tag import TagListResponse, TagResponse
from services.tag_service import get_tags_by_frecency

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=TagListResponse)
async def list_tags(
    db: AsyncSession = Depends(get_async_session),
) -> TagListResponse:
    """
    Get all tags with their usage statistics.

    Returns tags sorted by frecency score (frequently and recently used first).
    Scores reflect the last time each tag was written, not the time of this request.
    """
    tags = await get_tags_by_frecency(db)
    return TagListResponse(tags=[TagResponse.model_validate(t) for t in tags])
