"""Webhook endpoint for ingesting urls from clients."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session
from schemas.url import SavedUrlRef, WebhookPayload, WebhookResponse
from services import url_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])


@router.post("/webhook", response_model=WebhookResponse)
async def receive_webhook(
    payload: WebhookPayload,
    db: AsyncSession = Depends(get_async_session),
) -> WebhookResponse:
    """
    Save every url in the payload with its tags.

    Entries without a url are skipped. A url that is already saved keeps its id and
    has its tags replaced by the ones in this payload.
    """
    logger.info("webhook_received", extra={"item_count": len(payload.urls)})

    saved = []
    for item in payload.urls:
        if not item.url:
            continue
        url_id = await url_service.save_url(db, item.url, item.tags)
        saved.append(SavedUrlRef(id=url_id, url=item.url))

    return WebhookResponse(saved_count=len(saved), saved=saved)
