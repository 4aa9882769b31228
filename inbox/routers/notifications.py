import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from inbox.auth import get_current_user_id, require_user_id
from inbox.database import get_db
from inbox.exceptions import RetrievalError
from inbox.models.api.notifications import (
    MarkReadRequest,
    MarkReadResponse,
    NotificationSummaryResponse,
    UnreadNotificationsResponse,
)
from inbox.services.notification_service import NotificationService
from inbox.services.unread_service import UnreadService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=UnreadNotificationsResponse)
async def get_unread_notifications(
    user_id: Optional[UUID] = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> UnreadNotificationsResponse:
    """Unread notification count for the caller; 0 for anonymous callers."""
    if user_id is None:
        return UnreadNotificationsResponse(unread_notifications=0)

    try:
        service = UnreadService(db)
        count = await service.count_unread_notifications(user_id)
        return UnreadNotificationsResponse(unread_notifications=count)
    except RetrievalError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=MarkReadResponse)
async def mark_notifications_read(
    request: MarkReadRequest,
    user_id: UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
) -> MarkReadResponse:
    """
    Mark notifications read.

    Body:
    - action: 'markRead' (with notificationId) or 'markAllRead'
    """
    try:
        service = NotificationService(db)
        return await service.apply(user_id, request)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Error marking notifications read for user %s", user_id)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/summary", response_model=NotificationSummaryResponse)
async def get_notification_summary(
    user_id: UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
) -> NotificationSummaryResponse:
    """Unread event notifications per event request, for dashboards."""
    try:
        service = UnreadService(db)
        return await service.summarize(user_id)
    except RetrievalError as e:
        raise HTTPException(status_code=500, detail=str(e))
