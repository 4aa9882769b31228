import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inbox.models.api.notifications import MarkReadRequest, MarkReadResponse
from inbox.repositories.notification_repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for marking notifications read.

    Both operations are idempotent: rows that are already read are left
    alone and a repeat call simply changes nothing.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.notification_repo = NotificationRepository(db)

    async def apply(self, user_id: UUID, request: MarkReadRequest) -> MarkReadResponse:
        """Dispatch a mark-read request on its action selector."""
        if request.action == "markRead":
            if request.notification_id is None:
                raise ValueError("notificationId is required for markRead")
            updated = await self.mark_read(user_id, request.notification_id)
        else:
            updated = await self.mark_all_read(user_id)
        return MarkReadResponse(success=True, updated=updated)

    async def mark_read(self, user_id: UUID, notification_id: UUID) -> int:
        updated = await self.notification_repo.mark_read(notification_id, user_id)
        logger.debug(
            "markRead %s for user %s changed %d rows", notification_id, user_id, updated
        )
        return updated

    async def mark_all_read(self, user_id: UUID) -> int:
        updated = await self.notification_repo.mark_all_read(user_id)
        logger.debug("markAllRead for user %s changed %d rows", user_id, updated)
        return updated
