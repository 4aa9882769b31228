from typing import Any, List
from uuid import UUID

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from inbox.models.db.notification_model import NotificationModel


class NotificationRepository:
    """Repository for notification reads and read-marking."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.model_class = NotificationModel

    async def get_unread_payloads(self, user_id: UUID) -> List[Any]:
        """Get the data payload of every unread notification for a user."""
        query = select(self.model_class.data).where(
            self.model_class.user_id == user_id,
            self.model_class.read_at.is_(None),
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count_unread(self, user_id: UUID) -> int:
        """Count unread notifications of any kind for a user."""
        query = (
            select(func.count())
            .select_from(self.model_class)
            .where(
                self.model_class.user_id == user_id,
                self.model_class.read_at.is_(None),
            )
        )
        result = await self.db.execute(query)
        return int(result.scalar_one() or 0)

    async def mark_read(self, notification_id: UUID, user_id: UUID) -> int:
        """Mark one of the user's notifications read.

        Returns 0 when the row is already read or belongs to someone else.
        """
        query = (
            update(self.model_class)
            .where(
                self.model_class.id == notification_id,
                self.model_class.user_id == user_id,
                self.model_class.read_at.is_(None),
            )
            .values(read_at=func.now())
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(query)
        await self.db.commit()
        return int(result.rowcount or 0)

    async def mark_all_read(self, user_id: UUID) -> int:
        """Mark every unread notification of the user read."""
        query = (
            update(self.model_class)
            .where(
                self.model_class.user_id == user_id,
                self.model_class.read_at.is_(None),
            )
            .values(read_at=func.now())
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(query)
        await self.db.commit()
        return int(result.rowcount or 0)
