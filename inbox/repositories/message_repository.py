from typing import Any, List
from uuid import UUID

from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from inbox.models.api.messages import MessageResponse
from inbox.models.db.message_model import MessageModel
from inbox.repositories.base_repository import BaseRepository


class MessageRepository(BaseRepository[MessageModel, MessageResponse]):
    """Repository for message operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, MessageModel)

    async def get_by_conversation(self, conversation_id: UUID) -> List[MessageResponse]:
        """Get all messages for a conversation, oldest first."""
        query = (
            select(self.model_class)
            .where(self.model_class.conversation_id == conversation_id)
            .order_by(self.model_class.created_at)
            # Rows may already sit in the session from an earlier eager load
            .execution_options(populate_existing=True)
        )  # type: ignore
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    async def mark_incoming_read(self, conversation_id: UUID, reader_id: UUID) -> int:
        """Mark messages the reader received in a conversation as read.

        Only rows with a null read_at are touched, so read_at is never
        overwritten. Returns the number of rows changed.
        """
        query = (
            update(self.model_class)
            .where(
                self.model_class.conversation_id == conversation_id,
                self.model_class.sender_id != reader_id,
                self.model_class.read_at.is_(None),
            )
            .values(read_at=func.now())
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(query)
        await self.db.commit()
        return int(result.rowcount or 0)

    def _to_pydantic(self, db_model: Any) -> MessageResponse:
        """Convert SQLAlchemy MessageModel to Pydantic MessageResponse."""
        return MessageResponse(
            id=db_model.id,
            conversation_id=db_model.conversation_id,
            sender_id=db_model.sender_id,
            content=db_model.content,
            message_type=db_model.message_type,
            created_at=db_model.created_at,
            read_at=db_model.read_at,
        )
