import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inbox.models.api.messages import MessageResponse
from inbox.repositories.message_repository import MessageRepository
from inbox.services.list_conversations_service import ListConversationsService

logger = logging.getLogger(__name__)


class GetConversationMessagesService:
    """Service for opening a conversation and reading its messages."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.conversations = ListConversationsService(db)
        self.message_repo = MessageRepository(db)

    async def get_conversation_messages(
        self, user_id: UUID, public_id: str
    ) -> List[MessageResponse]:
        """
        Open a conversation as one of its participants:

        1. Resolve the conversation and verify the user takes part in it
        2. Mark the messages the other party sent as read
        3. Return the messages, oldest first, with read_at up to date
        """
        conversation = await self.conversations.get_conversation(user_id, public_id)

        has_unread = any(
            message.sender_id != user_id and message.read_at is None
            for message in conversation.messages
        )
        if not has_unread:
            return conversation.messages

        marked = await self.message_repo.mark_incoming_read(conversation.id, user_id)
        logger.debug(
            "Marked %d messages read in conversation %s for user %s",
            marked,
            conversation.id,
            user_id,
        )
        return await self.message_repo.get_by_conversation(conversation.id)
