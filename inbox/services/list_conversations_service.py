import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from inbox.exceptions import NotFoundError
from inbox.models.api.conversations import ConversationResponse
from inbox.repositories.conversation_repository import ConversationRepository

logger = logging.getLogger(__name__)


def is_visible_to(conversation: ConversationResponse, user_id: UUID) -> bool:
    """Non-activated conversations are only shown to the listing's author."""
    if conversation.activated:
        return True
    listing = conversation.listing
    return listing is not None and listing.author_id == user_id


class ListConversationsService:
    """Service for listing and opening a user's conversations."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.conversation_repo = ConversationRepository(db)

    async def list_conversations(self, user_id: UUID) -> List[ConversationResponse]:
        """
        Conversations for the refresh endpoint:

        1. Retrieve every conversation the user takes part in
        2. Drop the ones not yet visible to this user
        3. Return them newest first (ordering comes from the repository)
        """
        conversations = await self.conversation_repo.list_for_participant(user_id)
        visible = [c for c in conversations if is_visible_to(c, user_id)]
        logger.debug(
            "Listed %d of %d conversations for user %s",
            len(visible),
            len(conversations),
            user_id,
        )
        return visible

    async def get_conversation(
        self, user_id: UUID, public_id: str
    ) -> ConversationResponse:
        """Get one conversation by public identifier if the user takes part in it."""
        conversation = await self.conversation_repo.get_by_public_id(public_id)
        if not conversation or not conversation.has_participant(user_id):
            raise NotFoundError(f"Conversation {public_id} not found")
        return conversation
