from typing import Callable
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from inbox.exceptions import NotFoundError
from inbox.models.api.conversations import ConversationResponse
from inbox.repositories.conversation_repository import ConversationRepository
from inbox.services.list_conversations_service import (
    ListConversationsService,
    is_visible_to,
)


class TestListConversationsService:
    """Unit tests for ListConversationsService."""

    @pytest.fixture
    def service(self, mock_db: AsyncMock) -> ListConversationsService:
        """ListConversationsService instance."""
        return ListConversationsService(mock_db)

    def test_service_initialization(self, mock_db: AsyncMock) -> None:
        """Test that the service initializes correctly."""
        service = ListConversationsService(mock_db)
        assert service.db == mock_db
        assert isinstance(service.conversation_repo, ConversationRepository)

    @pytest.mark.asyncio
    async def test_list_conversations_keeps_repository_order(
        self,
        service: ListConversationsService,
        make_conversation: Callable[..., ConversationResponse],
    ) -> None:
        """Test the refresh list is passed through in repository order."""
        user_id = uuid4()
        conversations = [
            make_conversation(user_id, age_minutes=1),
            make_conversation(uuid4(), user_id, age_minutes=5),
        ]

        with patch.object(
            service.conversation_repo,
            "list_for_participant",
            new_callable=AsyncMock,
            return_value=conversations,
        ) as mock_list:
            result = await service.list_conversations(user_id)

        mock_list.assert_called_once_with(user_id)
        assert result == conversations

    @pytest.mark.asyncio
    async def test_non_activated_only_visible_to_listing_author(
        self,
        service: ListConversationsService,
        make_conversation: Callable[..., ConversationResponse],
    ) -> None:
        """Test pending conversations are hidden from everyone but the author."""
        author, runner = uuid4(), uuid4()
        pending = make_conversation(
            author, runner, activated=False, listing_author=author
        )

        with patch.object(
            service.conversation_repo,
            "list_for_participant",
            new_callable=AsyncMock,
            return_value=[pending],
        ):
            assert await service.list_conversations(author) == [pending]
            assert await service.list_conversations(runner) == []

    def test_is_visible_to_without_listing(
        self, make_conversation: Callable[..., ConversationResponse]
    ) -> None:
        """Test a pending conversation with no listing loaded is hidden."""
        user_id = uuid4()
        pending = make_conversation(user_id, activated=False).model_copy(
            update={"listing": None}
        )
        assert is_visible_to(pending, user_id) is False

    @pytest.mark.asyncio
    async def test_get_conversation_for_participant(
        self,
        service: ListConversationsService,
        make_conversation: Callable[..., ConversationResponse],
    ) -> None:
        """Test a participant can open a conversation by short code."""
        user_id = uuid4()
        conversation = make_conversation(user_id, short_id="c0ffee")

        with patch.object(
            service.conversation_repo,
            "get_by_public_id",
            new_callable=AsyncMock,
            return_value=conversation,
        ) as mock_get:
            result = await service.get_conversation(user_id, "c0ffee")

        mock_get.assert_called_once_with("c0ffee")
        assert result == conversation

    @pytest.mark.asyncio
    async def test_get_conversation_not_found(
        self, service: ListConversationsService
    ) -> None:
        """Test a missing conversation raises NotFoundError."""
        with patch.object(
            service.conversation_repo,
            "get_by_public_id",
            new_callable=AsyncMock,
            return_value=None,
        ):
            with pytest.raises(NotFoundError):
                await service.get_conversation(uuid4(), "missing")

    @pytest.mark.asyncio
    async def test_get_conversation_rejects_outsiders(
        self,
        service: ListConversationsService,
        make_conversation: Callable[..., ConversationResponse],
    ) -> None:
        """Test users outside the conversation get NotFoundError."""
        conversation = make_conversation(uuid4(), uuid4())

        with patch.object(
            service.conversation_repo,
            "get_by_public_id",
            new_callable=AsyncMock,
            return_value=conversation,
        ):
            with pytest.raises(NotFoundError):
                await service.get_conversation(uuid4(), conversation.public_id)
