"""Unread aggregation over messages and notifications.

The counting rules live in plain functions so they can be applied to any
snapshot of rows; ``UnreadService`` only fetches the rows and handles store
failures.
"""

import logging
from collections import Counter
from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from inbox.exceptions import RetrievalError
from inbox.models.api.conversations import ConversationResponse
from inbox.models.api.notifications import NotificationSummaryResponse
from inbox.repositories.conversation_repository import ConversationRepository
from inbox.repositories.notification_repository import NotificationRepository

logger = logging.getLogger(__name__)

EVENT_STATUS_KIND = "tl_event_status_update"
EVENT_MESSAGE_KIND = "tl_event_message"


def _event_request_id(payload: Dict[str, Any]) -> Optional[str]:
    request_id = payload.get("event_request_id")
    # 0, False and "" all mean no request
    if not request_id:
        return None
    return str(request_id)


def summarize_notification_payloads(
    payloads: Iterable[Any],
) -> NotificationSummaryResponse:
    """Group unread event notification payloads by kind and event request.

    Payloads that are not mappings, have an unrecognized kind, or carry no
    event request id are skipped.
    """
    by_kind: Dict[str, Counter] = {
        EVENT_MESSAGE_KIND: Counter(),
        EVENT_STATUS_KIND: Counter(),
    }
    skipped = 0

    for payload in payloads:
        if not isinstance(payload, dict):
            skipped += 1
            continue
        counter = by_kind.get(str(payload.get("kind") or ""))
        request_id = _event_request_id(payload)
        if counter is None or request_id is None:
            skipped += 1
            continue
        counter[request_id] += 1

    if skipped:
        logger.debug("Skipped %d notifications outside event aggregation", skipped)

    message_counts = dict(by_kind[EVENT_MESSAGE_KIND])
    status_counts = dict(by_kind[EVENT_STATUS_KIND])
    return NotificationSummaryResponse(
        total_unread=sum(message_counts.values()) + sum(status_counts.values()),
        message_unread_by_request=message_counts,
        status_unread_by_request=status_counts,
    )


def count_unread_messages_in(
    conversations: Iterable[ConversationResponse], user_id: UUID
) -> int:
    """Count messages the user received and has not read yet."""
    return sum(
        1
        for conversation in conversations
        for message in conversation.messages
        if message.sender_id != user_id and message.read_at is None
    )


class UnreadService:
    """Service computing unread counts for one user."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.conversation_repo = ConversationRepository(db)
        self.notification_repo = NotificationRepository(db)

    async def summarize(self, user_id: UUID) -> NotificationSummaryResponse:
        """Unread event notifications grouped per event request."""
        try:
            payloads = await self.notification_repo.get_unread_payloads(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to load notifications for user %s: %s", user_id, e)
            raise RetrievalError("Could not load notifications") from e
        return summarize_notification_payloads(payloads)

    async def count_unread_messages(self, user_id: UUID) -> int:
        """Unread incoming messages across all of the user's conversations."""
        try:
            conversations = await self.conversation_repo.list_for_participant(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to load conversations for user %s: %s", user_id, e)
            raise RetrievalError("Could not load conversations") from e
        return count_unread_messages_in(conversations, user_id)

    async def count_unread_notifications(self, user_id: UUID) -> int:
        """Unread notifications of any kind."""
        try:
            return await self.notification_repo.count_unread(user_id)
        except SQLAlchemyError as e:
            logger.error("Failed to count notifications for user %s: %s", user_id, e)
            raise RetrievalError("Could not count notifications") from e
