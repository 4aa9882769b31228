import os
from typing import Dict, List, Optional
from uuid import UUID

import httpx

from inbox.auth import USER_ID_HEADER
from inbox.models.api.conversations import (
    ConversationListResponse,
    ConversationResponse,
)
from inbox.models.api.notifications import UnreadCountResponse

INBOX_API_URL = os.getenv("INBOX_API_URL", "http://localhost:8000")


class ConversationsClient:
    """Client for the conversation refresh and unread count endpoints using httpx."""

    def __init__(
        self,
        user_id: UUID,
        base_url: str = INBOX_API_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.user_id = user_id
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            USER_ID_HEADER: str(self.user_id),
        }

    async def fetch_conversations(self) -> List[ConversationResponse]:
        """Load the caller's conversation list.

        Raises httpx.HTTPError on transport failures and non-success responses.
        """
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.get("/api/conversations", headers=self._headers())
            response.raise_for_status()
            payload = ConversationListResponse.model_validate(response.json())

            return payload.conversations

    async def fetch_unread_count(self) -> int:
        """Load the caller's unread incoming message count.

        Raises httpx.HTTPError on transport failures and non-success responses.
        """
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.get("/api/unread", headers=self._headers())
            response.raise_for_status()
            payload = UnreadCountResponse.model_validate(response.json())

            return payload.unread_count
