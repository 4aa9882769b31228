import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from inbox.auth import require_user_id
from inbox.database import get_db
from inbox.exceptions import NotFoundError
from inbox.models.api.conversations import (
    ConversationListResponse,
    ConversationResponse,
)
from inbox.models.api.messages import MessageListResponse
from inbox.services.get_conversation_messages_service import (
    GetConversationMessagesService,
)
from inbox.services.list_conversations_service import ListConversationsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=ConversationListResponse)
async def list_conversations(
    user_id: UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
) -> ConversationListResponse:
    """
    Refresh endpoint: every conversation visible to the caller.

    Conversations are ordered by last update, newest first, and carry
    their messages.
    """
    try:
        service = ListConversationsService(db)
        conversations = await service.list_conversations(user_id)
        return ConversationListResponse(conversations=conversations)
    except Exception:
        logger.exception("Error fetching conversations for user %s", user_id)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{public_id}", response_model=ConversationResponse)
async def get_conversation(
    public_id: str = Path(..., min_length=1, description="UUID or short code"),
    user_id: UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
) -> ConversationResponse:
    """
    Get a single conversation the caller takes part in.

    Path parameters:
    - public_id: UUID or short code of the conversation
    """
    try:
        service = ListConversationsService(db)
        return await service.get_conversation(user_id, public_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error fetching conversation %s", public_id)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{public_id}/messages", response_model=MessageListResponse)
async def get_conversation_messages(
    public_id: str = Path(..., min_length=1, description="UUID or short code"),
    user_id: UUID = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
) -> MessageListResponse:
    """
    Open a conversation: return its messages and mark incoming ones read.

    Path parameters:
    - public_id: UUID or short code of the conversation
    """
    try:
        service = GetConversationMessagesService(db)
        messages = await service.get_conversation_messages(user_id, public_id)
        return MessageListResponse(messages=messages)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error fetching messages for conversation %s", public_id)
        raise HTTPException(status_code=500, detail="Internal server error")
