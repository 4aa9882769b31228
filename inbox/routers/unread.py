from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from inbox.auth import get_current_user_id
from inbox.database import get_db
from inbox.exceptions import RetrievalError
from inbox.models.api.notifications import UnreadCountResponse
from inbox.services.unread_service import UnreadService

router = APIRouter()


@router.get("", response_model=UnreadCountResponse)
async def get_unread_count(
    user_id: Optional[UUID] = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> UnreadCountResponse:
    """Unread incoming messages for the caller; 0 for anonymous callers."""
    if user_id is None:
        return UnreadCountResponse(unread_count=0)

    try:
        service = UnreadService(db)
        count = await service.count_unread_messages(user_id)
        return UnreadCountResponse(unread_count=count)
    except RetrievalError as e:
        raise HTTPException(status_code=500, detail=str(e))
