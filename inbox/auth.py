"""Caller identity as established by the upstream session layer.

Session issuance happens in front of this service; the authenticated user id
reaches us in the ``X-User-Id`` header.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException

logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-User-Id"


async def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias=USER_ID_HEADER),
) -> Optional[UUID]:
    """Return the caller's user id, or None for anonymous callers."""
    if not x_user_id:
        return None
    try:
        return UUID(x_user_id)
    except ValueError:
        logger.warning("Ignoring malformed %s header", USER_ID_HEADER)
        return None


async def require_user_id(
    user_id: Optional[UUID] = Depends(get_current_user_id),
) -> UUID:
    """Return the caller's user id or reject the request with 401."""
    if user_id is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user_id
