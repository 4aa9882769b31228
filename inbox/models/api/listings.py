from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ListingSummary(BaseModel):
    """Listing fields embedded in a conversation."""

    id: UUID
    title: str
    listing_type: str
    author_id: UUID

    model_config = ConfigDict(from_attributes=True)


class ListingResponse(ListingSummary):
    """Response model for listing data."""

    short_id: Optional[str] = None
    public_id: str
    created_at: Optional[datetime] = None
