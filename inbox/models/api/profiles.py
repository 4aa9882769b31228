from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ProfileResponse(BaseModel):
    """Response model for profile data."""

    id: UUID
    short_id: Optional[str] = None
    public_id: str
    full_name: Optional[str] = None
    company_name: Optional[str] = None
    user_type: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ParticipantSummary(BaseModel):
    """Profile fields embedded in a conversation for each participant."""

    id: UUID
    full_name: Optional[str] = None
    company_name: Optional[str] = None
    user_type: str

    model_config = ConfigDict(from_attributes=True)
