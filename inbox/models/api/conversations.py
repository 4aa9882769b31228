from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .listings import ListingSummary
from .messages import MessageResponse
from .profiles import ParticipantSummary


class ConversationResponse(BaseModel):
    """Response model for conversation data."""

    id: UUID
    short_id: Optional[str] = None
    public_id: str
    listing_id: UUID
    participant_1: UUID
    participant_2: UUID
    activated: bool = True
    created_at: Optional[datetime] = None
    updated_at: datetime
    listing: Optional[ListingSummary] = None
    participant1: Optional[ParticipantSummary] = None
    participant2: Optional[ParticipantSummary] = None
    messages: List[MessageResponse] = []

    model_config = ConfigDict(from_attributes=True)

    def has_participant(self, user_id: UUID) -> bool:
        return user_id in (self.participant_1, self.participant_2)


class ConversationListResponse(BaseModel):
    """Payload of the conversation refresh endpoint."""

    conversations: List[ConversationResponse]
