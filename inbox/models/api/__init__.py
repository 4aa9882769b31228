# API models for request/response contracts
from .conversations import ConversationListResponse, ConversationResponse
from .listings import ListingResponse, ListingSummary
from .messages import MessageListResponse, MessageResponse
from .notifications import (
    MarkReadRequest,
    MarkReadResponse,
    NotificationSummaryResponse,
    UnreadCountResponse,
    UnreadNotificationsResponse,
)
from .profiles import ParticipantSummary, ProfileResponse

__all__ = [
    "ConversationListResponse",
    "ConversationResponse",
    "ListingResponse",
    "ListingSummary",
    "MarkReadRequest",
    "MarkReadResponse",
    "MessageListResponse",
    "MessageResponse",
    "NotificationSummaryResponse",
    "ParticipantSummary",
    "ProfileResponse",
    "UnreadCountResponse",
    "UnreadNotificationsResponse",
]
