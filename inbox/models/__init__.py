# API models only; importing .db requires DATABASE_URL
from .api import (
    ConversationListResponse,
    ConversationResponse,
    ListingResponse,
    MarkReadRequest,
    MarkReadResponse,
    MessageListResponse,
    MessageResponse,
    NotificationSummaryResponse,
    ProfileResponse,
    UnreadCountResponse,
    UnreadNotificationsResponse,
)

__all__ = [
    "ConversationListResponse",
    "ConversationResponse",
    "ListingResponse",
    "MarkReadRequest",
    "MarkReadResponse",
    "MessageListResponse",
    "MessageResponse",
    "NotificationSummaryResponse",
    "ProfileResponse",
    "UnreadCountResponse",
    "UnreadNotificationsResponse",
]
