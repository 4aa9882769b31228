# Repository classes for database operations
from .base_repository import BaseRepository
from .conversation_repository import ConversationRepository
from .listing_repository import ListingRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .profile_repository import ProfileRepository

__all__ = [
    "BaseRepository",
    "ConversationRepository",
    "ListingRepository",
    "MessageRepository",
    "NotificationRepository",
    "ProfileRepository",
]
