# SQLAlchemy database models
from .conversation_model import ConversationModel
from .listing_model import ListingModel
from .message_model import MessageModel
from .notification_model import NotificationModel
from .profile_model import ProfileModel

__all__ = [
    "ConversationModel",
    "ListingModel",
    "MessageModel",
    "NotificationModel",
    "ProfileModel",
]
