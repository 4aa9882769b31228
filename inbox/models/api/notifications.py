from typing import Dict, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NotificationSummaryResponse(BaseModel):
    """Unread event notifications grouped by related event request."""

    total_unread: int = Field(0, alias="totalUnread", ge=0)
    message_unread_by_request: Dict[str, int] = Field(
        default_factory=dict, alias="messageUnreadByRequest"
    )
    status_unread_by_request: Dict[str, int] = Field(
        default_factory=dict, alias="statusUnreadByRequest"
    )

    model_config = ConfigDict(populate_by_name=True)


class UnreadCountResponse(BaseModel):
    """Unread message count for the caller."""

    unread_count: int = Field(0, alias="unreadCount", ge=0)

    model_config = ConfigDict(populate_by_name=True)


class UnreadNotificationsResponse(BaseModel):
    """Unread notification count for the caller."""

    unread_notifications: int = Field(0, alias="unreadNotifications", ge=0)

    model_config = ConfigDict(populate_by_name=True)


class MarkReadRequest(BaseModel):
    """Request model for the notification mark-read operations."""

    action: Literal["markRead", "markAllRead"] = Field(
        ..., description="Operation selector"
    )
    notification_id: Optional[UUID] = Field(
        default=None,
        alias="notificationId",
        description="Target notification, required for 'markRead'",
    )

    model_config = ConfigDict(populate_by_name=True)


class MarkReadResponse(BaseModel):
    """Acknowledgment returned by the mark-read operations."""

    success: bool = True
    updated: int = Field(0, ge=0, description="Rows changed by this call")
