import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB, UUID

from inbox.database import Base


class NotificationModel(Base):
    """SQLAlchemy model for notifications table."""

    __tablename__ = "notifications"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("profiles.id"), nullable=False)
    type = Column(String(30), nullable=False, default="system")
    title = Column(String(255), nullable=False, default="")
    message = Column(Text, nullable=False, default="")
    # Free-form payload; event notifications carry 'kind' and 'event_request_id'
    data = Column(JSONB)
    created_at = Column(DateTime(timezone=True), default=func.now())
    read_at = Column(DateTime(timezone=True))
