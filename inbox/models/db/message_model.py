import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from inbox.database import Base


class MessageModel(Base):
    """SQLAlchemy model for messages table."""

    __tablename__ = "messages"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    conversation_id = Column(
        UUID(as_uuid=True), ForeignKey("conversations.id"), nullable=False
    )
    sender_id = Column(UUID(as_uuid=True), ForeignKey("profiles.id"), nullable=False)
    content = Column(Text, nullable=False)
    message_type = Column(String(10), nullable=False, default="user")
    created_at = Column(DateTime(timezone=True), default=func.now())
    read_at = Column(DateTime(timezone=True))

    # Relationships
    conversation = relationship("ConversationModel", back_populates="messages")

    # Constraints (enforced by database CHECK constraints in the migration)
    # message_type IN ('user', 'system', 'heart')
