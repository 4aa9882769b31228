import uuid

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    String,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from inbox.database import Base


class ConversationModel(Base):
    """SQLAlchemy model for conversations table."""

    __tablename__ = "conversations"
    __table_args__ = (
        CheckConstraint(
            "participant_1 <> participant_2", name="ck_conversations_two_parties"
        ),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    short_id = Column(String(32), index=True)
    listing_id = Column(UUID(as_uuid=True), ForeignKey("listings.id"), nullable=False)
    participant_1 = Column(
        UUID(as_uuid=True), ForeignKey("profiles.id"), nullable=False
    )
    participant_2 = Column(
        UUID(as_uuid=True), ForeignKey("profiles.id"), nullable=False
    )
    activated = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=func.now())
    # Bumped by the messages insert trigger
    updated_at = Column(DateTime(timezone=True), default=func.now())

    # Relationships
    listing = relationship("ListingModel")
    participant1 = relationship("ProfileModel", foreign_keys=[participant_1])
    participant2 = relationship("ProfileModel", foreign_keys=[participant_2])
    messages = relationship(
        "MessageModel",
        back_populates="conversation",
        order_by="MessageModel.created_at",
    )
