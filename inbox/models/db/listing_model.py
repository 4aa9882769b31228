import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.dialects.postgresql import UUID

from inbox.database import Base


class ListingModel(Base):
    """SQLAlchemy model for listings table."""

    __tablename__ = "listings"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    short_id = Column(String(32), index=True)
    author_id = Column(UUID(as_uuid=True), ForeignKey("profiles.id"), nullable=False)
    title = Column(String(255), nullable=False)
    listing_type = Column(String(30), nullable=False)
    created_at = Column(DateTime(timezone=True), default=func.now())
