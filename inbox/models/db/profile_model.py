import uuid

from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.dialects.postgresql import UUID

from inbox.database import Base


class ProfileModel(Base):
    """SQLAlchemy model for profiles table."""

    __tablename__ = "profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    short_id = Column(String(32), index=True)
    full_name = Column(String(255))
    company_name = Column(String(255))
    user_type = Column(String(30), nullable=False)
    created_at = Column(DateTime(timezone=True), default=func.now())
