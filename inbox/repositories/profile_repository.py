from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from inbox.models.api.profiles import ProfileResponse
from inbox.models.db.profile_model import ProfileModel
from inbox.public_ids import public_id_for
from inbox.repositories.base_repository import BaseRepository


class ProfileRepository(BaseRepository[ProfileModel, ProfileResponse]):
    """Repository for profile lookups."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ProfileModel)

    def _to_pydantic(self, db_model: Any) -> ProfileResponse:
        """Convert SQLAlchemy ProfileModel to Pydantic ProfileResponse."""
        return ProfileResponse(
            id=db_model.id,
            short_id=db_model.short_id,
            public_id=public_id_for(db_model.id, db_model.short_id),
            full_name=db_model.full_name,
            company_name=db_model.company_name,
            user_type=db_model.user_type,
            created_at=db_model.created_at,
        )
