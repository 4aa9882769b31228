from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from inbox.models.api.listings import ListingResponse
from inbox.models.db.listing_model import ListingModel
from inbox.public_ids import public_id_for
from inbox.repositories.base_repository import BaseRepository


class ListingRepository(BaseRepository[ListingModel, ListingResponse]):
    """Repository for listing lookups."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ListingModel)

    def _to_pydantic(self, db_model: Any) -> ListingResponse:
        """Convert SQLAlchemy ListingModel to Pydantic ListingResponse."""
        return ListingResponse(
            id=db_model.id,
            short_id=db_model.short_id,
            public_id=public_id_for(db_model.id, db_model.short_id),
            author_id=db_model.author_id,
            title=db_model.title,
            listing_type=db_model.listing_type,
            created_at=db_model.created_at,
        )
