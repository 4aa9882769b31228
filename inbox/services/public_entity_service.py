from sqlalchemy.ext.asyncio import AsyncSession

from inbox.exceptions import NotFoundError
from inbox.models.api.listings import ListingResponse
from inbox.models.api.profiles import ProfileResponse
from inbox.repositories.listing_repository import ListingRepository
from inbox.repositories.profile_repository import ProfileRepository


class PublicEntityService:
    """Loads profiles and listings addressed by a public identifier."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.profile_repo = ProfileRepository(db)
        self.listing_repo = ListingRepository(db)

    async def get_profile(self, public_id: str) -> ProfileResponse:
        profile = await self.profile_repo.get_by_public_id(public_id)
        if not profile:
            raise NotFoundError(f"Profile {public_id} not found")
        return profile

    async def get_listing(self, public_id: str) -> ListingResponse:
        listing = await self.listing_repo.get_by_public_id(public_id)
        if not listing:
            raise NotFoundError(f"Listing {public_id} not found")
        return listing
