import logging

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.ext.asyncio import AsyncSession

from inbox.database import get_db
from inbox.exceptions import NotFoundError
from inbox.models.api.profiles import ProfileResponse
from inbox.services.public_entity_service import PublicEntityService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{public_id}", response_model=ProfileResponse)
async def get_profile(
    public_id: str = Path(..., min_length=1, description="UUID or short code"),
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Get a profile by UUID or short code."""
    try:
        service = PublicEntityService(db)
        return await service.get_profile(public_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error fetching profile %s", public_id)
        raise HTTPException(status_code=500, detail="Internal server error")
