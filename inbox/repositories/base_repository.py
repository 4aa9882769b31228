from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from inbox.database import Base
from inbox.public_ids import apply_public_id_filter

ModelType = TypeVar("ModelType", bound=Base)
PydanticType = TypeVar("PydanticType", bound=BaseModel)


class BaseRepository(Generic[ModelType, PydanticType]):
    """Generic base repository with public identifier lookups."""

    def __init__(self, db: AsyncSession, model_class: Any):
        self.db = db
        self.model_class = model_class

    def _select(self) -> Select:
        """Base query for this repository; subclasses add eager loads here."""
        return select(self.model_class)

    async def get_by_public_id(self, public_id: str) -> Optional[PydanticType]:
        """Get a single record by UUID or short code.

        Fallback short codes are not unique, so the first match wins.
        """
        query = apply_public_id_filter(self._select(), self.model_class, public_id)
        result = await self.db.execute(query)
        db_model = result.scalars().first()
        return self._to_pydantic(db_model) if db_model else None

    def _to_pydantic(self, db_model: ModelType) -> PydanticType:
        """Convert SQLAlchemy model to Pydantic model.

        This should be overridden in subclasses for specific conversion logic.
        """
        raise NotImplementedError
