from typing import Any, List
from uuid import UUID

from sqlalchemy import Select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload

from inbox.models.api.conversations import ConversationResponse
from inbox.models.api.listings import ListingSummary
from inbox.models.api.messages import MessageResponse
from inbox.models.api.profiles import ParticipantSummary
from inbox.models.db.conversation_model import ConversationModel
from inbox.public_ids import public_id_for
from inbox.repositories.base_repository import BaseRepository


class ConversationRepository(BaseRepository[ConversationModel, ConversationResponse]):
    """Repository for conversation operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ConversationModel)

    def _select(self) -> Select:
        """Conversations always load their listing, participants and messages."""
        return select(self.model_class).options(
            selectinload(self.model_class.messages),
            selectinload(self.model_class.listing),
            selectinload(self.model_class.participant1),
            selectinload(self.model_class.participant2),
        )

    async def list_for_participant(self, user_id: UUID) -> List[ConversationResponse]:
        """List every conversation the user takes part in, newest first."""
        query = (
            self._select()
            .where(
                or_(
                    self.model_class.participant_1 == user_id,
                    self.model_class.participant_2 == user_id,
                )
            )
            .order_by(self.model_class.updated_at.desc())
        )  # type: ignore
        result = await self.db.execute(query)
        db_models = result.scalars().all()
        return [self._to_pydantic(db_model) for db_model in db_models]

    def _to_pydantic(self, db_model: Any) -> ConversationResponse:
        """Convert SQLAlchemy ConversationModel to Pydantic ConversationResponse."""
        listing = (
            ListingSummary.model_validate(db_model.listing)
            if db_model.listing is not None
            else None
        )
        participant1, participant2 = (
            ParticipantSummary.model_validate(profile) if profile is not None else None
            for profile in (db_model.participant1, db_model.participant2)
        )
        messages = [
            MessageResponse.model_validate(message) for message in db_model.messages
        ]

        return ConversationResponse(
            id=db_model.id,
            short_id=db_model.short_id,
            public_id=public_id_for(db_model.id, db_model.short_id),
            listing_id=db_model.listing_id,
            participant_1=db_model.participant_1,
            participant_2=db_model.participant_2,
            activated=db_model.activated,
            created_at=db_model.created_at,
            updated_at=db_model.updated_at,
            listing=listing,
            participant1=participant1,
            participant2=participant2,
            messages=messages,
        )
