from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import func, or_, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from contest.models.api.participants import (
    ParticipantResponse,
    RegisterParticipantRequest,
)
from contest.models.db.participant_model import ParticipantModel
from contest.repositories.base_repository import BaseRepository


class ParticipantRepository(BaseRepository[ParticipantModel, ParticipantResponse]):
    """Repository for participant operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ParticipantModel)

    async def get_by_email(self, email: str) -> Optional[ParticipantResponse]:
        """Find a participant by email, ignoring letter case."""
        query = (
            select(self.model_class)
            .where(func.lower(self.model_class.email) == email.lower())
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        db_model = result.scalars().first()
        return self._to_pydantic(db_model) if db_model else None

    async def add_participant(
        self, request: RegisterParticipantRequest
    ) -> ParticipantResponse:
        """Insert a new, unscored participant."""
        return await self.create(request)

    async def list_by_name(self) -> List[ParticipantResponse]:
        """All participants, by name then ID."""
        return await self.get_all(
            func.lower(self.model_class.name), self.model_class.id
        )

    async def list_scored(self) -> List[ParticipantResponse]:
        """Scored participants, highest score first, earliest ID on ties."""
        query = (
            select(self.model_class)
            .where(self.model_class.score.is_not(None))
            .order_by(self.model_class.score.desc(), self.model_class.id)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return [self._to_pydantic(db_model) for db_model in result.scalars().all()]

    async def list_for_export(self) -> List[ParticipantResponse]:
        """All participants; scored first by score, then unscored by name."""
        return await self.get_all(
            self.model_class.score.is_(None),
            self.model_class.score.desc(),
            func.lower(self.model_class.name),
            self.model_class.id,
        )

    async def count_scored(self) -> int:
        return await self.count(self.model_class.score.is_not(None))

    async def raise_score(self, participant_id: int, score: float) -> bool:
        """Store ``score`` only if the participant has none or a lower one.

        The comparison and the write happen in one UPDATE statement, so two
        concurrent submissions can never overwrite a higher score with a lower
        one. Returns whether a row was changed.
        """
        stmt = (
            update(self.model_class)
            .where(
                self.model_class.id == participant_id,
                or_(
                    self.model_class.score.is_(None),
                    self.model_class.score < score,
                ),
            )
            .values(score=score, updated_at=datetime.now(timezone.utc))
            # Reads use populate_existing, so the identity map is not synced here
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        await self.db.commit()
        return bool(result.rowcount)

    def _to_pydantic(self, db_model: Any) -> ParticipantResponse:
        """Convert SQLAlchemy ParticipantModel to Pydantic ParticipantResponse."""
        return ParticipantResponse(
            id=db_model.id,
            name=db_model.name,
            email=db_model.email,
            phone=db_model.phone,
            company=db_model.company,
            score=db_model.score,
            created_at=_as_utc(db_model.created_at),
            updated_at=_as_utc(db_model.updated_at),
        )

    def _from_pydantic(
        self, pydantic_model: RegisterParticipantRequest
    ) -> ParticipantModel:
        """Build a new ParticipantModel from a registration request."""
        now = datetime.now(timezone.utc)
        return ParticipantModel(
            name=pydantic_model.name,
            email=pydantic_model.email,
            phone=pydantic_model.phone,
            company=pydantic_model.company,
            score=None,
            created_at=now,
            updated_at=now,
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored values are always UTC
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value
