from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contest.exceptions import NotFoundError, StorageError
from contest.models.api.participants import ParticipantResponse, ParticipantSummary
from contest.models.api.scores import LeaderboardEntry
from contest.repositories.participant_repository import ParticipantRepository


class ListParticipantsService:
    """Service for reading participants, counts and the leaderboard."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.participant_repo = ParticipantRepository(db)

    async def list_participants(self) -> List[ParticipantSummary]:
        """All participants ordered by name, then ID."""
        try:
            participants = await self.participant_repo.list_by_name()
        except SQLAlchemyError as e:
            raise StorageError("Failed to list participants") from e
        return [
            ParticipantSummary.model_validate(p, from_attributes=True)
            for p in participants
        ]

    async def get_participant(self, participant_id: int) -> ParticipantResponse:
        try:
            participant = await self.participant_repo.get_by_id(participant_id)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to load participant {participant_id}") from e
        if not participant:
            raise NotFoundError(participant_id)
        return participant

    async def count_participants(self) -> int:
        try:
            return await self.participant_repo.count()
        except SQLAlchemyError as e:
            raise StorageError("Failed to count participants") from e

    async def count_scored_participants(self) -> int:
        try:
            return await self.participant_repo.count_scored()
        except SQLAlchemyError as e:
            raise StorageError("Failed to count scored participants") from e

    async def get_leaderboard(self) -> List[LeaderboardEntry]:
        """
        Scored participants ranked by score, highest first.

        Equal scores are ranked by participant ID, so whoever registered
        first places higher and repeated calls return the same order.
        """
        try:
            participants = await self.participant_repo.list_scored()
        except SQLAlchemyError as e:
            raise StorageError("Failed to load leaderboard") from e
        return [
            LeaderboardEntry(
                id=p.id, name=p.name, company=p.company, score=p.score
            )
            for p in participants
        ]
