import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contest.exceptions import NotFoundError, StorageError
from contest.models.api.participants import ParticipantResponse
from contest.repositories.participant_repository import ParticipantRepository

logger = logging.getLogger(__name__)


class DeleteParticipantService:
    """Service for removing participants."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.participant_repo = ParticipantRepository(db)

    async def delete_participant(self, participant_id: int) -> ParticipantResponse:
        """Remove a participant and return the record as it was."""
        try:
            deleted = await self.participant_repo.delete(participant_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(f"Failed to delete participant {participant_id}") from e

        if not deleted:
            raise NotFoundError(participant_id)

        logger.info("Deleted participant %s (%s)", deleted.id, deleted.email)
        return deleted
