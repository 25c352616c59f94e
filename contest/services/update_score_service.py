import logging
import math
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contest.exceptions import NotFoundError, StorageError, ValidationError
from contest.models.api.scores import ScoreUpdateResponse
from contest.repositories.participant_repository import ParticipantRepository

logger = logging.getLogger(__name__)


class UpdateScoreService:
    """Service for recording grip strength scores."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.participant_repo = ParticipantRepository(db)

    async def update_score(
        self, participant_id: Optional[int], score: Optional[float]
    ) -> ScoreUpdateResponse:
        """
        Record a score, keeping only each participant's best:

        1. Validate the participant ID and score
        2. Write the score if it beats the stored one (or none is stored)
        3. Report whether it was accepted and the score now on record

        A score that does not beat the stored one leaves the record untouched,
        including its updated_at timestamp.
        """
        # Step 1: Validate
        if participant_id is None:
            raise ValidationError("Participant ID is required")
        if score is None:
            raise ValidationError("Score is required")
        if not math.isfinite(score):
            raise ValidationError("Score must be a finite number")
        if score < 0:
            raise ValidationError("Score must be non-negative")

        try:
            # Step 2: Conditional write
            accepted = await self.participant_repo.raise_score(participant_id, score)

            # Step 3: Read back what is stored now
            participant = await self.participant_repo.get_by_id(participant_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(
                f"Failed to update score for participant {participant_id}"
            ) from e

        if not participant:
            raise NotFoundError(participant_id)

        if accepted:
            logger.info(
                "Accepted score %s for participant %s", score, participant_id
            )
        else:
            logger.info(
                "Kept score %s for participant %s (submitted %s)",
                participant.score,
                participant_id,
                score,
            )

        return ScoreUpdateResponse(
            id=participant.id, accepted=accepted, score=participant.score
        )
