import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contest.exceptions import ConflictError, StorageError, ValidationError
from contest.models.api.participants import (
    ParticipantResponse,
    RegisterParticipantRequest,
)
from contest.models.db.participant_model import ParticipantModel
from contest.repositories.participant_repository import ParticipantRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "phone", "company")

# Column widths, so over-long input is rejected before it reaches the database
MAX_LENGTHS = {
    field: ParticipantModel.__table__.c[field].type.length for field in REQUIRED_FIELDS
}


class RegisterParticipantService:
    """Service for registering contest participants."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.participant_repo = ParticipantRepository(db)

    async def register(
        self, request: RegisterParticipantRequest
    ) -> ParticipantResponse:
        """
        Register a new participant:

        1. Strip and validate the submitted fields
        2. Reject an email that is already registered (any letter case)
        3. Insert the participant with no score
        """
        # Step 1: Normalize and validate
        cleaned = self._clean(request)

        try:
            # Step 2: Enforce email uniqueness
            existing = await self.participant_repo.get_by_email(cleaned.email)
            if existing:
                raise ConflictError(
                    f"A participant with email {cleaned.email} is already registered"
                )

            # Step 3: Persist
            participant = await self.participant_repo.add_participant(cleaned)
        except IntegrityError as e:
            # Lost a race against a concurrent registration of the same email
            await self.db.rollback()
            raise ConflictError(
                f"A participant with email {cleaned.email} is already registered"
            ) from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError("Failed to register participant") from e

        logger.info(
            "Registered participant %s (%s)", participant.id, participant.email
        )
        return participant

    def _clean(self, request: RegisterParticipantRequest) -> RegisterParticipantRequest:
        """Strip whitespace and check that every required field is present and fits."""
        values = {
            field: (getattr(request, field) or "").strip() for field in REQUIRED_FIELDS
        }
        missing = [field for field in REQUIRED_FIELDS if not values[field]]
        if missing:
            raise ValidationError(
                f"Missing required field(s): {', '.join(missing)}"
            )
        too_long = [
            field for field in REQUIRED_FIELDS if len(values[field]) > MAX_LENGTHS[field]
        ]
        if too_long:
            raise ValidationError(
                "Field(s) too long: "
                + ", ".join(f"{field} (max {MAX_LENGTHS[field]})" for field in too_long)
            )
        return RegisterParticipantRequest(**values)
