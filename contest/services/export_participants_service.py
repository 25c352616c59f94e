import csv
import io
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contest.exceptions import StorageError
from contest.models.api.participants import ParticipantResponse
from contest.repositories.participant_repository import ParticipantRepository

EXPORT_COLUMNS = [
    "id",
    "name",
    "email",
    "phone",
    "company",
    "score",
    "created_at",
    "updated_at",
]


class ExportParticipantsService:
    """Service for exporting all participants as CSV."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.participant_repo = ParticipantRepository(db)

    async def export_participants(self) -> List[ParticipantResponse]:
        """
        All participants in export order:

        - scored participants first, highest score first
        - unscored participants after them, by name
        - participant ID breaks any remaining tie
        """
        try:
            return await self.participant_repo.list_for_export()
        except SQLAlchemyError as e:
            raise StorageError("Failed to export participants") from e

    async def export_csv(self) -> str:
        participants = await self.export_participants()
        return self.render_csv(participants)

    @staticmethod
    def render_csv(participants: List[ParticipantResponse]) -> str:
        """Render participants with a header row and minimal quoting."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(EXPORT_COLUMNS)
        for p in participants:
            writer.writerow(
                [
                    p.id,
                    p.name,
                    p.email,
                    p.phone,
                    p.company,
                    _format_score(p.score),
                    _format_timestamp(p.created_at),
                    _format_timestamp(p.updated_at),
                ]
            )
        return buffer.getvalue()


def _format_score(score: Optional[float]) -> str:
    if score is None:
        return ""
    # 50.0 -> "50", 52.5 -> "52.5"
    return str(int(score)) if score.is_integer() else str(score)


def _format_timestamp(value: datetime) -> str:
    return value.isoformat()
