import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from contest.database import get_db
from contest.services.export_participants_service import ExportParticipantsService

logger = logging.getLogger(__name__)

router = APIRouter()

EXPORT_FILENAME = "participants.csv"


@router.get("/export", response_class=Response)
@router.get("/export-csv", response_class=Response)
async def export_participants(db: AsyncSession = Depends(get_db)) -> Response:
    """Download every participant as a CSV attachment."""
    try:
        service = ExportParticipantsService(db)
        content = await service.export_csv()
    except Exception:
        logger.exception("Failed to export participants")
        raise HTTPException(status_code=500, detail="Internal server error")

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
