import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from contest.database import get_db
from contest.exceptions import NotFoundError
from contest.models.api.participants import ParticipantResponse, ParticipantSummary
from contest.services.delete_participant_service import DeleteParticipantService
from contest.services.list_participants_service import ListParticipantsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[ParticipantSummary])
async def list_participants(
    db: AsyncSession = Depends(get_db),
) -> List[ParticipantSummary]:
    """List all participants, ordered by name."""
    try:
        service = ListParticipantsService(db)
        return await service.list_participants()
    except Exception:
        logger.exception("Failed to list participants")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{participant_id}", response_model=ParticipantResponse)
async def get_participant(
    participant_id: int, db: AsyncSession = Depends(get_db)
) -> ParticipantResponse:
    """
    Get a single participant.

    Path parameters:
    - participant_id: ID assigned at registration
    """
    try:
        service = ListParticipantsService(db)
        return await service.get_participant(participant_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Failed to load participant %s", participant_id)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{participant_id}", response_model=ParticipantResponse)
async def delete_participant(
    participant_id: int, db: AsyncSession = Depends(get_db)
) -> ParticipantResponse:
    """Delete a participant and return the removed record."""
    try:
        service = DeleteParticipantService(db)
        return await service.delete_participant(participant_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Failed to delete participant %s", participant_id)
        raise HTTPException(status_code=500, detail="Internal server error")
