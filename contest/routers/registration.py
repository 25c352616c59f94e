import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from contest.database import get_db
from contest.exceptions import ConflictError, StorageError, ValidationError
from contest.models.api.participants import (
    ParticipantCountResponse,
    ParticipantResponse,
    RegisterParticipantRequest,
)
from contest.services.list_participants_service import ListParticipantsService
from contest.services.register_participant_service import RegisterParticipantService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    response_model=ParticipantResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_participant(
    request: RegisterParticipantRequest, db: AsyncSession = Depends(get_db)
) -> ParticipantResponse:
    """
    Register a participant from the popup form.

    All of name, email, phone and company are required. An email that is
    already registered (in any letter case) is rejected with 409.
    """
    service = RegisterParticipantService(db)

    try:
        return await service.register(request)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConflictError as e:
        logger.warning("Rejected duplicate registration: %s", e)
        raise HTTPException(status_code=409, detail=str(e))
    except StorageError:
        logger.exception("Storage failure while registering participant")
        raise HTTPException(status_code=500, detail="Internal server error")
    except Exception:
        logger.exception("Unexpected error while registering participant")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/participant-count", response_model=ParticipantCountResponse)
@router.get("/count", response_model=ParticipantCountResponse)
async def participant_count(
    db: AsyncSession = Depends(get_db),
) -> ParticipantCountResponse:
    """Number of registered participants, shown as a counter in the popup."""
    try:
        service = ListParticipantsService(db)
        return ParticipantCountResponse(count=await service.count_participants())
    except Exception:
        logger.exception("Failed to count participants")
        raise HTTPException(status_code=500, detail="Internal server error")
