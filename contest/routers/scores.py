import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from contest.database import get_db
from contest.exceptions import NotFoundError, ValidationError
from contest.models.api.scores import (
    LeaderboardEntry,
    ScoreSubmissionRequest,
    ScoreUpdateRequest,
    ScoreUpdateResponse,
)
from contest.services.list_participants_service import ListParticipantsService
from contest.services.update_score_service import UpdateScoreService

logger = logging.getLogger(__name__)

router = APIRouter()


async def _update_score(
    db: AsyncSession, participant_id: Optional[int], score: Optional[float]
) -> ScoreUpdateResponse:
    try:
        service = UpdateScoreService(db)
        return await service.update_score(participant_id, score)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Failed to update score for participant %s", participant_id)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/scores/{participant_id}", response_model=ScoreUpdateResponse)
async def update_score(
    participant_id: int,
    request: ScoreUpdateRequest,
    db: AsyncSession = Depends(get_db),
) -> ScoreUpdateResponse:
    """
    Record a grip strength score.

    The score is stored only when it beats the participant's current best;
    otherwise ``accepted`` is false and the current best is returned.
    """
    return await _update_score(db, participant_id, request.score)


@router.post("/score", response_model=ScoreUpdateResponse)
async def submit_score(
    request: ScoreSubmissionRequest, db: AsyncSession = Depends(get_db)
) -> ScoreUpdateResponse:
    """Record a score with the participant ID in the request body."""
    return await _update_score(db, request.id, request.score)


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
async def leaderboard(db: AsyncSession = Depends(get_db)) -> List[LeaderboardEntry]:
    """Scored participants, highest score first."""
    try:
        service = ListParticipantsService(db)
        return await service.get_leaderboard()
    except Exception:
        logger.exception("Failed to load leaderboard")
        raise HTTPException(status_code=500, detail="Internal server error")
