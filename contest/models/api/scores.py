from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ScoreUpdateRequest(BaseModel):
    """Request body for recording a score against a participant in the path."""

    score: Optional[float] = Field(default=None, description="Grip strength score")


class ScoreSubmissionRequest(ScoreUpdateRequest):
    """Request body for recording a score with the participant ID in the body."""

    id: Optional[int] = Field(default=None, description="Participant ID")


class ScoreUpdateResponse(BaseModel):
    """Outcome of a score update.

    ``accepted`` is false when the submitted score did not beat the stored one;
    ``score`` is always the score stored after the call.
    """

    id: int
    accepted: bool
    score: Optional[float]


class LeaderboardEntry(BaseModel):
    """Response model for one leaderboard row."""

    id: int
    name: str
    company: str
    score: float

    model_config = ConfigDict(from_attributes=True)
