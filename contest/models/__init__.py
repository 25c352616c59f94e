# Export all models
from .api import (
    LeaderboardEntry,
    ParticipantCountResponse,
    ParticipantResponse,
    ParticipantSummary,
    RegisterParticipantRequest,
    ScoreSubmissionRequest,
    ScoreUpdateRequest,
    ScoreUpdateResponse,
)
from .db import ParticipantModel

__all__ = [
    # API models
    "RegisterParticipantRequest",
    "ParticipantResponse",
    "ParticipantSummary",
    "ParticipantCountResponse",
    "ScoreUpdateRequest",
    "ScoreSubmissionRequest",
    "ScoreUpdateResponse",
    "LeaderboardEntry",
    # DB models
    "ParticipantModel",
]
