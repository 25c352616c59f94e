# API models for request/response contracts
from .participants import (
    ParticipantCountResponse,
    ParticipantResponse,
    ParticipantSummary,
    RegisterParticipantRequest,
)
from .scores import (
    LeaderboardEntry,
    ScoreSubmissionRequest,
    ScoreUpdateRequest,
    ScoreUpdateResponse,
)

__all__ = [
    "RegisterParticipantRequest",
    "ParticipantResponse",
    "ParticipantSummary",
    "ParticipantCountResponse",
    "ScoreUpdateRequest",
    "ScoreSubmissionRequest",
    "ScoreUpdateResponse",
    "LeaderboardEntry",
]
