# Repository classes for database operations
from .base_repository import BaseRepository
from .participant_repository import ParticipantRepository

__all__ = [
    "BaseRepository",
    "ParticipantRepository",
]
