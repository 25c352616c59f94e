# SQLAlchemy database models
from .participant_model import ParticipantModel

__all__ = ["ParticipantModel"]
