from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterParticipantRequest(BaseModel):
    """Request body sent by the registration popup.

    Fields are optional here so that missing values reach the service and are
    reported as a 400 with a readable message instead of a schema error.
    """

    name: Optional[str] = Field(default=None, description="Full name")
    email: Optional[str] = Field(default=None, description="Email address")
    phone: Optional[str] = Field(default=None, description="Phone number")
    company: Optional[str] = Field(default=None, description="Company or organization")


class ParticipantResponse(BaseModel):
    """Response model for a full participant record."""

    id: int
    name: str
    email: str
    phone: str
    company: str
    score: Optional[float]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ParticipantSummary(BaseModel):
    """Participant as listed for staff."""

    id: int
    name: str
    email: str
    phone: str
    company: str
    score: Optional[float]
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ParticipantCountResponse(BaseModel):
    count: int
