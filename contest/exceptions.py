"""Errors raised by the participant services."""

from typing import Optional


class ContestError(Exception):
    """Base class for contest service errors."""


class ValidationError(ContestError):
    """A required field is missing or has an invalid value."""


class ConflictError(ContestError):
    """A participant with the same email is already registered."""


class NotFoundError(ContestError):
    """No participant exists with the requested ID."""

    def __init__(self, participant_id: int, message: Optional[str] = None):
        self.participant_id = participant_id
        super().__init__(message or f"Participant with ID {participant_id} not found")


class StorageError(ContestError):
    """The database failed while reading or writing participants."""
