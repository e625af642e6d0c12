"""Result values exchanged by the confirmation components.

The token resolver, the status updater and the coordinator report their
outcomes as explicit values instead of raising. Storage faults travel inside
the result as the original `DatabaseError` so the transport layer can log and
re-raise them unchanged.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.exceptions import DatabaseError


class ConfirmationOutcome(str, Enum):
    """Terminal outcomes of a confirmation request."""

    CONFIRMED = "confirmed"
    INVALID_TOKEN = "invalid_token"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class TokenResolution:
    """Outcome of looking a token up: resolved, not found, or storage error."""

    subscriber_id: Optional[uuid.UUID] = None
    error: Optional[DatabaseError] = None

    @classmethod
    def resolved(cls, subscriber_id: uuid.UUID) -> "TokenResolution":
        return cls(subscriber_id=subscriber_id)

    @classmethod
    def not_found(cls) -> "TokenResolution":
        return cls()

    @classmethod
    def storage_error(cls, error: DatabaseError) -> "TokenResolution":
        return cls(error=error)

    @property
    def is_resolved(self) -> bool:
        return self.subscriber_id is not None

    @property
    def is_storage_error(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class StatusUpdate:
    """Outcome of confirming a subscriber: confirmed, or storage error."""

    error: Optional[DatabaseError] = None

    @classmethod
    def confirmed(cls) -> "StatusUpdate":
        return cls()

    @classmethod
    def storage_error(cls, error: DatabaseError) -> "StatusUpdate":
        return cls(error=error)

    @property
    def is_storage_error(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class ConfirmationResult:
    """Outcome of a whole confirmation request.

    Attributes:
        outcome: One of the three terminal outcomes.
        subscriber_id: The confirmed (or failed) subscriber, when one was resolved.
        error: The storage fault, set only for STORAGE_ERROR.
    """

    outcome: ConfirmationOutcome
    subscriber_id: Optional[uuid.UUID] = None
    error: Optional[DatabaseError] = None

    @classmethod
    def confirmed(cls, subscriber_id: uuid.UUID) -> "ConfirmationResult":
        return cls(ConfirmationOutcome.CONFIRMED, subscriber_id=subscriber_id)

    @classmethod
    def invalid_token(cls) -> "ConfirmationResult":
        return cls(ConfirmationOutcome.INVALID_TOKEN)

    @classmethod
    def storage_error(
        cls, error: DatabaseError, subscriber_id: Optional[uuid.UUID] = None
    ) -> "ConfirmationResult":
        return cls(ConfirmationOutcome.STORAGE_ERROR, subscriber_id=subscriber_id, error=error)
