"""Domain Value Objects for the subscription domain.

Value objects are immutable objects that describe domain concepts by their attributes
rather than their identity.
"""

from .confirmation_result import (
    ConfirmationOutcome,
    ConfirmationResult,
    StatusUpdate,
    TokenResolution,
)
from .confirmation_token import ConfirmationToken
from .subscriber_email import SubscriberEmail
from .subscriber_name import SubscriberName

__all__ = [
    "ConfirmationOutcome",
    "ConfirmationResult",
    "ConfirmationToken",
    "StatusUpdate",
    "SubscriberEmail",
    "SubscriberName",
    "TokenResolution",
]
