"""Service interfaces for the subscription domain.

These ports describe the collaborators the domain services depend on and the
services the API layer depends on. Concrete implementations live in
`src.domain.services` and `src.infrastructure.services`.
"""

import uuid
from abc import ABC, abstractmethod

from src.domain.entities.subscription import Subscription
from src.domain.value_objects.confirmation_result import (
    ConfirmationResult,
    StatusUpdate,
    TokenResolution,
)


class IEmailClient(ABC):
    """Delivers a single email through the configured email API."""

    @abstractmethod
    async def send_email(
        self,
        recipient: str,
        subject: str,
        html_content: str,
        text_content: str,
    ) -> None:
        """Sends one email.

        Raises:
            EmailServiceError: If the email API cannot be reached or rejects the request.
        """
        raise NotImplementedError


class ITokenResolver(ABC):
    """Maps a confirmation token to the subscriber it was issued to."""

    @abstractmethod
    async def resolve(self, token: str) -> TokenResolution:
        raise NotImplementedError


class IStatusUpdater(ABC):
    """Moves a subscriber to the confirmed status."""

    @abstractmethod
    async def confirm(self, subscriber_id: uuid.UUID) -> StatusUpdate:
        raise NotImplementedError


class IConfirmationCoordinator(ABC):
    """Runs a full confirmation request: resolve, then update."""

    @abstractmethod
    async def handle(self, token: str) -> ConfirmationResult:
        raise NotImplementedError


class ISubscriptionService(ABC):
    """Creates pending subscribers and sends their confirmation email."""

    @abstractmethod
    async def subscribe(self, name: str, email: str) -> Subscription:
        """Creates a pending subscriber and emails the confirmation link.

        Raises:
            InvalidSubscriberError: If the name or email fails validation.
            DuplicateSubscriberError: If the email is already subscribed.
            DatabaseError: If the subscriber cannot be stored.
            EmailServiceError: If the confirmation email cannot be sent.
        """
        raise NotImplementedError
