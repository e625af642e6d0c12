"""Repository interfaces for abstracting data persistence in the domain layer.

This module defines the abstract base classes (interfaces) for repositories,
which act as a "port" in the context of Hexagonal Architecture. The domain layer
uses these interfaces to interact with persistence mechanisms without being
coupled to any specific technology.

Every method raises `DatabaseError` when the underlying store fails; a
negative lookup is reported as `None`, never as an exception.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.subscription import Subscription, SubscriptionToken


class ISubscriptionRepository(ABC):
    """An interface defining the contract for subscriber persistence operations."""

    @abstractmethod
    async def get_by_id(self, subscriber_id: uuid.UUID) -> Optional[Subscription]:
        """Retrieves a subscriber by their unique identifier.

        Args:
            subscriber_id: The subscriber's UUID.

        Returns:
            An optional `Subscription` entity. Returns `None` if no subscriber is found.
        """
        raise NotImplementedError

    @abstractmethod
    async def save_pending(
        self, subscription: Subscription, token: SubscriptionToken
    ) -> Subscription:
        """Persists a new pending subscriber together with its confirmation token.

        Both rows are written in a single transaction.

        Raises:
            DuplicateSubscriberError: If the email address is already stored.
            DatabaseError: For any other storage failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def mark_confirmed(self, subscriber_id: uuid.UUID) -> None:
        """Sets the subscriber's status to confirmed and commits.

        Confirming an already confirmed subscriber succeeds without change.

        Raises:
            DatabaseError: If the write fails or the subscriber row does not exist.
        """
        raise NotImplementedError


class ISubscriptionTokenRepository(ABC):
    """An interface defining the contract for reading confirmation tokens."""

    @abstractmethod
    async def get_subscriber_id(self, token: str) -> Optional[uuid.UUID]:
        """Returns the subscriber id bound to `token`, compared verbatim.

        Returns:
            The subscriber id, or `None` when no token row matches.

        Raises:
            DatabaseError: If the lookup fails or the token row refers to a
                subscriber that does not exist.
        """
        raise NotImplementedError
