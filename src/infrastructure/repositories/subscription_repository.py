"""Subscription Repository implementation using SQLAlchemy.

This module provides the repository pattern implementation for subscriber
operations, abstracting database access behind `ISubscriptionRepository`.

Any SQLAlchemy or connection-level failure is logged and re-raised as the
domain's `DatabaseError` with the original exception chained, so callers never
depend on driver exception types.
"""

import uuid
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from src.core.exceptions import DatabaseError, DuplicateSubscriberError
from src.domain.entities.subscription import (
    Subscription,
    SubscriptionStatus,
    SubscriptionToken,
)
from src.domain.interfaces.repositories import ISubscriptionRepository

logger = get_logger(__name__)

STORAGE_ERRORS = (SQLAlchemyError, OSError)


class SubscriptionRepository(ISubscriptionRepository):
    """SQLAlchemy implementation of ISubscriptionRepository.

    Responsibilities:
    - Subscriber persistence (create pending, confirm, lookup)
    - Transaction management (commit on success, rollback on failure)
    - Translation of storage failures into `DatabaseError`
    """

    def __init__(self, db_session: AsyncSession):
        """Initialize repository with database session.

        Args:
            db_session: SQLAlchemy async session for database operations
        """
        self.db_session = db_session

    async def get_by_id(self, subscriber_id: uuid.UUID) -> Optional[Subscription]:
        try:
            statement = select(Subscription).where(Subscription.id == subscriber_id)
            result = await self.db_session.execute(statement)
            subscription = result.scalars().first()
        except STORAGE_ERRORS as e:
            logger.error(
                "Error retrieving subscriber by ID",
                subscriber_id=str(subscriber_id),
                error=str(e),
                error_type=type(e).__name__,
                operation="get_by_id",
            )
            raise DatabaseError("Failed to retrieve subscriber") from e

        logger.debug(
            "Subscriber lookup by ID completed",
            subscriber_id=str(subscriber_id),
            found=subscription is not None,
            operation="get_by_id",
        )
        return subscription

    async def save_pending(
        self, subscription: Subscription, token: SubscriptionToken
    ) -> Subscription:
        """Insert a pending subscriber and its token in one transaction.

        The subscriber row is flushed first so the token's foreign key is
        satisfied regardless of the database's constraint timing.

        Raises:
            DuplicateSubscriberError: If the email is already subscribed.
            DatabaseError: For any other storage failure.
        """
        try:
            self.db_session.add(subscription)
            await self.db_session.flush()
            self.db_session.add(token)
            await self.db_session.commit()
        except IntegrityError as e:
            await self.db_session.rollback()
            logger.warning(
                "Subscriber insert violated a constraint",
                error_type=type(e).__name__,
                operation="save_pending",
            )
            raise DuplicateSubscriberError() from e
        except STORAGE_ERRORS as e:
            await self.db_session.rollback()
            logger.error(
                "Error saving pending subscriber",
                error=str(e),
                error_type=type(e).__name__,
                operation="save_pending",
            )
            raise DatabaseError("Failed to store the new subscriber") from e

        logger.info(
            "Pending subscriber saved",
            subscriber_id=str(subscription.id),
            operation="save_pending",
        )
        return subscription

    async def mark_confirmed(self, subscriber_id: uuid.UUID) -> None:
        """Set the subscriber's status to confirmed and commit.

        The UPDATE matches on id only, so an already confirmed subscriber is
        matched again and left confirmed. Zero matched rows means the token
        pointed at a subscriber that no longer exists.

        Raises:
            DatabaseError: If the write fails or no subscriber row matched.
        """
        statement = (
            update(Subscription)
            .where(Subscription.id == subscriber_id)
            .values(status=SubscriptionStatus.CONFIRMED.value)
        )
        try:
            result = await self.db_session.execute(statement)
            if result.rowcount == 0:
                await self.db_session.rollback()
                logger.error(
                    "Confirmed token refers to a missing subscriber",
                    subscriber_id=str(subscriber_id),
                    operation="mark_confirmed",
                )
                raise DatabaseError(
                    "Subscriber referenced by the token does not exist",
                    code="dangling_subscription_token",
                )
            await self.db_session.commit()
        except STORAGE_ERRORS as e:
            await self.db_session.rollback()
            logger.error(
                "Error confirming subscriber",
                subscriber_id=str(subscriber_id),
                error=str(e),
                error_type=type(e).__name__,
                operation="mark_confirmed",
            )
            raise DatabaseError("Failed to update subscriber status") from e

        logger.debug(
            "Subscriber status updated",
            subscriber_id=str(subscriber_id),
            status=SubscriptionStatus.CONFIRMED.value,
            operation="mark_confirmed",
        )
