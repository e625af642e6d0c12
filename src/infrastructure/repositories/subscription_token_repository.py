"""Subscription Token Repository implementation using SQLAlchemy."""

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from structlog import get_logger

from src.core.exceptions import DatabaseError
from src.domain.entities.subscription import Subscription, SubscriptionToken
from src.domain.interfaces.repositories import ISubscriptionTokenRepository

logger = get_logger(__name__)


class SubscriptionTokenRepository(ISubscriptionTokenRepository):
    """Read-only access to the token to subscriber mapping.

    The lookup left-joins the subscriber so a token row whose subscriber has
    vanished is detected here and reported as a storage fault instead of
    being passed on as a valid id.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def get_subscriber_id(self, token: str) -> Optional[uuid.UUID]:
        statement = (
            select(SubscriptionToken.subscriber_id, Subscription.id)
            .select_from(SubscriptionToken)
            .outerjoin(Subscription, Subscription.id == SubscriptionToken.subscriber_id)
            .where(SubscriptionToken.subscription_token == token)
        )
        try:
            result = await self.db_session.execute(statement)
            row = result.first()
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "Error retrieving subscriber by confirmation token",
                token_length=len(token),
                error=str(e),
                error_type=type(e).__name__,
                operation="get_subscriber_id",
            )
            raise DatabaseError("Failed to look up the subscription token") from e

        if row is None:
            return None

        subscriber_id, existing_subscriber_id = row
        if existing_subscriber_id is None:
            logger.error(
                "Subscription token refers to a missing subscriber",
                token_length=len(token),
                subscriber_id=str(subscriber_id),
                operation="get_subscriber_id",
            )
            raise DatabaseError(
                "Subscription token refers to a missing subscriber",
                code="dangling_subscription_token",
            )

        return subscriber_id
