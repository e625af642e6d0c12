"""Dependencies for the subscription and confirmation services.

This module wires repositories, clients and domain services together for
FastAPI's dependency injection. Every request gets its own database session;
the repositories, resolver, updater and coordinator built for that request
all share it, so a confirmation's lookup and update run on one connection.

Tests replace any factory through `app.dependency_overrides`.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config.settings import settings
from src.domain.interfaces import (
    IConfirmationCoordinator,
    IEmailClient,
    IStatusUpdater,
    ISubscriptionRepository,
    ISubscriptionService,
    ISubscriptionTokenRepository,
    ITokenResolver,
)
from src.domain.services.confirmation.confirmation_coordinator import ConfirmationCoordinator
from src.domain.services.confirmation.status_updater import StatusUpdater
from src.domain.services.confirmation.token_resolver import TokenResolver
from src.domain.services.subscription.subscription_service import SubscriptionService
from src.infrastructure.database.async_db import get_async_db
from src.infrastructure.repositories.subscription_repository import SubscriptionRepository
from src.infrastructure.repositories.subscription_token_repository import (
    SubscriptionTokenRepository,
)
from src.infrastructure.services.email_client import EmailClient

# ---------------------------------------------------------------------------
# Type aliases for dependency injection
# ---------------------------------------------------------------------------

AsyncDB = Annotated[AsyncSession, Depends(get_async_db)]

# ---------------------------------------------------------------------------
# Infrastructure Layer Dependencies
# ---------------------------------------------------------------------------


def get_subscription_repository(db: AsyncDB) -> ISubscriptionRepository:
    return SubscriptionRepository(db)


def get_subscription_token_repository(db: AsyncDB) -> ISubscriptionTokenRepository:
    return SubscriptionTokenRepository(db)


@lru_cache
def get_email_client() -> IEmailClient:
    """Factory that returns the process-wide email client.

    The client owns an `httpx.AsyncClient` connection pool, so one instance
    is shared by all requests and closed by the application lifespan.
    """
    return EmailClient(
        base_url=settings.EMAIL_CLIENT_BASE_URL,
        sender=settings.EMAIL_SENDER,
        authorization_token=settings.EMAIL_AUTHORIZATION_TOKEN,
        timeout_milliseconds=settings.EMAIL_TIMEOUT_MILLISECONDS,
    )


# ---------------------------------------------------------------------------
# Domain Layer Dependencies
# ---------------------------------------------------------------------------


def get_token_resolver(
    token_repository: ISubscriptionTokenRepository = Depends(get_subscription_token_repository),
) -> ITokenResolver:
    return TokenResolver(token_repository)


def get_status_updater(
    subscription_repository: ISubscriptionRepository = Depends(get_subscription_repository),
) -> IStatusUpdater:
    return StatusUpdater(subscription_repository)


def get_confirmation_coordinator(
    token_resolver: ITokenResolver = Depends(get_token_resolver),
    status_updater: IStatusUpdater = Depends(get_status_updater),
) -> IConfirmationCoordinator:
    return ConfirmationCoordinator(token_resolver, status_updater)


def get_subscription_service(
    subscription_repository: ISubscriptionRepository = Depends(get_subscription_repository),
    email_client: IEmailClient = Depends(get_email_client),
) -> ISubscriptionService:
    return SubscriptionService(
        subscription_repository=subscription_repository,
        email_client=email_client,
        base_url=settings.APP_BASE_URL,
    )
