"""Startup and shutdown for the newsletter service.

Startup refuses to serve when the database is unreachable and creates any
missing tables. Shutdown releases the email client's HTTP pool and the
database engine.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config.settings import settings
from src.core.logging import logger
from src.infrastructure.database.async_db import (
    check_async_database_health,
    create_async_db_and_tables,
    engine,
)
from src.infrastructure.dependency_injection.subscription_dependencies import get_email_client


def create_lifespan_manager():
    """Return the lifespan context manager passed to `FastAPI(lifespan=...)`."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not await check_async_database_health():
            logger.error("database_unavailable_on_startup", env=settings.APP_ENV)
            raise RuntimeError("Database unavailable")
        await create_async_db_and_tables()
        logger.info("application_startup", env=settings.APP_ENV, version=settings.VERSION)

        try:
            yield
        finally:
            await get_email_client().aclose()
            await engine.dispose()
            logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
