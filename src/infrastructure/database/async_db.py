"""
Async SQLAlchemy engine and per-request sessions.

One engine (and connection pool) per process; one `AsyncSession` per request,
handed to repositories through FastAPI dependencies. A confirmation request's
lookup and update therefore share a session and a transaction.
"""

import time
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from structlog import get_logger
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from src.core.config.settings import settings
from src.domain.entities import subscription as _subscription_tables  # noqa: F401  registers metadata

logger = get_logger(__name__)


def build_async_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an engine for `database_url`, sizing the pool for server databases only."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return create_async_engine(url, echo=echo)

    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.POSTGRES_POOL_SIZE,
        max_overflow=settings.POSTGRES_MAX_OVERFLOW,
        pool_timeout=settings.POSTGRES_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


engine = build_async_engine(settings.DATABASE_URL, echo=settings.DEBUG)

AsyncSessionFactory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield the request's session; roll back if the request raised."""
    async with AsyncSessionFactory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            logger.warning("Request session rolled back after an error")
            raise


@retry(
    stop=stop_after_attempt(5),
    wait=wait_exponential(multiplier=1, min=4, max=10),
    retry=retry_if_exception_type(OperationalError),
    reraise=True,
)
async def create_async_db_and_tables(db_engine: AsyncEngine = engine) -> None:
    """Create missing tables, retrying while the database is still starting up."""
    started = time.perf_counter()
    async with db_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info(
        "database_tables_ready",
        tables=sorted(SQLModel.metadata.tables),
        duration_s=round(time.perf_counter() - started, 3),
    )


async def check_async_database_health(db_engine: AsyncEngine = engine) -> bool:
    """Run ``SELECT 1``; report failure as False so startup can refuse to serve."""
    started = time.perf_counter()
    try:
        async with db_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            "database_health_check_failed",
            error=str(e),
            error_type=type(e).__name__,
            duration_s=round(time.perf_counter() - started, 3),
        )
        return False

    logger.debug("database_health_check_ok", duration_s=round(time.perf_counter() - started, 3))
    return True
