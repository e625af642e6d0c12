import os
import tempfile

# Settings and the module-level engine are built at import time, so the test
# environment must be in place before anything under src is imported.
_TEST_DB_DIR = tempfile.mkdtemp(prefix="newsletter-tests-")
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB_DIR}/newsletter.db"
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("APP_BASE_URL", "http://127.0.0.1:8000")

import uuid
from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.domain.entities.subscription import (
    Subscription,
    SubscriptionStatus,
    SubscriptionToken,
)
from src.infrastructure.database.async_db import (
    build_async_engine,
    create_async_db_and_tables,
    get_async_db,
)
from src.infrastructure.dependency_injection.subscription_dependencies import get_email_client
from src.main import app as fastapi_app


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A fresh on-disk SQLite database per test, with all tables created."""
    engine = build_async_engine(f"sqlite+aiosqlite:///{tmp_path}/newsletter.db")
    await create_async_db_and_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def pending_subscriber(session_factory):
    """Factory storing a pending subscriber bound to the given token."""

    async def _create(
        name: str = "le guin",
        email: str = "ursula_le_guin@gmail.com",
        token: str = "abc123",
    ) -> Subscription:
        async with session_factory() as session:
            subscription = Subscription(
                name=name,
                email=email,
                status=SubscriptionStatus.PENDING_CONFIRMATION.value,
            )
            session.add(subscription)
            await session.flush()
            session.add(
                SubscriptionToken(subscription_token=token, subscriber_id=subscription.id)
            )
            await session.commit()
            return subscription

    return _create


@pytest_asyncio.fixture
async def fetch_subscriber(session_factory):
    """Reads a subscriber back through a new session, bypassing any cache."""

    async def _fetch(subscriber_id: uuid.UUID):
        async with session_factory() as session:
            return await session.get(Subscription, subscriber_id)

    return _fetch


@pytest.fixture
def app(session_factory):
    """The application with its database dependency bound to the test database."""

    async def override_get_async_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_async_db] = override_get_async_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def mock_email_client(app):
    """Replaces the email client so no request leaves the test process."""
    client = AsyncMock()
    app.dependency_overrides[get_email_client] = lambda: client
    return client


@pytest_asyncio.fixture
async def async_client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
