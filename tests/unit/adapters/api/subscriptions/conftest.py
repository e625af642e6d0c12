from unittest.mock import AsyncMock

import pytest

from src.infrastructure.dependency_injection.subscription_dependencies import (
    get_confirmation_coordinator,
    get_subscription_service,
)


@pytest.fixture
def mock_confirmation_coordinator(app):
    """Provides a mocked confirmation coordinator."""
    mock_coordinator = AsyncMock()
    app.dependency_overrides[get_confirmation_coordinator] = lambda: mock_coordinator
    yield mock_coordinator
    app.dependency_overrides.pop(get_confirmation_coordinator, None)


@pytest.fixture
def mock_subscription_service(app):
    """Provides a mocked subscription service."""
    mock_service = AsyncMock()
    app.dependency_overrides[get_subscription_service] = lambda: mock_service
    yield mock_service
    app.dependency_overrides.pop(get_subscription_service, None)
