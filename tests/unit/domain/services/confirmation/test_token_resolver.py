import uuid
from unittest.mock import AsyncMock

import pytest

from src.core.exceptions import DatabaseError
from src.domain.services.confirmation.token_resolver import TokenResolver


@pytest.mark.asyncio
async def test_resolve_returns_subscriber_id_for_known_token():
    subscriber_id = uuid.uuid4()
    repo = AsyncMock()
    repo.get_subscriber_id.return_value = subscriber_id

    resolution = await TokenResolver(repo).resolve("abc123")

    assert resolution.is_resolved is True
    assert resolution.subscriber_id == subscriber_id
    assert resolution.is_storage_error is False
    repo.get_subscriber_id.assert_awaited_once_with("abc123")


@pytest.mark.asyncio
async def test_resolve_unknown_token_is_not_found():
    repo = AsyncMock()
    repo.get_subscriber_id.return_value = None

    resolution = await TokenResolver(repo).resolve("my-invalid-token")

    assert resolution.is_resolved is False
    assert resolution.is_storage_error is False


@pytest.mark.asyncio
async def test_resolve_passes_token_verbatim():
    repo = AsyncMock()
    repo.get_subscriber_id.return_value = None

    await TokenResolver(repo).resolve("  ABC123 ")

    repo.get_subscriber_id.assert_awaited_once_with("  ABC123 ")


@pytest.mark.asyncio
async def test_resolve_reports_storage_error_instead_of_not_found():
    error = DatabaseError("Failed to look up the subscription token")
    repo = AsyncMock()
    repo.get_subscriber_id.side_effect = error

    resolution = await TokenResolver(repo).resolve("abc123")

    assert resolution.is_storage_error is True
    assert resolution.error is error
    assert resolution.is_resolved is False
