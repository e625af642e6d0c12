import uuid
from unittest.mock import AsyncMock

import pytest

from src.core.exceptions import DatabaseError
from src.domain.services.confirmation.confirmation_coordinator import ConfirmationCoordinator
from src.domain.value_objects.confirmation_result import (
    ConfirmationOutcome,
    StatusUpdate,
    TokenResolution,
)


def make_coordinator(resolution, update=None):
    resolver = AsyncMock()
    resolver.resolve.return_value = resolution
    updater = AsyncMock()
    updater.confirm.return_value = update or StatusUpdate.confirmed()
    return ConfirmationCoordinator(resolver, updater), resolver, updater


@pytest.mark.asyncio
async def test_handle_confirms_resolved_subscriber():
    subscriber_id = uuid.uuid4()
    coordinator, resolver, updater = make_coordinator(TokenResolution.resolved(subscriber_id))

    result = await coordinator.handle("abc123")

    assert result.outcome is ConfirmationOutcome.CONFIRMED
    assert result.subscriber_id == subscriber_id
    assert result.error is None
    resolver.resolve.assert_awaited_once_with("abc123")
    updater.confirm.assert_awaited_once_with(subscriber_id)


@pytest.mark.asyncio
async def test_handle_unknown_token_is_invalid_and_skips_update():
    coordinator, _, updater = make_coordinator(TokenResolution.not_found())

    result = await coordinator.handle("my-invalid-token")

    assert result.outcome is ConfirmationOutcome.INVALID_TOKEN
    updater.confirm.assert_not_awaited()


@pytest.mark.asyncio
async def test_handle_resolve_storage_error_is_not_downgraded():
    error = DatabaseError("lookup failed")
    coordinator, _, updater = make_coordinator(TokenResolution.storage_error(error))

    result = await coordinator.handle("abc123")

    assert result.outcome is ConfirmationOutcome.STORAGE_ERROR
    assert result.error is error
    updater.confirm.assert_not_awaited()


@pytest.mark.asyncio
async def test_handle_update_storage_error_keeps_subscriber_id():
    subscriber_id = uuid.uuid4()
    error = DatabaseError("update failed")
    coordinator, _, _ = make_coordinator(
        TokenResolution.resolved(subscriber_id), StatusUpdate.storage_error(error)
    )

    result = await coordinator.handle("abc123")

    assert result.outcome is ConfirmationOutcome.STORAGE_ERROR
    assert result.error is error
    assert result.subscriber_id == subscriber_id
