import uuid

import pytest
from fastapi import status
from httpx import AsyncClient

from src.core.exceptions import DatabaseError
from src.domain.value_objects.confirmation_result import ConfirmationResult


@pytest.mark.asyncio
async def test_confirm_missing_token_is_rejected_before_coordinator(
    async_client: AsyncClient, mock_confirmation_coordinator
):
    response = await async_client.get("/subscriptions/confirm")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    mock_confirmation_coordinator.handle.assert_not_awaited()


@pytest.mark.asyncio
async def test_confirm_success_returns_empty_200(
    async_client: AsyncClient, mock_confirmation_coordinator
):
    mock_confirmation_coordinator.handle.return_value = ConfirmationResult.confirmed(uuid.uuid4())

    response = await async_client.get("/subscriptions/confirm?subscription_token=abc123")

    assert response.status_code == status.HTTP_200_OK
    assert response.content == b""
    mock_confirmation_coordinator.handle.assert_awaited_once_with("abc123")


@pytest.mark.asyncio
async def test_confirm_invalid_token_returns_401(
    async_client: AsyncClient, mock_confirmation_coordinator
):
    mock_confirmation_coordinator.handle.return_value = ConfirmationResult.invalid_token()

    response = await async_client.get(
        "/subscriptions/confirm", params={"subscription_token": "my-invalid-token"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json() == {"detail": "The subscription token is not valid."}


@pytest.mark.asyncio
async def test_confirm_storage_error_returns_generic_500(
    async_client: AsyncClient, mock_confirmation_coordinator
):
    error = DatabaseError("no such column: subscriptions.status")
    mock_confirmation_coordinator.handle.return_value = ConfirmationResult.storage_error(error)

    response = await async_client.get("/subscriptions/confirm?subscription_token=abc123")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "A database error occurred."}
    assert "status" not in response.text


@pytest.mark.asyncio
async def test_confirm_echoes_request_id(
    async_client: AsyncClient, mock_confirmation_coordinator
):
    mock_confirmation_coordinator.handle.return_value = ConfirmationResult.confirmed(uuid.uuid4())

    response = await async_client.get(
        "/subscriptions/confirm?subscription_token=abc123",
        headers={"X-Request-ID": "req-42"},
    )

    assert response.headers["X-Request-ID"] == "req-42"
