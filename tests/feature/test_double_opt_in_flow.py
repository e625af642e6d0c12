"""Subscribe, follow the emailed link, and end up confirmed."""

import re
from urllib.parse import urlsplit

import pytest
from fastapi import status
from httpx import AsyncClient
from sqlalchemy import select

from src.core.exceptions import EmailServiceError
from src.domain.entities.subscription import Subscription

PAYLOAD = {"name": "le guin", "email": "ursula_le_guin@gmail.com"}
FORM_BODY = "name=le%20guin&email=ursula_le_guin%40gmail.com"
FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def extract_confirmation_link(text_body: str) -> str:
    links = re.findall(r"https?://\S+", text_body)
    assert len(links) == 1
    link = urlsplit(links[0])
    return f"{link.path}?{link.query}"


async def find_subscriber(session_factory, email: str):
    async with session_factory() as session:
        result = await session.execute(select(Subscription).where(Subscription.email == email))
        return result.scalar_one()


@pytest.mark.asyncio
async def test_subscriber_confirms_through_emailed_link(
    async_client: AsyncClient, mock_email_client, session_factory
):
    response = await async_client.post("/subscriptions", content=FORM_BODY, headers=FORM_HEADERS)
    assert response.status_code == status.HTTP_200_OK
    assert response.content == b""
    assert (await find_subscriber(session_factory, "ursula_le_guin@gmail.com")).status == (
        "pending_confirmation"
    )

    mock_email_client.send_email.assert_awaited_once()
    recipient, subject, _, text_body = mock_email_client.send_email.await_args.args
    assert recipient == "ursula_le_guin@gmail.com"
    assert subject == "Welcome!"
    confirmation_path = extract_confirmation_link(text_body)
    assert confirmation_path.startswith("/subscriptions/confirm?subscription_token=")

    response = await async_client.get(confirmation_path)
    assert response.status_code == status.HTTP_200_OK

    stored = await find_subscriber(session_factory, "ursula_le_guin@gmail.com")
    assert stored.status == "confirmed"
    assert stored.name == "le guin"


@pytest.mark.asyncio
async def test_subscribing_twice_with_same_email_conflicts(
    async_client: AsyncClient, mock_email_client
):
    first = await async_client.post("/subscriptions", data=PAYLOAD)
    second = await async_client.post("/subscriptions", data=PAYLOAD)

    assert first.status_code == status.HTTP_200_OK
    assert second.status_code == status.HTTP_409_CONFLICT
    mock_email_client.send_email.assert_awaited_once()


@pytest.mark.asyncio
async def test_email_failure_leaves_a_confirmable_pending_subscriber(
    async_client: AsyncClient, mock_email_client
):
    mock_email_client.send_email.side_effect = EmailServiceError("Failed to reach the email API")

    response = await async_client.post("/subscriptions", data=PAYLOAD)
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    _, _, _, text_body = mock_email_client.send_email.await_args.args
    response = await async_client.get(extract_confirmation_link(text_body))
    assert response.status_code == status.HTTP_200_OK
