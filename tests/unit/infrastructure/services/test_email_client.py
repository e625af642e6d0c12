import json

import httpx
import pytest
from pydantic import SecretStr

from src.core.exceptions import EmailServiceError
from src.infrastructure.services.email_client import EmailClient


def make_client(handler) -> EmailClient:
    return EmailClient(
        base_url="https://email.example.com/",
        sender="newsletter@example.com",
        authorization_token=SecretStr("server-token"),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_send_email_posts_message_to_email_api():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"MessageID": "1"})

    client = make_client(handler)
    await client.send_email("ursula@gmail.com", "Welcome!", "<p>hi</p>", "hi")
    await client.aclose()

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://email.example.com/email"
    assert request.headers["X-Postmark-Server-Token"] == "server-token"
    assert json.loads(request.content) == {
        "From": "newsletter@example.com",
        "To": "ursula@gmail.com",
        "Subject": "Welcome!",
        "HtmlBody": "<p>hi</p>",
        "TextBody": "hi",
    }


@pytest.mark.asyncio
async def test_send_email_error_status_raises_email_service_error():
    client = make_client(lambda request: httpx.Response(500))

    with pytest.raises(EmailServiceError) as exc_info:
        await client.send_email("ursula@gmail.com", "Welcome!", "<p>hi</p>", "hi")

    assert "500" in exc_info.value.message


@pytest.mark.asyncio
async def test_send_email_transport_failure_raises_email_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    client = make_client(handler)

    with pytest.raises(EmailServiceError):
        await client.send_email("ursula@gmail.com", "Welcome!", "<p>hi</p>", "hi")
