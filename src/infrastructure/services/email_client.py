"""Email delivery client for a Postmark-compatible HTTP API.

Each call posts one JSON message to `{base_url}/email`. Transport failures,
timeouts and non-2xx responses are raised as `EmailServiceError`.
"""

from typing import Optional

import httpx
import structlog
from pydantic import SecretStr

from src.core.exceptions import EmailServiceError
from src.domain.interfaces.services import IEmailClient

logger = structlog.get_logger(__name__)


class EmailClient(IEmailClient):
    """Infrastructure email client used by the subscription flow.

    Args:
        base_url: Base URL of the email API
        sender: Address emails are sent from
        authorization_token: Server token sent in `X-Postmark-Server-Token`
        timeout_milliseconds: Per-request timeout
        http_client: Optional pre-built `httpx.AsyncClient` (tests pass one
            backed by `httpx.MockTransport`)
    """

    def __init__(
        self,
        base_url: str,
        sender: str,
        authorization_token: SecretStr,
        timeout_milliseconds: int = 10000,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._sender = sender
        self._authorization_token = authorization_token
        self._http_client = http_client or httpx.AsyncClient(
            timeout=timeout_milliseconds / 1000
        )

    async def send_email(
        self,
        recipient: str,
        subject: str,
        html_content: str,
        text_content: str,
    ) -> None:
        payload = {
            "From": self._sender,
            "To": recipient,
            "Subject": subject,
            "HtmlBody": html_content,
            "TextBody": text_content,
        }
        try:
            response = await self._http_client.post(
                f"{self._base_url}/email",
                json=payload,
                headers={
                    "X-Postmark-Server-Token": self._authorization_token.get_secret_value()
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Email API rejected the request",
                status_code=e.response.status_code,
                subject=subject,
            )
            raise EmailServiceError(
                f"Email API responded with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Email API request failed",
                error=str(e),
                error_type=type(e).__name__,
                subject=subject,
            )
            raise EmailServiceError("Failed to reach the email API") from e

        logger.debug("Email accepted by email API", subject=subject)

    async def aclose(self) -> None:
        await self._http_client.aclose()
