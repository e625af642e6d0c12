"""Email delivery settings for the newsletter service.

The confirmation email is delivered through an HTTP email API (Postmark
compatible). These settings describe where that API lives and how to
authenticate against it.
"""

from pydantic import EmailStr, Field, SecretStr
from pydantic_settings import BaseSettings


class EmailSettings(BaseSettings):
    """Email API configuration with secure defaults.

    Attributes:
        EMAIL_CLIENT_BASE_URL: Base URL of the email API
        EMAIL_SENDER: Address confirmation emails are sent from
        EMAIL_AUTHORIZATION_TOKEN: Server token sent with every request (SecretStr)
        EMAIL_TIMEOUT_MILLISECONDS: Per-request timeout for the email API
    """

    EMAIL_CLIENT_BASE_URL: str = Field(
        default="http://localhost:8025",
        description="Base URL of the email delivery API",
    )
    EMAIL_SENDER: EmailStr = Field(
        default="newsletter@example.com",
        description="Sender address for confirmation emails",
    )
    EMAIL_AUTHORIZATION_TOKEN: SecretStr = Field(
        default=SecretStr("my-secret-token"),
        description="Server token for the email delivery API",
    )
    EMAIL_TIMEOUT_MILLISECONDS: int = Field(
        default=10000,
        ge=1,
        le=120000,
        description="Timeout for a single email API request",
    )

    def validate_email_config(self) -> None:
        """Validate email configuration for production use.

        Raises:
            ValueError: If the email API configuration is unusable
        """
        if getattr(self, "APP_ENV", "development") not in {"production", "staging"}:
            return

        if not self.EMAIL_CLIENT_BASE_URL.startswith("https://"):
            raise ValueError("EMAIL_CLIENT_BASE_URL must use https in production")

        if self.EMAIL_AUTHORIZATION_TOKEN.get_secret_value() == "my-secret-token":
            raise ValueError("EMAIL_AUTHORIZATION_TOKEN must be set in production")
