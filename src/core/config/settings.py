"""Aggregated settings for the newsletter service.

`Settings` merges the app, database and email settings groups. Values come
from the process environment first, then from the env file selected by
`APP_ENV`:

- development -> .env (DEBUG forced on)
- test        -> .env.test (missing required values only warn)
- staging     -> .env.staging (email API must be https with a real token)
- production  -> .env.production (same email API checks as staging)

Import `settings` from this module; do not build new `Settings` objects at
runtime outside of tests.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Tuple

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .database import DatabaseSettings
from .email import EmailSettings

logger = logging.getLogger(__name__)

ENV_FILES: Dict[str, str] = {
    "development": ".env",
    "test": ".env.test",
    "staging": ".env.staging",
    "production": ".env.production",
}

REQUIRED_FIELDS: Tuple[str, ...] = (
    "PROJECT_NAME",
    "DATABASE_URL",
    "APP_BASE_URL",
    "EMAIL_CLIENT_BASE_URL",
    "EMAIL_SENDER",
)


class Settings(AppSettings, DatabaseSettings, EmailSettings):
    """Every configuration value the service reads, in one object.

    Secrets (`POSTGRES_PASSWORD`, `EMAIL_AUTHORIZATION_TOKEN`) are `SecretStr`
    and must never be logged.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.APP_ENV == "development":
            self.DEBUG = True
        logger.info("Settings loaded (env=%s, debug=%s)", self.APP_ENV, self.DEBUG)

    def validate_required_fields(self) -> None:
        """Fail fast on missing values and on an unusable email API setup.

        Raises:
            ValueError: If a required value is empty (outside the test
                environment) or the email API configuration is rejected.
        """
        missing = [name for name in REQUIRED_FIELDS if not getattr(self, name, None)]
        if missing:
            message = f"Missing required environment variables: {', '.join(missing)}"
            if self.APP_ENV != "test":
                logger.error(message)
                raise ValueError(message)
            logger.warning("%s (ignored in test environment)", message)

        try:
            self.validate_email_config()
        except ValueError as e:
            logger.error("Email configuration error: %s", e)
            raise


def create_settings() -> Settings:
    """Build `Settings`, reading the env file that matches `APP_ENV` if present."""
    env = os.getenv("APP_ENV", "development")
    env_file = Path(ENV_FILES.get(env, ".env"))

    if env_file.exists():
        logger.info("Reading configuration from %s", env_file)
        return Settings(_env_file=env_file)

    logger.info("No %s file, using environment variables only", env_file)
    return Settings(_env_file=None)


settings = create_settings()
settings.validate_required_fields()
