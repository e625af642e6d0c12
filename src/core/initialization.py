"""Process-level setup that must run before the FastAPI app is built."""

from dotenv import load_dotenv

from src.core.config.settings import settings
from src.core.logging import configure_logging


def initialize_application() -> None:
    """Export `.env` values to the process environment and configure structlog.

    `.env` values are exported for libraries that read `os.environ` directly;
    `settings` has already been resolved at import time.
    """
    load_dotenv(override=False)
    configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)
