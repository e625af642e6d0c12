"""
Service-level settings: identity, HTTP server, logging, CORS and public URL.
"""
from typing import List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Settings that describe the running service itself.

    `APP_BASE_URL` is the public origin confirmation links are built from.
    It must be reachable by subscribers, so in production it is the external
    https address, not the bind address.
    """
    PROJECT_NAME: str = "newsletter"
    VERSION: str = "0.1.0"
    APP_ENV: str = Field(default="development", pattern="^(development|test|staging|production)$")
    DEBUG: bool = False

    # uvicorn
    API_HOST: str = "0.0.0.0"
    API_PORT: int = Field(ge=1, le=65535, default=8000)
    API_WORKERS: int = Field(ge=1, default=1)
    RELOAD: bool = False

    # structlog
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_JSON: bool = True

    ALLOWED_ORIGINS: Union[str, List[str]] = Field(default="http://127.0.0.1:8000")
    APP_BASE_URL: str = Field(default="http://127.0.0.1:8000")

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Accept `a,b,c` as well as a JSON list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("APP_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
