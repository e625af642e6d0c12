"""Infrastructure services implementing domain service ports."""

from .email_client import EmailClient

__all__ = ["EmailClient"]
