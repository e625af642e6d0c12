"""Exceptions raised by the newsletter service.

Each exception carries a human-readable `message` and a stable, machine-readable
`code`. The HTTP layer maps them to status codes in `src.core.handlers`:

    AuthenticationError      -> 401
    ValidationError          -> 400
    DuplicateSubscriberError -> 409
    DatabaseError            -> 500 (generic detail)
    EmailServiceError        -> 500 (generic detail)
    NewsletterError          -> 500 (fallback)
"""

from typing import Final

__all__: Final = [
    "NewsletterError",
    "AuthenticationError",
    "InvalidSubscriptionTokenError",
    "ValidationError",
    "MissingSubscriptionTokenError",
    "InvalidSubscriberError",
    "DatabaseError",
    "DuplicateSubscriberError",
    "EmailServiceError",
]


class NewsletterError(Exception):
    """Root of the service's exception hierarchy."""

    def __init__(self, message: str, code: str = "newsletter_error"):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message


# -- client errors -----------------------------------------------------------


class AuthenticationError(NewsletterError):
    """A presented credential was not accepted."""

    def __init__(self, message: str, code: str = "authentication_error"):
        super().__init__(message, code)


class InvalidSubscriptionTokenError(AuthenticationError):
    """No subscriber is bound to the confirmation token.

    Expected for guessed or mangled links; never a system fault.
    """

    def __init__(
        self,
        message: str = "The subscription token is not valid.",
        code: str = "invalid_subscription_token",
    ):
        super().__init__(message, code)


class ValidationError(NewsletterError):
    """The request is malformed or its data breaks a domain rule."""

    def __init__(self, message: str, code: str = "validation_error"):
        super().__init__(message, code)


class MissingSubscriptionTokenError(ValidationError):
    def __init__(
        self,
        message: str = "The subscription_token query parameter is required.",
        code: str = "missing_subscription_token",
    ):
        super().__init__(message, code)


class InvalidSubscriberError(ValidationError):
    """A new subscriber's name or email was rejected."""

    def __init__(self, message: str, code: str = "invalid_subscriber"):
        super().__init__(message, code)


class DuplicateSubscriberError(NewsletterError):
    def __init__(
        self,
        message: str = "This email address is already subscribed.",
        code: str = "duplicate_subscriber",
    ):
        super().__init__(message, code)


# -- infrastructure faults ---------------------------------------------------


class DatabaseError(NewsletterError):
    """The persistent store failed on a read or a write.

    The driver or SQLAlchemy exception is chained as `__cause__`. Also raised
    when a token row points at a subscriber that does not exist
    (code ``dangling_subscription_token``).
    """

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)


class EmailServiceError(NewsletterError):
    """The email API was unreachable, timed out or answered with an error status."""

    def __init__(self, message: str, code: str = "email_service_error"):
        super().__init__(message, code)
