"""
Exception-to-response mapping for the HTTP layer.

Routes raise domain exceptions and never build error responses themselves.
Every error body has the shape ``{"detail": ...}``; 5xx bodies carry a fixed
message so storage and delivery internals never reach the client.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from src.core.exceptions import (
    AuthenticationError,
    DatabaseError,
    DuplicateSubscriberError,
    EmailServiceError,
    NewsletterError,
    ValidationError,
)

__all__ = ["register_exception_handlers"]

logger = get_logger(__name__)

GENERIC_DATABASE_DETAIL = "A database error occurred."
GENERIC_EMAIL_DETAIL = "Failed to send the confirmation email."
GENERIC_ERROR_DETAIL = "An unexpected error occurred."


def _client_ip(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


def _detail(status_code: int, detail) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def handle_authentication_error(request: Request, exc: AuthenticationError) -> JSONResponse:
    """401 for a rejected credential, e.g. an unknown confirmation token.

    Logged at warning level: a bad link is a client mistake, not a fault.
    """
    logger.warning(
        "Credential rejected",
        error_code=exc.code,
        client_ip=_client_ip(request),
        path=request.url.path,
    )
    return _detail(status.HTTP_401_UNAUTHORIZED, exc.message)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return _detail(status.HTTP_400_BAD_REQUEST, exc.message)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """400 instead of FastAPI's 422 for malformed bodies and query strings."""
    # ctx/input can hold non-JSON values (exceptions, bytes)
    errors = [
        {"type": error.get("type"), "loc": list(error.get("loc", ())), "msg": error.get("msg")}
        for error in exc.errors()
    ]
    return _detail(status.HTTP_400_BAD_REQUEST, errors)


async def handle_duplicate_subscriber(
    request: Request, exc: DuplicateSubscriberError
) -> JSONResponse:
    return _detail(status.HTTP_409_CONFLICT, exc.message)


async def handle_email_service_error(request: Request, exc: EmailServiceError) -> JSONResponse:
    """500 when the confirmation email could not be handed to the email API."""
    logger.error(
        "Confirmation email delivery failed",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_EMAIL_DETAIL)


async def handle_database_error(request: Request, exc: DatabaseError) -> JSONResponse:
    """500 for any storage fault; the chained driver error is only logged."""
    logger.critical(
        "Storage fault while serving request",
        error_code=exc.code,
        error_message=exc.message,
        cause=repr(exc.__cause__) if exc.__cause__ else None,
        path=request.url.path,
    )
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_DATABASE_DETAIL)


async def handle_newsletter_error(request: Request, exc: NewsletterError) -> JSONResponse:
    logger.error(
        "Unhandled application error",
        error_code=exc.code,
        error_message=exc.message,
        path=request.url.path,
    )
    return _detail(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_DETAIL)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to `app`.

    Starlette picks the handler of the closest class in the exception's MRO,
    so `NewsletterError` only catches what no subclass handler covers.
    """
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(AuthenticationError, handle_authentication_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(DuplicateSubscriberError, handle_duplicate_subscriber)
    app.add_exception_handler(EmailServiceError, handle_email_service_error)
    app.add_exception_handler(DatabaseError, handle_database_error)
    app.add_exception_handler(NewsletterError, handle_newsletter_error)
