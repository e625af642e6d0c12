"""/subscriptions/confirm route module.

Thin transport layer over the confirmation coordinator. The route only
extracts the token, invokes the coordinator and maps its outcome:

    CONFIRMED      -> 200, empty body
    INVALID_TOKEN  -> InvalidSubscriptionTokenError (401)
    STORAGE_ERROR  -> the wrapped DatabaseError (500, generic detail)

A request without ``subscription_token`` is rejected with 400 before the
coordinator is invoked.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query, Response, status

from src.core.exceptions import (
    InvalidSubscriptionTokenError,
    MissingSubscriptionTokenError,
)
from src.domain.interfaces.services import IConfirmationCoordinator
from src.domain.value_objects.confirmation_result import ConfirmationOutcome
from src.infrastructure.dependency_injection.subscription_dependencies import (
    get_confirmation_coordinator,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Confirm a pending subscription",
    description=(
        "Confirms the subscriber bound to the token carried by the link in the "
        "confirmation email. Confirming twice is allowed and succeeds both times."
    ),
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "subscription_token is missing"},
        status.HTTP_401_UNAUTHORIZED: {"description": "subscription_token is not valid"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Storage failure"},
    },
)
async def confirm_subscription(
    subscription_token: Optional[str] = Query(default=None),
    coordinator: IConfirmationCoordinator = Depends(get_confirmation_coordinator),
) -> Response:
    """Confirm a subscription using the token from the confirmation link.

    Args:
        subscription_token: Raw token from the query string, used verbatim.
        coordinator: Confirmation coordinator for this request.

    Returns:
        Response: An empty 200 response once the subscriber is confirmed.

    Raises:
        MissingSubscriptionTokenError: If the query parameter is absent.
        InvalidSubscriptionTokenError: If no subscriber is bound to the token.
        DatabaseError: If the store failed while resolving or confirming.
    """
    if subscription_token is None:
        logger.info("Confirmation request without subscription token")
        raise MissingSubscriptionTokenError()

    request_logger = logger.bind(
        endpoint="confirm_subscription",
        token_prefix=subscription_token[:4],
    )

    result = await coordinator.handle(subscription_token)

    if result.outcome is ConfirmationOutcome.INVALID_TOKEN:
        request_logger.warning("Confirmation rejected - unknown subscription token")
        raise InvalidSubscriptionTokenError()

    if result.outcome is ConfirmationOutcome.STORAGE_ERROR:
        request_logger.error(
            "Confirmation failed - storage error",
            error_code=result.error.code,
            subscriber_id=str(result.subscriber_id) if result.subscriber_id else None,
        )
        raise result.error

    request_logger.info(
        "Subscription confirmed",
        subscriber_id=str(result.subscriber_id),
    )
    return Response(status_code=status.HTTP_200_OK)
