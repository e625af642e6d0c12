"""/subscriptions route module.

Creates a pending subscriber and emails the confirmation link. Validation,
persistence and delivery are delegated to the subscription service; errors
propagate to the global exception handlers.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Form, Response, status

from src.adapters.api.subscriptions.schemas import SubscribeRequest
from src.domain.interfaces.services import ISubscriptionService
from src.infrastructure.dependency_injection.subscription_dependencies import (
    get_subscription_service,
)

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Subscribe to the newsletter",
    description=(
        "Stores a pending subscriber and sends an email containing the "
        "confirmation link. Expects a form-encoded body with `name` and `email`."
    ),
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "name or email is missing or invalid"},
        status.HTTP_409_CONFLICT: {"description": "email is already subscribed"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Storage or email failure"},
    },
)
async def subscribe(
    payload: Annotated[SubscribeRequest, Form()],
    subscription_service: ISubscriptionService = Depends(get_subscription_service),
) -> Response:
    subscription = await subscription_service.subscribe(
        name=payload.name, email=str(payload.email)
    )
    logger.info("Subscription request accepted", subscriber_id=str(subscription.id))
    return Response(status_code=status.HTTP_200_OK)
