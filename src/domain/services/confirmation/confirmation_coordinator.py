"""Confirmation Coordinator Domain Service.

Composes the token resolver and the status updater into the single operation
exposed to the transport layer. A request ends in exactly one of three
outcomes:

    START -> resolve(token)
        not found      -> INVALID_TOKEN
        storage error  -> STORAGE_ERROR
        resolved       -> confirm(subscriber_id)
            confirmed      -> CONFIRMED
            storage error  -> STORAGE_ERROR

The update is only attempted after a successful resolve.
"""

import structlog

from src.domain.interfaces.services import (
    IConfirmationCoordinator,
    IStatusUpdater,
    ITokenResolver,
)
from src.domain.value_objects.confirmation_result import ConfirmationResult

logger = structlog.get_logger(__name__)


class ConfirmationCoordinator(IConfirmationCoordinator):
    """Runs resolve-then-confirm for one confirmation request."""

    def __init__(self, token_resolver: ITokenResolver, status_updater: IStatusUpdater):
        self._token_resolver = token_resolver
        self._status_updater = status_updater

    async def handle(self, token: str) -> ConfirmationResult:
        """Confirm the subscriber bound to `token`.

        Args:
            token: Raw token string taken verbatim from the request.

        Returns:
            ConfirmationResult: CONFIRMED, INVALID_TOKEN or STORAGE_ERROR. Storage
            faults carry the original `DatabaseError`.
        """
        resolution = await self._token_resolver.resolve(token)

        if resolution.is_storage_error:
            return ConfirmationResult.storage_error(resolution.error)

        if not resolution.is_resolved:
            return ConfirmationResult.invalid_token()

        update = await self._status_updater.confirm(resolution.subscriber_id)
        if update.is_storage_error:
            return ConfirmationResult.storage_error(
                update.error, subscriber_id=resolution.subscriber_id
            )

        logger.info(
            "Subscription confirmation completed",
            subscriber_id=str(resolution.subscriber_id),
        )
        return ConfirmationResult.confirmed(resolution.subscriber_id)
