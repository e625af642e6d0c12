"""Status Updater Domain Service."""

import uuid

import structlog

from src.core.exceptions import DatabaseError
from src.domain.interfaces.repositories import ISubscriptionRepository
from src.domain.interfaces.services import IStatusUpdater
from src.domain.value_objects.confirmation_result import StatusUpdate

logger = structlog.get_logger(__name__)


class StatusUpdater(IStatusUpdater):
    """Moves a resolved subscriber to the confirmed status.

    The write only ever sets `status` to confirmed, so running it again for
    an already confirmed subscriber is a no-op that still succeeds. Failures
    are returned to the caller as-is; there is no retry.
    """

    def __init__(self, subscription_repository: ISubscriptionRepository):
        self._subscription_repository = subscription_repository

    async def confirm(self, subscriber_id: uuid.UUID) -> StatusUpdate:
        try:
            await self._subscription_repository.mark_confirmed(subscriber_id)
        except DatabaseError as e:
            logger.error(
                "Failed to mark subscriber as confirmed",
                subscriber_id=str(subscriber_id),
                error_code=e.code,
                error=str(e),
            )
            return StatusUpdate.storage_error(e)

        logger.info("Subscriber confirmed", subscriber_id=str(subscriber_id))
        return StatusUpdate.confirmed()
