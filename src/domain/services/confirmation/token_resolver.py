"""Token Resolver Domain Service.

Maps a raw confirmation token to the subscriber it was issued to. The token is
matched exactly as received: no trimming, no case folding.
"""

import structlog

from src.core.exceptions import DatabaseError
from src.domain.interfaces.repositories import ISubscriptionTokenRepository
from src.domain.interfaces.services import ITokenResolver
from src.domain.value_objects.confirmation_result import TokenResolution

logger = structlog.get_logger(__name__)


class TokenResolver(ITokenResolver):
    """Resolves confirmation tokens without side effects.

    Outcomes:
    - resolved: a token row matches and its subscriber exists
    - not found: no token row matches (guessed or tampered links)
    - storage error: the store failed, or the token row refers to a missing
      subscriber; these are reported, never downgraded to "not found"
    """

    def __init__(self, token_repository: ISubscriptionTokenRepository):
        self._token_repository = token_repository

    async def resolve(self, token: str) -> TokenResolution:
        try:
            subscriber_id = await self._token_repository.get_subscriber_id(token)
        except DatabaseError as e:
            logger.error(
                "Confirmation token lookup failed",
                token_prefix=token[:4],
                error_code=e.code,
                error=str(e),
            )
            return TokenResolution.storage_error(e)

        if subscriber_id is None:
            logger.info("Confirmation token not found", token_prefix=token[:4])
            return TokenResolution.not_found()

        logger.debug(
            "Confirmation token resolved",
            token_prefix=token[:4],
            subscriber_id=str(subscriber_id),
        )
        return TokenResolution.resolved(subscriber_id)
