"""Subscription Domain Service.

Creates pending subscribers, issues their confirmation token and sends the
confirmation email. The subscriber and token rows are committed before the
email is sent, so a delivery failure leaves a pending subscriber whose token
is already resolvable.
"""

import structlog

from src.core.exceptions import InvalidSubscriberError
from src.domain.entities.subscription import (
    Subscription,
    SubscriptionStatus,
    SubscriptionToken,
)
from src.domain.interfaces.repositories import ISubscriptionRepository
from src.domain.interfaces.services import IEmailClient, ISubscriptionService
from src.domain.value_objects.confirmation_token import ConfirmationToken
from src.domain.value_objects.subscriber_email import SubscriberEmail
from src.domain.value_objects.subscriber_name import SubscriberName

logger = structlog.get_logger(__name__)

CONFIRMATION_EMAIL_SUBJECT = "Welcome!"


class SubscriptionService(ISubscriptionService):
    """Domain service for the subscribe half of the double opt-in flow.

    Responsibilities:
    - Validate the new subscriber's name and email
    - Store the pending subscriber and its token in one transaction
    - Email the confirmation link
    """

    def __init__(
        self,
        subscription_repository: ISubscriptionRepository,
        email_client: IEmailClient,
        base_url: str,
    ):
        """Initialize subscription service with dependencies.

        Args:
            subscription_repository: Repository for subscriber persistence
            email_client: Client used to deliver the confirmation email
            base_url: Public base URL the confirmation link points at
        """
        self._subscription_repository = subscription_repository
        self._email_client = email_client
        self._base_url = base_url.rstrip("/")

    async def subscribe(self, name: str, email: str) -> Subscription:
        try:
            subscriber_name = SubscriberName(name)
            subscriber_email = SubscriberEmail(email)
        except (TypeError, ValueError) as e:
            logger.info("Rejected subscription request", reason=str(e))
            raise InvalidSubscriberError(str(e)) from e

        subscription = Subscription(
            email=subscriber_email.value,
            name=subscriber_name.value,
            status=SubscriptionStatus.PENDING_CONFIRMATION.value,
        )
        token = ConfirmationToken.generate()

        subscription = await self._subscription_repository.save_pending(
            subscription,
            SubscriptionToken(subscription_token=token.value, subscriber_id=subscription.id),
        )
        logger.info(
            "Pending subscriber stored",
            subscriber_id=str(subscription.id),
            email=subscriber_email.mask_for_logging(),
            token_prefix=token.mask_for_logging(),
        )

        await self.send_confirmation_email(subscriber_email, token)
        return subscription

    def confirmation_link(self, token: ConfirmationToken) -> str:
        return f"{self._base_url}/subscriptions/confirm?subscription_token={token.value}"

    async def send_confirmation_email(
        self, recipient: SubscriberEmail, token: ConfirmationToken
    ) -> None:
        link = self.confirmation_link(token)
        html_body = (
            "Welcome to our newsletter!<br />"
            f'Click <a href="{link}">here</a> to confirm your subscription.'
        )
        text_body = (
            "Welcome to our newsletter!\n"
            f"Visit {link} to confirm your subscription."
        )
        await self._email_client.send_email(
            recipient.value, CONFIRMATION_EMAIL_SUBJECT, html_body, text_body
        )
        logger.info("Confirmation email sent", email=recipient.mask_for_logging())
