"""Domain Services for the Subscription Bounded Context.

All services depend on repository and client interfaces injected at
construction, so they carry no hidden global state.

Confirmation Services:
- Token Resolver: Maps a confirmation token to its subscriber
- Status Updater: Marks a subscriber as confirmed
- Confirmation Coordinator: Runs resolve-then-confirm for one request

Subscription Services:
- Subscription Service: Creates pending subscribers and emails their link
"""

# Confirmation Services
from .confirmation.confirmation_coordinator import ConfirmationCoordinator
from .confirmation.status_updater import StatusUpdater
from .confirmation.token_resolver import TokenResolver

# Subscription Services
from .subscription.subscription_service import SubscriptionService

__all__ = [
    # Confirmation Services
    "ConfirmationCoordinator",
    "StatusUpdater",
    "TokenResolver",

    # Subscription Services
    "SubscriptionService",
]
