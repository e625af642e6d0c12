"""Domain Interfaces for dependency inversion.

These interfaces define contracts that infrastructure and application
layers must implement, ensuring clean separation of concerns.

Interface Organization:
- Repositories: Subscriber and confirmation token persistence
- Services: Confirmation components, subscription creation, email delivery
"""

# Repository interfaces
from .repositories import ISubscriptionRepository, ISubscriptionTokenRepository

# Service interfaces
from .services import (
    IConfirmationCoordinator,
    IEmailClient,
    IStatusUpdater,
    ISubscriptionService,
    ITokenResolver,
)

__all__ = [
    # Repository interfaces
    "ISubscriptionRepository",
    "ISubscriptionTokenRepository",

    # Service interfaces
    "IConfirmationCoordinator",
    "IEmailClient",
    "IStatusUpdater",
    "ISubscriptionService",
    "ITokenResolver",
]
