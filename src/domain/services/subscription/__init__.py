from .subscription_service import SubscriptionService

__all__ = ["SubscriptionService"]
