"""Domain entities for the subscription aggregate."""

from .subscription import Subscription, SubscriptionStatus, SubscriptionToken

__all__ = ["Subscription", "SubscriptionStatus", "SubscriptionToken"]
