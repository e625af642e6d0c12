from .subscription_repository import SubscriptionRepository
from .subscription_token_repository import SubscriptionTokenRepository

__all__ = ["SubscriptionRepository", "SubscriptionTokenRepository"]
