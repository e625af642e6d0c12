"""Subscription confirmation services."""

from .confirmation_coordinator import ConfirmationCoordinator
from .status_updater import StatusUpdater
from .token_resolver import TokenResolver

__all__ = ["ConfirmationCoordinator", "StatusUpdater", "TokenResolver"]
