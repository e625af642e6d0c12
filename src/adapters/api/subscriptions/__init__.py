"""Subscription router package: bundles the subscribe and confirm endpoints."""

from fastapi import APIRouter

from .routes import confirm as confirm_route
from .routes import subscribe as subscribe_route

router = APIRouter(tags=["subscriptions"])

router.include_router(subscribe_route.router, prefix="/subscriptions")
router.include_router(confirm_route.router, prefix="/subscriptions/confirm")

__all__ = ["router"]
