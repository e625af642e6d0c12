"""Request models for the subscription endpoints."""

from __future__ import annotations

from pydantic import BaseModel, EmailStr, Field


class SubscribeRequest(BaseModel):
    """Form fields expected by ``POST /subscriptions``
    (``application/x-www-form-urlencoded``)."""

    name: str = Field(..., examples=["le guin"])
    email: EmailStr = Field(..., examples=["ursula_le_guin@gmail.com"])
