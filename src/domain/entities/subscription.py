import uuid
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime
from sqlmodel import Column, Field, SQLModel, String


class SubscriptionStatus(str, Enum):
    """Lifecycle state of a subscriber.

    A subscriber starts as PENDING_CONFIRMATION and becomes CONFIRMED once the
    confirmation link has been followed. There is no transition back.
    """

    PENDING_CONFIRMATION = "pending_confirmation"
    CONFIRMED = "confirmed"


class Subscription(SQLModel, table=True):
    """A newsletter subscriber, the aggregate root of the subscription flow.

    Attributes:
        id: Opaque unique identifier (primary key).
        email: Unique email address, stored and compared exactly as given.
        name: Display name supplied at subscription time.
        subscribed_at: UTC timestamp of subscription.
        status: `pending_confirmation` or `confirmed`, stored as its string value.
    """

    __tablename__ = "subscriptions"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        description="The unique identifier for the subscriber.",
    )
    email: str = Field(
        sa_column=Column(String, unique=True, nullable=False),
        description="Unique email address of the subscriber.",
    )
    name: str = Field(
        sa_column=Column(String, nullable=False),
        description="Name of the subscriber.",
    )
    subscribed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="When the subscription was created.",
    )
    status: str = Field(
        default=SubscriptionStatus.PENDING_CONFIRMATION.value,
        sa_column=Column(String, nullable=False),
        description="Confirmation status of the subscriber.",
    )

    @property
    def is_confirmed(self) -> bool:
        return self.status == SubscriptionStatus.CONFIRMED.value


class SubscriptionToken(SQLModel, table=True):
    """A confirmation token bound to exactly one subscriber.

    Tokens are issued together with the subscriber and are only ever read
    afterwards; the confirmation flow does not delete them.
    """

    __tablename__ = "subscription_tokens"

    subscription_token: str = Field(
        primary_key=True,
        description="Opaque, globally unique confirmation token.",
    )
    subscriber_id: uuid.UUID = Field(
        foreign_key="subscriptions.id",
        nullable=False,
        index=True,
        description="Subscriber the token confirms.",
    )
