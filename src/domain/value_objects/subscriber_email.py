"""Subscriber email value object.

The address is kept exactly as supplied apart from surrounding whitespace:
no case folding, because the stored value is both the uniqueness key and
the address the confirmation email goes to.
"""

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class SubscriberEmail:
    """A syntactically plausible email address.

    Raises:
        TypeError: If the value is not a string
        ValueError: If the value is too short, too long, or not `local@domain.tld`
    """

    value: str

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 254
    PATTERN: ClassVar[re.Pattern] = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("Subscriber email must be a string")

        address = self.value.strip()
        if not self.MIN_LENGTH <= len(address) <= self.MAX_LENGTH:
            raise ValueError(
                f"Subscriber email must be {self.MIN_LENGTH} to {self.MAX_LENGTH} characters long"
            )
        if not self.PATTERN.match(address):
            raise ValueError("Subscriber email is not a valid address")

        object.__setattr__(self, "value", address)

    def mask_for_logging(self) -> str:
        """`ursula@gmail.com` -> `ur****@gmail.com`."""
        local, _, domain = self.value.partition("@")
        return local[:2] + "*" * max(len(local) - 2, 0) + "@" + domain

    def __str__(self) -> str:
        return self.value
