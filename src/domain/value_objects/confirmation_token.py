"""Confirmation token value object.

Tokens are 25 random alphanumeric characters drawn from the `secrets` CSPRNG.
They are issued once per subscriber and are looked up verbatim when the
confirmation link is followed.
"""

import secrets
import string
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ConfirmationToken:
    """An opaque confirmation token issued to a new subscriber."""

    value: str

    LENGTH: ClassVar[int] = 25
    ALPHABET: ClassVar[str] = string.ascii_letters + string.digits

    def __post_init__(self):
        if len(self.value) != self.LENGTH or any(
            char not in self.ALPHABET for char in self.value
        ):
            raise ValueError(
                f"Confirmation token must be {self.LENGTH} alphanumeric characters"
            )

    @classmethod
    def generate(cls) -> "ConfirmationToken":
        return cls("".join(secrets.choice(cls.ALPHABET) for _ in range(cls.LENGTH)))

    def mask_for_logging(self) -> str:
        """Only the first four characters are ever written to logs."""
        return self.value[:4] + "***"

    def __str__(self) -> str:
        return self.value
