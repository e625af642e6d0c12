"""Subscriber name value object.

Encapsulates the rules a name must satisfy before a subscriber is stored:
it must not be blank, must fit in 256 user-perceived characters, and must
not contain characters commonly used in markup or injection payloads.

Length is counted per grapheme cluster rather than per code point: combining
marks and zero-width-joined sequences count as part of the preceding character.
"""

import unicodedata
from dataclasses import dataclass
from typing import ClassVar, FrozenSet

from structlog import get_logger

logger = get_logger(__name__)

ZERO_WIDTH_JOINER = "\u200d"
EXTENDING_CATEGORIES = frozenset({"Mn", "Mc", "Me"})


def grapheme_length(text: str) -> int:
    """Number of user-perceived characters in `text`.

    Covers combining marks, variation selectors and ZWJ emoji sequences; other
    extended cluster rules (regional indicator pairs, Hangul jamo) are not
    applied, so those count per code point.
    """
    length = 0
    joined = False
    for char in text:
        if char == ZERO_WIDTH_JOINER:
            joined = True
            continue
        if unicodedata.category(char) in EXTENDING_CATEGORIES:
            continue
        if joined:
            joined = False
            continue
        length += 1
    return length


@dataclass(frozen=True)
class SubscriberName:
    """Validated, whitespace-trimmed subscriber name.

    Raises:
        ValueError: If the name is empty, too long, or contains forbidden characters
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 256
    FORBIDDEN_CHARACTERS: ClassVar[FrozenSet[str]] = frozenset('/()"<>\\{}')

    def __post_init__(self):
        if self.value is None:
            raise ValueError("Subscriber name cannot be empty")

        trimmed = self.value.strip()
        if not trimmed:
            raise ValueError("Subscriber name cannot be empty")

        length = grapheme_length(trimmed)
        if length > self.MAX_LENGTH:
            logger.warning("Subscriber name too long", length=length)
            raise ValueError(
                f"Subscriber name cannot be longer than {self.MAX_LENGTH} characters"
            )

        if any(char in self.FORBIDDEN_CHARACTERS for char in trimmed):
            logger.warning("Subscriber name contains forbidden characters")
            raise ValueError("Subscriber name contains forbidden characters")

        object.__setattr__(self, "value", trimmed)

    def __str__(self) -> str:
        return self.value
