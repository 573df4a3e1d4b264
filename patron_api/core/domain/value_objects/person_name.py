"""
PersonName Value Object

Human name (given or family) with international character support.
"""

import re
from dataclasses import dataclass

from patron_api.core.domain.exceptions import ValidationError

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100

# Latin, Latin-1 Supplement, Latin Extended-A and Cyrillic letters
LETTERS = "a-zA-ZÀ-ÿĀ-žА-я"

NAME_REGEX = re.compile(rf"^[{LETTERS}\s.'-]+$")
CONSECUTIVE_SPECIALS_REGEX = re.compile(r"[\s.'-]{2,}")
EDGE_SPECIAL_REGEX = re.compile(r"^[\s.'-]|[\s.'-]$")


def title_case(word: str) -> str:
    """Upper-cases the first character and lower-cases the rest."""
    return word[:1].upper() + word[1:].lower()


@dataclass(frozen=True)
class PersonName:
    """
    Immutable person name value object.

    Allows letters, spaces, hyphens, apostrophes and dots, and normalizes
    every space-separated token to title case.
    """

    value: str

    def __post_init__(self):
        self._validate(self.value)
        object.__setattr__(self, "value", self._normalize(self.value))

    @staticmethod
    def _validate(value: str) -> None:
        if not value or not isinstance(value, str):
            raise ValidationError("Name cannot be empty")

        trimmed = value.strip()
        if not trimmed:
            raise ValidationError("Name cannot be only whitespace")

        if len(trimmed) < MIN_NAME_LENGTH:
            raise ValidationError(f"Name must be at least {MIN_NAME_LENGTH} characters long")

        if len(trimmed) > MAX_NAME_LENGTH:
            raise ValidationError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")

        if not NAME_REGEX.match(trimmed):
            raise ValidationError("Name contains invalid characters")

        if CONSECUTIVE_SPECIALS_REGEX.search(trimmed):
            raise ValidationError("Name cannot contain consecutive special characters")

        if EDGE_SPECIAL_REGEX.search(trimmed):
            raise ValidationError("Name cannot start or end with special characters")

    @staticmethod
    def _normalize(value: str) -> str:
        return " ".join(title_case(word) for word in value.split())

    @property
    def first_name(self) -> str:
        return self.value.split(" ")[0]

    @property
    def last_name(self) -> str:
        """Last token of a multi-word name, empty for a single word."""
        parts = self.value.split(" ")
        return parts[-1] if len(parts) > 1 else ""

    @property
    def initials(self) -> str:
        return "".join(word[0].upper() for word in self.value.split(" "))

    def __str__(self) -> str:
        return self.value
