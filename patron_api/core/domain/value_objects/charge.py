"""
Charge Value Object

Office title held by a patron inside the foundation (e.g. "President of the Board").
"""

import re
from dataclasses import dataclass
from typing import List

from patron_api.core.domain.exceptions import ValidationError
from patron_api.core.domain.value_objects.person_name import LETTERS, title_case

MIN_CHARGE_LENGTH = 2
MAX_CHARGE_LENGTH = 100

# Prepositions and articles (English, Spanish, Catalan) kept lower-case after the first word
LOWERCASE_WORDS = frozenset(
    ["of", "the", "and", "or", "de", "del", "la", "el", "y", "e", "o", "u", "en", "con", "por", "para"]
)

# Shorter words never contribute to the abbreviation
ABBREVIATION_MIN_WORD_LENGTH = 3

CHARGE_REGEX = re.compile(rf"^[{LETTERS}0-9\s.'()-]+$")
CONSECUTIVE_SPECIALS_REGEX = re.compile(r"--+|''+|\.\.+|\s{2,}")
EDGE_SPECIAL_REGEX = re.compile(r"^[\s.'-]|[\s.'-]$")


@dataclass(frozen=True)
class Charge:
    """
    Immutable charge (position) value object.

    Validates the title and normalizes its casing so that
    "treasurer OF THE board" is stored as "Treasurer of the Board".
    """

    value: str

    def __post_init__(self):
        self._validate(self.value)
        object.__setattr__(self, "value", self._normalize(self.value))

    @staticmethod
    def _validate(value: str) -> None:
        if not value or not isinstance(value, str):
            raise ValidationError("Charge cannot be empty")

        trimmed = value.strip()
        if not trimmed:
            raise ValidationError("Charge cannot be only whitespace")

        if CONSECUTIVE_SPECIALS_REGEX.search(trimmed):
            raise ValidationError("Charge cannot contain consecutive special characters")

        if EDGE_SPECIAL_REGEX.search(trimmed):
            raise ValidationError("Charge cannot start or end with spaces or special characters")

        if len(trimmed) < MIN_CHARGE_LENGTH:
            raise ValidationError(f"Charge must be at least {MIN_CHARGE_LENGTH} characters long")

        if len(trimmed) > MAX_CHARGE_LENGTH:
            raise ValidationError(f"Charge cannot exceed {MAX_CHARGE_LENGTH} characters")

        if not CHARGE_REGEX.match(trimmed):
            raise ValidationError("Charge contains invalid characters")

    @staticmethod
    def _normalize_word(word: str, index: int) -> str:
        if word.startswith("(") and word.endswith(")"):
            return f"({word[1:-1].lower()})"
        if word.startswith("("):
            return f"({title_case(word[1:])}"
        if word.endswith(")"):
            return f"{word[:-1].lower()})"

        if index > 0 and word.lower() in LOWERCASE_WORDS:
            return word.lower()

        return title_case(word)

    @classmethod
    def _normalize(cls, value: str) -> str:
        return " ".join(cls._normalize_word(word, index) for index, word in enumerate(value.split()))

    @property
    def abbreviation(self) -> str:
        """
        Initials of the significant words of the title.

        Prepositions, short words and anything inside parentheses are skipped,
        so "Treasurer of the Board (acting)" becomes "TB".
        """
        initials: List[str] = []
        depth = 0
        for word in self.value.split(" "):
            opens_group = word.startswith("(")
            closes_group = word.endswith(")")
            if opens_group:
                depth += 1

            clean_word = word.strip("()")
            if (
                depth == 0
                and len(clean_word) >= ABBREVIATION_MIN_WORD_LENGTH
                and clean_word.lower() not in LOWERCASE_WORDS
            ):
                initials.append(clean_word[0].upper())

            if closes_group and depth > 0:
                depth -= 1
        return "".join(initials)

    def __str__(self) -> str:
        return self.value
