"""
Email Value Object

Validated, lower-cased email address.
"""

import re
from dataclasses import dataclass

from patron_api.core.domain.exceptions import ValidationError

MAX_EMAIL_LENGTH = 254

# RFC 5322 (simplified): local part, then dot-separated domain labels of at most 63 chars
EMAIL_REGEX = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@"
    r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)


@dataclass(frozen=True)
class Email:
    """
    Immutable email value object.

    Normalized to trimmed lower case so that two spellings of the same
    address compare equal.
    """

    value: str

    def __post_init__(self):
        self._validate(self.value)
        object.__setattr__(self, "value", self.value.strip().lower())

    @staticmethod
    def _validate(value: str) -> None:
        if not value or not isinstance(value, str):
            raise ValidationError("Email cannot be empty")

        trimmed = value.strip()
        if not trimmed:
            raise ValidationError("Email cannot be only whitespace")

        if len(trimmed) > MAX_EMAIL_LENGTH:
            raise ValidationError(f"Email cannot exceed {MAX_EMAIL_LENGTH} characters")

        if not EMAIL_REGEX.match(trimmed):
            raise ValidationError("Invalid email format")

        if ".." in trimmed:
            raise ValidationError("Email cannot contain consecutive dots")

        domain = trimmed.split("@", 1)[1]
        if len(domain) < 2:
            raise ValidationError("Email must have a valid domain")

    @property
    def domain(self) -> str:
        """Part after the '@'."""
        return self.value.split("@", 1)[1]

    @property
    def local_part(self) -> str:
        """Part before the '@'."""
        return self.value.split("@", 1)[0]

    def __str__(self) -> str:
        return self.value
