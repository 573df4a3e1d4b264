"""
PatronId Value Object

Identifier assigned by the persistence layer: a MongoDB ObjectId or a UUID.
"""

import re
from dataclasses import dataclass

from patron_api.core.domain.exceptions import ValidationError

OBJECT_ID_REGEX = re.compile(r"^[a-fA-F0-9]{24}$")
UUID_REGEX = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PatronId:
    """Immutable patron identifier."""

    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str):
            raise ValidationError("PatronId cannot be empty")

        if not self.value.strip():
            raise ValidationError("PatronId cannot be only whitespace")

        if not (OBJECT_ID_REGEX.fullmatch(self.value) or UUID_REGEX.fullmatch(self.value)):
            raise ValidationError("PatronId must be a valid ObjectId or UUID")

    @property
    def is_object_id(self) -> bool:
        return bool(OBJECT_ID_REGEX.fullmatch(self.value))

    def __str__(self) -> str:
        return self.value
