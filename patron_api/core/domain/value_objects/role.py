"""
Role Value Object

Board role of a patron, restricted to a closed set.
"""

from dataclasses import dataclass
from enum import Enum

from patron_api.core.domain.exceptions import ValidationError


class RoleType(str, Enum):
    """Closed set of roles a patron can hold on the board."""

    PRESIDENT = "president"
    VICE_PRESIDENT = "vice_president"
    SECRETARY = "secretary"
    TREASURER = "treasurer"
    VOCAL = "vocal"
    HONORARY_PRESIDENT = "honorary_president"
    FOUNDING_MEMBER = "founding_member"
    REGULAR_MEMBER = "regular_member"


DISPLAY_NAMES = {
    RoleType.PRESIDENT: "President",
    RoleType.VICE_PRESIDENT: "Vice President",
    RoleType.SECRETARY: "Secretary",
    RoleType.TREASURER: "Treasurer",
    RoleType.VOCAL: "Vocal",
    RoleType.HONORARY_PRESIDENT: "Honorary President",
    RoleType.FOUNDING_MEMBER: "Founding Member",
    RoleType.REGULAR_MEMBER: "Regular Member",
}

EXECUTIVE_ROLES = frozenset(
    [RoleType.PRESIDENT, RoleType.VICE_PRESIDENT, RoleType.SECRETARY, RoleType.TREASURER]
)
HONORARY_ROLES = frozenset([RoleType.HONORARY_PRESIDENT, RoleType.FOUNDING_MEMBER])
SIGNING_ROLES = frozenset([RoleType.PRESIDENT, RoleType.VICE_PRESIDENT, RoleType.SECRETARY])


@dataclass(frozen=True)
class Role:
    """
    Immutable role value object.

    Only exact matches against RoleType values are accepted; no case folding.
    """

    value: str

    def __post_init__(self):
        valid_roles = [role.value for role in RoleType]
        if not self.value or self.value not in valid_roles:
            raise ValidationError(
                f"Invalid role: {self.value}. Valid roles are: {', '.join(valid_roles)}"
            )

    @property
    def type(self) -> RoleType:
        return RoleType(self.value)

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self.type]

    def is_executive(self) -> bool:
        return self.type in EXECUTIVE_ROLES

    def is_honorary(self) -> bool:
        return self.type in HONORARY_ROLES

    def has_voting_rights(self) -> bool:
        # All roles except honorary ones vote
        return not self.is_honorary()

    def can_sign_documents(self) -> bool:
        return self.type in SIGNING_ROLES

    def __str__(self) -> str:
        return self.value
