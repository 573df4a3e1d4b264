# patron_api/core/domain/patron.py
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from patron_api.core.domain.exceptions import ValidationError
from patron_api.core.domain.value_objects import (
    Charge,
    DateRange,
    Email,
    PatronId,
    PersonName,
    Role,
)
from patron_api.core.domain.value_objects.date_range import to_utc, utc_now

# Keys produced by Patron.to_primitives() and accepted by Patron.apply_changes()
PRIMITIVE_FIELDS = (
    "email",
    "given_name",
    "family_name",
    "role",
    "charge",
    "renovation_date",
    "ending_date",
)


class Patron:
    """
    Aggregate Root: a board officer or member of the foundation.

    The identity fields (email, names, role) are held directly, the membership
    window as a DateRange. Instances are built through `create` or
    `from_primitives`, which run every value object's validation, so a partially
    valid Patron can never exist. Mutation goes through setters that
    re-validate via the owning value object.
    """

    def __init__(
        self,
        email: Email,
        given_name: PersonName,
        family_name: PersonName,
        role: Role,
        charge: Charge,
        membership: DateRange,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._email = email
        self._given_name = given_name
        self._family_name = family_name
        self._role = role
        self._charge = charge
        self._membership = membership
        self._created_at = created_at
        self._updated_at = updated_at

    # --- Factories ---

    @classmethod
    def create(
        cls,
        email: str,
        given_name: str,
        family_name: str,
        role: str,
        charge: str,
        renovation_date: datetime,
        ending_date: datetime,
    ) -> "Patron":
        """
        Builds a brand-new Patron (no identifier yet).

        Raises:
            ValidationError: On the first field that fails its rules.
        """
        return cls(
            email=Email(email),
            given_name=PersonName(given_name),
            family_name=PersonName(family_name),
            role=Role(role),
            charge=Charge(charge),
            membership=DateRange(renovation_date, ending_date),
        )

    @classmethod
    def from_primitives(cls, data: Mapping[str, Any]) -> "Patron":
        """
        Rebuilds a Patron from a flat record (e.g. a stored document).

        Runs the same validation as `create` and additionally accepts an
        existing `id` and the `created_at` / `updated_at` timestamps.
        """
        identifier = data.get("id")
        return cls(
            email=Email(data.get("email")),
            given_name=PersonName(data.get("given_name")),
            family_name=PersonName(data.get("family_name")),
            role=Role(data.get("role")),
            charge=Charge(data.get("charge")),
            membership=DateRange(data.get("renovation_date"), data.get("ending_date")),
            id=PatronId(str(identifier)).value if identifier else None,
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    # --- Identity & metadata ---

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def created_at(self) -> Optional[datetime]:
        return self._created_at

    @property
    def updated_at(self) -> Optional[datetime]:
        return self._updated_at

    # --- Fields (getters return primitives, setters re-validate) ---

    @property
    def email(self) -> str:
        return self._email.value

    @email.setter
    def email(self, value: str) -> None:
        self._email = Email(value)

    @property
    def given_name(self) -> str:
        return self._given_name.value

    @given_name.setter
    def given_name(self, value: str) -> None:
        self._given_name = PersonName(value)

    @property
    def family_name(self) -> str:
        return self._family_name.value

    @family_name.setter
    def family_name(self, value: str) -> None:
        self._family_name = PersonName(value)

    @property
    def role(self) -> str:
        return self._role.value

    @role.setter
    def role(self, value: str) -> None:
        self._role = Role(value)

    @property
    def charge(self) -> str:
        return self._charge.value

    @charge.setter
    def charge(self, value: str) -> None:
        self._charge = Charge(value)

    @property
    def renovation_date(self) -> datetime:
        return self._membership.start

    @renovation_date.setter
    def renovation_date(self, value: datetime) -> None:
        # DateRange re-checks ordering against the current ending date
        self._membership = DateRange(value, self._membership.end)

    @property
    def ending_date(self) -> datetime:
        return self._membership.end

    @ending_date.setter
    def ending_date(self, value: datetime) -> None:
        self._membership = DateRange(self._membership.start, value)

    def reschedule(self, renovation_date: datetime, ending_date: datetime) -> None:
        """Replaces both membership dates at once."""
        self._membership = DateRange(renovation_date, ending_date)

    def apply_changes(self, changes: Mapping[str, Any]) -> None:
        """
        Applies a partial update.

        Every field is validated before anything is committed: if one value
        is rejected the aggregate keeps its previous state.
        """
        merged = {**self.to_primitives(), **{k: v for k, v in changes.items() if k in PRIMITIVE_FIELDS}}
        candidate = Patron.from_primitives(merged)

        self._email = candidate._email
        self._given_name = candidate._given_name
        self._family_name = candidate._family_name
        self._role = candidate._role
        self._charge = candidate._charge
        self._membership = candidate._membership

    # --- Value object access for rich behaviour ---

    @property
    def email_vo(self) -> Email:
        return self._email

    @property
    def role_vo(self) -> Role:
        return self._role

    @property
    def charge_vo(self) -> Charge:
        return self._charge

    @property
    def membership(self) -> DateRange:
        return self._membership

    @property
    def email_domain(self) -> str:
        return self._email.domain

    @property
    def charge_abbreviation(self) -> str:
        return self._charge.abbreviation

    @property
    def initials(self) -> str:
        return self._given_name.initials + self._family_name.initials

    # --- Business rules ---

    def is_active(self, now: Optional[datetime] = None) -> bool:
        return self._membership.is_active(now)

    def can_be_renewed(self, now: Optional[datetime] = None) -> bool:
        # Only once the current membership has ended
        return self._membership.is_expired(now)

    def renew(self, new_ending_date: datetime, now: Optional[datetime] = None) -> "Patron":
        """
        Starts a new membership window beginning now.

        Returns a new Patron; the current instance is left untouched.

        Raises:
            ValidationError: If the membership has not ended yet, or the new
                window is invalid.
        """
        current = to_utc(now) if now else utc_now()
        if not self.can_be_renewed(current):
            raise ValidationError("Patron cannot be renewed yet")

        return Patron(
            email=self._email,
            given_name=self._given_name,
            family_name=self._family_name,
            role=self._role,
            charge=self._charge,
            membership=DateRange(current, new_ending_date),
            id=self._id,
            created_at=self._created_at,
            updated_at=self._updated_at,
        )

    # --- Serialization ---

    def to_primitives(self) -> Dict[str, Any]:
        """Flat record of plain values, ready for a persistence adapter or DTO."""
        return {
            "email": self.email,
            "given_name": self.given_name,
            "family_name": self.family_name,
            "role": self.role,
            "charge": self.charge,
            "renovation_date": self.renovation_date,
            "ending_date": self.ending_date,
        }

    def equals(self, other: "Patron") -> bool:
        """Two patrons are the same person when email and names match; id is ignored."""
        return (
            self.email == other.email
            and self.given_name == other.given_name
            and self.family_name == other.family_name
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patron):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Same fields as equals(); changing them changes the hash
        return hash((self.email, self.given_name, self.family_name))

    def __repr__(self) -> str:
        return f"Patron(id={self._id!r}, email={self.email!r}, charge={self.charge!r})"
