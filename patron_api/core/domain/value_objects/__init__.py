"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.
Each one validates on construction and raises ValidationError on bad input.

- Email: Lower-cased, RFC 5322-ish address
- PersonName: Given or family name, title-cased
- Charge: Office title with abbreviation support
- Role: Closed set of board roles
- DateRange: Membership window bounded to ten years
- PatronId: ObjectId or UUID identifier
"""

from .charge import Charge
from .date_range import DateRange
from .email import Email
from .patron_id import PatronId
from .person_name import PersonName
from .role import Role, RoleType

__all__ = [
    "Charge",
    "DateRange",
    "Email",
    "PatronId",
    "PersonName",
    "Role",
    "RoleType",
]
