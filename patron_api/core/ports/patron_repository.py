# patron_api/core/ports/patron_repository.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from patron_api.core.domain.patron import Patron


@dataclass(frozen=True)
class PatronCriteria:
    """
    Filter applied when listing patrons.

    Attributes:
        role: Exact role to match.
        search: Case-insensitive text matched against names, email and charge.
        is_active: True for memberships still running, False for ended ones.
    """
    role: Optional[str] = None
    search: Optional[str] = None
    is_active: Optional[bool] = None


class PatronRepository(ABC):
    """
    Interface (Port) for the Patron persistence layer.

    Implementations wrap their storage failures into DatabaseError, and
    unique-key violations into ConflictError, before they reach a use case.
    """

    @abstractmethod
    async def find(self, criteria: PatronCriteria, page: int = 1, limit: int = 10) -> List[Patron]:
        """Returns one page of patrons matching the criteria."""
        pass

    @abstractmethod
    async def count(self, criteria: PatronCriteria) -> int:
        """Counts every patron matching the criteria (all pages)."""
        pass

    @abstractmethod
    async def find_by_id(self, patron_id: str) -> Optional[Patron]:
        """Retrieves a patron by identifier, None if absent."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Patron]:
        """Retrieves a patron by (normalized) email, None if absent."""
        pass

    @abstractmethod
    async def create(self, patron: Patron) -> Patron:
        """
        Persists a new patron and returns it with its assigned identifier.

        Raises:
            ConflictError: If the storage reports a duplicate unique key.
        """
        pass

    @abstractmethod
    async def update(self, patron_id: str, changes: Dict[str, Any]) -> Optional[Patron]:
        """Applies a partial update; None if the patron vanished in the meantime."""
        pass

    @abstractmethod
    async def delete(self, patron_id: str) -> bool:
        """Removes a patron. Returns False if nothing was deleted."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Verifies connection to storage."""
        pass
