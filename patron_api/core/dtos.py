# patron_api/core/dtos.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from patron_api.core.domain.patron import Patron
from patron_api.core.ports.patron_repository import PatronCriteria

# --- Commands & Queries (input to use cases) ---

class CreatePatronCommand(BaseModel):
    """Everything needed to register a new patron."""
    email: str
    given_name: str
    family_name: str
    role: str
    charge: str
    renovation_date: datetime
    ending_date: datetime

class UpdatePatronCommand(BaseModel):
    """
    Partial update of an existing patron.
    Only the fields explicitly supplied are changed.
    """
    id: str
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    role: Optional[str] = None
    charge: Optional[str] = None
    renovation_date: Optional[datetime] = None
    ending_date: Optional[datetime] = None

    def changes(self) -> Dict[str, Any]:
        """The supplied fields, without the identifier."""
        return self.model_dump(exclude={"id"}, exclude_none=True)

class RenewPatronCommand(BaseModel):
    id: str
    ending_date: datetime

class ListPatronsQuery(BaseModel):
    page: int = Field(1, ge=1, description="1-based page number")
    limit: int = Field(10, ge=1, le=100, description="Page size")
    role: Optional[str] = Field(None, description="Only patrons holding this role")
    search: Optional[str] = Field(None, description="Free text over names, email and charge")
    is_active: Optional[bool] = Field(None, description="Filter on running / ended memberships")

    def criteria(self) -> PatronCriteria:
        return PatronCriteria(role=self.role, search=self.search, is_active=self.is_active)

# --- Results (output of use cases) ---

class PatronDTO(BaseModel):
    """
    Wire-shape representation of a Patron.
    """
    id: Optional[str] = None
    email: str
    given_name: str
    family_name: str
    role: str
    charge: str
    renovation_date: datetime
    ending_date: datetime
    is_active: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, patron: Patron) -> "PatronDTO":
        return cls(
            id=patron.id,
            is_active=patron.is_active(),
            created_at=patron.created_at,
            updated_at=patron.updated_at,
            **patron.to_primitives(),
        )

class PatronListDTO(BaseModel):
    patrons: List[PatronDTO] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10
    total_pages: int = 0
