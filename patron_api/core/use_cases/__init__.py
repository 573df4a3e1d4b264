# patron_api/core/use_cases/__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. They orchestrate
the flow of data between the Domain Entities and the Repository Port.
Each use case represents a specific business action (e.g., "Create Patron",
"Renew Patron") and is responsible for:
1. Building or mutating the Patron aggregate (which validates the input).
2. Interacting with the Repository Port.
3. Returning DTOs.

Use cases catch nothing: domain errors propagate to the HTTP adapter.
"""

from .create_patron import CreatePatron
from .delete_patron import DeletePatron
from .get_patron import GetPatron
from .list_patrons import ListPatrons
from .renew_patron import RenewPatron
from .update_patron import UpdatePatron

__all__ = [
    "CreatePatron",
    "GetPatron",
    "ListPatrons",
    "UpdatePatron",
    "DeletePatron",
    "RenewPatron",
]
