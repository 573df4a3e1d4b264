"""
Domain Entities and Value Objects.

This package defines the core data structures used throughout the application.
These models represent the "ubiquitous language" of the foundation
(Patron, Charge, Role, DateRange) and are devoid of any infrastructure logic.
"""

from .exceptions import (
    ConflictError,
    DatabaseError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .patron import Patron

__all__ = [
    "Patron",
    "DomainError",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "DatabaseError",
]
