# patron_api/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the abstract base classes that the Infrastructure
Adapters must implement. These interfaces allow the Core Domain to interact
with the outside world (MongoDB) without knowing the implementation details.
"""

from .patron_repository import PatronCriteria, PatronRepository

__all__ = [
    "PatronCriteria",
    "PatronRepository",
]
