# patron_api/adapters/persistence/__init__.py
"""
Persistence Adapters.

This package implements the Repository port defined in the Core Domain.
It handles the translation between the Patron aggregate and MongoDB documents.

Components:
- MongoConnection: Owns the motor client (connect / disconnect / ping).
- MongoPatronRepository: Concrete implementation of PatronRepository.
"""

from .mongo_connection import MongoConnection
from .mongo_patron_repository import MongoPatronRepository

__all__ = [
    "MongoConnection",
    "MongoPatronRepository",
]
