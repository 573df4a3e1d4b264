"""
Core Domain Layer.

This package contains the pure business logic and entities of the system.
It strictly follows the Hexagonal Architecture (Ports & Adapters) pattern:
- Domain and Ports have no dependencies on frameworks (FastAPI).
- No dependencies on infrastructure (MongoDB).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
