# patron_api/adapters/api/__init__.py
"""
REST API Adapter.

This package acts as the HTTP entry point for the patron registry.
It is built on FastAPI and follows the Hexagonal Architecture principles:
- It depends on `patron_api.core` (Use Cases & DTOs).
- It wires the `patron_api.shared.container` to inject dependencies.
- It does NOT contain business logic.
"""

from .main import create_app

__all__ = ["create_app"]
