# patron_api/adapters/api/routers/__init__.py
"""
API Route Definitions.

This package contains the route handlers (controllers) organized by area.
- `patrons`: CRUD and renewal of patrons.
- `health`: System health checks.
"""

from .health import router as health_router
from .patrons import router as patrons_router

__all__ = [
    "health_router",
    "patrons_router",
]
