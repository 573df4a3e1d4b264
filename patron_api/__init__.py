"""
Patron Registry API.

This package contains the service that manages the patrons (board officers and
members) of the foundation, following Hexagonal Architecture (Ports & Adapters).
"""

__version__ = "1.0.0"
