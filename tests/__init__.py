# tests/__init__.py
"""
Test Suite for the Patron API.

Organization:
- `core`: Value objects, the Patron aggregate and Use Cases with a mocked repository.
- `adapters`: HTTP endpoints (TestClient) and the Mongo repository (mocked motor collection).
- `shared`: Settings, container and observability wiring.
"""
