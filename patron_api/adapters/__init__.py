# patron_api/adapters/__init__.py
"""
Infrastructure Adapters (the outer ring).

- api: FastAPI driving adapter (HTTP -> use cases).
- persistence: MongoDB driven adapter (PatronRepository implementation).
"""
