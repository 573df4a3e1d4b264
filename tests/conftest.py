# tests/conftest.py
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from patron_api.adapters.persistence.mongo_connection import MongoConnection
from patron_api.core.domain.patron import Patron
from patron_api.core.ports.patron_repository import PatronRepository
from patron_api.shared.config import AppEnv, Settings
from patron_api.shared.container import Container

PATRON_ID = "64b7f0c2a1b2c3d4e5f60718"

@pytest.fixture(scope="function")
def test_settings():
    """Settings isolated from the developer's .env file."""
    return Settings(
        _env_file=None,
        APP_ENV=AppEnv.TESTING,
        LOG_FORMAT="console",
        LOG_LEVEL="WARNING",
        OTEL_EXPORTER_OTLP_ENDPOINT=None,
    )

@pytest.fixture(scope="function")
def mock_repo():
    """Returns a mock Patron Repository."""
    repo = MagicMock(spec=PatronRepository)
    # Async methods must be mocked with AsyncMock
    repo.find = AsyncMock(return_value=[])
    repo.count = AsyncMock(return_value=0)
    repo.find_by_id = AsyncMock(return_value=None)
    repo.find_by_email = AsyncMock(return_value=None)
    repo.create = AsyncMock()
    repo.update = AsyncMock(return_value=None)
    repo.delete = AsyncMock(return_value=True)
    repo.health_check = AsyncMock(return_value=True)
    # Adapter-only hook called by the app lifespan
    repo.ensure_indexes = AsyncMock()
    return repo

@pytest.fixture(scope="function")
def mock_connection():
    """Returns a mock MongoDB connection."""
    connection = MagicMock(spec=MongoConnection)
    connection.connect = AsyncMock()
    connection.disconnect = AsyncMock()
    connection.health_check = AsyncMock(return_value=True)
    return connection

@pytest.fixture(scope="function")
def container(test_settings, mock_repo, mock_connection):
    """
    Sets up the Dependency Injection Container for testing.
    It overrides real infrastructure providers with the mocks defined above.
    """
    container = Container()

    container.settings.override(test_settings)
    container.mongo_connection.override(mock_connection)
    container.patron_repository.override(mock_repo)

    yield container

    container.unwire()
    container.reset_override()

@pytest.fixture
def make_patron():
    """
    Factory for valid patrons. Defaults describe a running membership;
    any field can be overridden by keyword.
    """
    def _make(**overrides):
        now = datetime.now(timezone.utc)
        data = {
            "id": PATRON_ID,
            "email": "john.doe@example.com",
            "given_name": "John",
            "family_name": "Doe",
            "role": "president",
            "charge": "President of the Board",
            "renovation_date": now - timedelta(days=30),
            "ending_date": now + timedelta(days=335),
            "created_at": now - timedelta(days=30),
            "updated_at": now - timedelta(days=30),
        }
        data.update(overrides)
        return Patron.from_primitives(data)

    return _make

@pytest.fixture
def sample_patron(make_patron):
    """Provides a valid, currently active patron."""
    return make_patron()

@pytest.fixture
def expired_patron(make_patron):
    """Provides a patron whose membership ended last month."""
    now = datetime.now(timezone.utc)
    return make_patron(
        renovation_date=now - timedelta(days=400),
        ending_date=now - timedelta(days=30),
    )
