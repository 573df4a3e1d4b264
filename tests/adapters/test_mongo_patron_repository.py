# tests/adapters/test_mongo_patron_repository.py
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from patron_api.adapters.persistence.mongo_connection import MongoConnection
from patron_api.adapters.persistence.mongo_patron_repository import MongoPatronRepository
from patron_api.core.domain.exceptions import ConflictError, DatabaseError, ValidationError
from patron_api.core.domain.patron import Patron
from patron_api.core.ports.patron_repository import PatronCriteria

OBJECT_ID = ObjectId("64b7f0c2a1b2c3d4e5f60718")
UTC = timezone.utc


def make_document(**overrides):
    document = {
        "_id": OBJECT_ID,
        "email": "john.doe@example.com",
        "given_name": "John",
        "family_name": "Doe",
        "role": "president",
        "charge": "President of the Board",
        "renovation_date": datetime(2024, 1, 1, tzinfo=UTC),
        "ending_date": datetime(2025, 1, 1, tzinfo=UTC),
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
        "updated_at": datetime(2024, 1, 1, tzinfo=UTC),
    }
    document.update(overrides)
    return document


@pytest.fixture
def collection():
    """A motor collection double; cursor methods chain like the real one."""
    collection = MagicMock()
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[make_document()])
    collection.find.return_value = cursor
    collection.cursor = cursor

    collection.count_documents = AsyncMock(return_value=1)
    collection.find_one = AsyncMock(return_value=make_document())
    collection.insert_one = AsyncMock(return_value=SimpleNamespace(inserted_id=OBJECT_ID))
    collection.find_one_and_update = AsyncMock(return_value=make_document(charge="Vocal"))
    collection.delete_one = AsyncMock(return_value=SimpleNamespace(deleted_count=1))
    collection.create_index = AsyncMock()
    return collection


@pytest.fixture
def repository(collection):
    connection = MagicMock(spec=MongoConnection)
    connection.database = {"patrons": collection}
    connection.health_check = AsyncMock(return_value=True)
    return MongoPatronRepository(connection, collection_name="patrons")


@pytest.mark.asyncio
class TestMongoPatronRepositoryReads:

    async def test_find_paginates_and_sorts(self, repository, collection):
        patrons = await repository.find(PatronCriteria(), page=3, limit=5)

        assert [p.id for p in patrons] == [str(OBJECT_ID)]
        collection.find.assert_called_once_with({})
        collection.cursor.sort.assert_called_once_with([("family_name", 1), ("given_name", 1)])
        collection.cursor.skip.assert_called_once_with(10)
        collection.cursor.limit.assert_called_once_with(5)

    async def test_search_is_escaped_and_case_insensitive(self, repository, collection):
        await repository.count(PatronCriteria(search="a.b", role="vocal"))

        query = collection.count_documents.await_args.args[0]
        assert query["role"] == "vocal"
        assert {"email": {"$regex": r"a\.b", "$options": "i"}} in query["$or"]
        assert len(query["$or"]) == 4

    async def test_active_filter(self, repository, collection):
        await repository.count(PatronCriteria(is_active=True))

        query = collection.count_documents.await_args.args[0]
        assert set(query["renovation_date"]) == {"$lte"}
        assert set(query["ending_date"]) == {"$gte"}

    async def test_inactive_filter_combined_with_search(self, repository, collection):
        await repository.count(PatronCriteria(is_active=False, search="doe"))

        query = collection.count_documents.await_args.args[0]
        assert "$or" not in query
        search_clause, inactive_clause = query["$and"]
        assert len(search_clause["$or"]) == 4
        assert len(inactive_clause["$or"]) == 2

    async def test_find_by_id_uses_object_id(self, repository, collection):
        patron = await repository.find_by_id(str(OBJECT_ID))

        assert isinstance(patron, Patron)
        assert patron.created_at == datetime(2024, 1, 1, tzinfo=UTC)
        collection.find_one.assert_awaited_once_with({"_id": OBJECT_ID})

    async def test_find_by_id_keeps_uuid_strings(self, repository, collection):
        uuid = "123e4567-e89b-42d3-a456-426614174000"
        collection.find_one.return_value = make_document(_id=uuid)

        patron = await repository.find_by_id(uuid)

        assert patron.id == uuid
        collection.find_one.assert_awaited_once_with({"_id": uuid})

    async def test_find_by_email_missing(self, repository, collection):
        collection.find_one.return_value = None

        assert await repository.find_by_email(" John.Doe@Example.com ") is None
        collection.find_one.assert_awaited_once_with({"email": "john.doe@example.com"})

    async def test_invalid_stored_document_is_database_error(self, repository, collection):
        """
        Scenario: A stored document carries a role the domain no longer accepts.
        Expected: DatabaseError (a server fault), not a client ValidationError.
        """
        # Arrange
        collection.find_one.return_value = make_document(role="emperor")

        # Act / Assert
        with pytest.raises(DatabaseError) as excinfo:
            await repository.find_by_id(str(OBJECT_ID))

        assert excinfo.value.operation == "read"
        assert isinstance(excinfo.value.__cause__, ValidationError)


@pytest.mark.asyncio
class TestMongoPatronRepositoryWrites:

    async def test_create_assigns_id_and_timestamps(self, repository, collection):
        patron = Patron.from_primitives({k: v for k, v in make_document().items() if k != "_id"})

        saved = await repository.create(patron)

        assert saved.id == str(OBJECT_ID)
        document = collection.insert_one.await_args.args[0]
        assert document["email"] == "john.doe@example.com"
        assert document["created_at"] == document["updated_at"]

    async def test_create_duplicate_email(self, repository, collection):
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")
        patron = Patron.from_primitives({k: v for k, v in make_document().items() if k != "_id"})

        with pytest.raises(ConflictError):
            await repository.create(patron)

    async def test_update_returns_updated_patron(self, repository, collection):
        updated = await repository.update(str(OBJECT_ID), {"charge": "Vocal"})

        assert updated.charge == "Vocal"
        filter_, update = collection.find_one_and_update.await_args.args
        assert filter_ == {"_id": OBJECT_ID}
        assert update["$set"]["charge"] == "Vocal"
        assert "updated_at" in update["$set"]
        assert collection.find_one_and_update.await_args.kwargs["return_document"] is ReturnDocument.AFTER

    async def test_update_missing(self, repository, collection):
        collection.find_one_and_update.return_value = None
        assert await repository.update(str(OBJECT_ID), {"charge": "Vocal"}) is None

    async def test_delete(self, repository, collection):
        assert await repository.delete(str(OBJECT_ID)) is True

        collection.delete_one.return_value = SimpleNamespace(deleted_count=0)
        assert await repository.delete(str(OBJECT_ID)) is False

    async def test_driver_errors_become_database_errors(self, repository, collection):
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(DatabaseError) as excinfo:
            await repository.find_by_id(str(OBJECT_ID))

        assert excinfo.value.operation == "find_by_id"

    async def test_ensure_indexes(self, repository, collection):
        await repository.ensure_indexes()
        collection.create_index.assert_any_await("email", unique=True)


@pytest.mark.asyncio
class TestMongoConnection:

    async def test_database_requires_connection(self):
        connection = MongoConnection("mongodb://localhost:27017", "fundacio-molins")

        assert not connection.is_connected
        assert await connection.health_check() is False
        with pytest.raises(DatabaseError):
            connection.database
