# patron_api/adapters/persistence/mongo_patron_repository.py
import re
from typing import Any, Dict, List, Optional, Union

import structlog
from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from patron_api.adapters.persistence.mongo_connection import MongoConnection
from patron_api.core.domain.exceptions import ConflictError, DatabaseError, ValidationError
from patron_api.core.domain.patron import Patron
from patron_api.core.domain.value_objects.date_range import utc_now
from patron_api.core.ports.patron_repository import PatronCriteria, PatronRepository

logger = structlog.get_logger()

SEARCH_FIELDS = ("given_name", "family_name", "email", "charge")
SORT_ORDER = [("family_name", ASCENDING), ("given_name", ASCENDING)]

class MongoPatronRepository(PatronRepository):
    """
    Concrete implementation of the Patron Repository on MongoDB (motor).

    Documents hold the aggregate's primitives plus `created_at` / `updated_at`.
    """

    def __init__(self, connection: MongoConnection, collection_name: str = "patrons"):
        self.connection = connection
        self.collection_name = collection_name

    @property
    def collection(self):
        return self.connection.database[self.collection_name]

    # --- Mapping helpers ---

    @staticmethod
    def _to_object_id(patron_id: str) -> Union[ObjectId, str]:
        # UUID identifiers are stored as plain strings
        return ObjectId(patron_id) if ObjectId.is_valid(patron_id) else patron_id

    @staticmethod
    def _to_entity(document: Dict[str, Any]) -> Patron:
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        try:
            return Patron.from_primitives(data)
        except ValidationError as e:
            # Records failing the domain rules surface as storage faults, not client errors
            logger.error("patron_document_invalid", document_id=data["id"], error=e.message)
            raise DatabaseError(f"Stored patron {data['id']} is invalid", operation="read") from e

    @staticmethod
    def _build_filter(criteria: PatronCriteria) -> Dict[str, Any]:
        query: Dict[str, Any] = {}

        if criteria.role:
            query["role"] = criteria.role

        if criteria.search and criteria.search.strip():
            pattern = re.escape(criteria.search.strip())
            query["$or"] = [
                {field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS
            ]

        if criteria.is_active is not None:
            now = utc_now()
            if criteria.is_active:
                query["renovation_date"] = {"$lte": now}
                query["ending_date"] = {"$gte": now}
            else:
                inactive = [{"ending_date": {"$lt": now}}, {"renovation_date": {"$gt": now}}]
                if "$or" in query:
                    query["$and"] = [{"$or": query.pop("$or")}, {"$or": inactive}]
                else:
                    query["$or"] = inactive

        return query

    def _fail(self, operation: str, error: PyMongoError) -> DatabaseError:
        logger.error("mongodb_operation_failed", operation=operation, collection=self.collection_name, error=str(error))
        return DatabaseError(f"Database error during {operation}", operation=operation)

    # --- Interface Implementation ---

    async def find(self, criteria: PatronCriteria, page: int = 1, limit: int = 10) -> List[Patron]:
        try:
            cursor = (
                self.collection.find(self._build_filter(criteria))
                .sort(SORT_ORDER)
                .skip((page - 1) * limit)
                .limit(limit)
            )
            documents = await cursor.to_list(length=limit)
        except PyMongoError as e:
            raise self._fail("find", e) from e
        return [self._to_entity(doc) for doc in documents]

    async def count(self, criteria: PatronCriteria) -> int:
        try:
            return await self.collection.count_documents(self._build_filter(criteria))
        except PyMongoError as e:
            raise self._fail("count", e) from e

    async def find_by_id(self, patron_id: str) -> Optional[Patron]:
        try:
            document = await self.collection.find_one({"_id": self._to_object_id(patron_id)})
        except PyMongoError as e:
            raise self._fail("find_by_id", e) from e
        return self._to_entity(document) if document else None

    async def find_by_email(self, email: str) -> Optional[Patron]:
        try:
            document = await self.collection.find_one({"email": email.strip().lower()})
        except PyMongoError as e:
            raise self._fail("find_by_email", e) from e
        return self._to_entity(document) if document else None

    async def create(self, patron: Patron) -> Patron:
        now = utc_now()
        document = {**patron.to_primitives(), "created_at": now, "updated_at": now}
        if patron.id:
            document["_id"] = self._to_object_id(patron.id)

        try:
            result = await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            logger.warning("mongodb_duplicate_key", collection=self.collection_name)
            raise ConflictError("Patron with this email already exists") from e
        except PyMongoError as e:
            raise self._fail("create", e) from e

        document["_id"] = result.inserted_id
        return self._to_entity(document)

    async def update(self, patron_id: str, changes: Dict[str, Any]) -> Optional[Patron]:
        try:
            document = await self.collection.find_one_and_update(
                {"_id": self._to_object_id(patron_id)},
                {"$set": {**changes, "updated_at": utc_now()}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise ConflictError("Email already exists") from e
        except PyMongoError as e:
            raise self._fail("update", e) from e
        return self._to_entity(document) if document else None

    async def delete(self, patron_id: str) -> bool:
        try:
            result = await self.collection.delete_one({"_id": self._to_object_id(patron_id)})
        except PyMongoError as e:
            raise self._fail("delete", e) from e
        return result.deleted_count > 0

    async def ensure_indexes(self) -> None:
        """Creates the unique email index (idempotent)."""
        try:
            await self.collection.create_index("email", unique=True)
            await self.collection.create_index(SORT_ORDER)
        except PyMongoError as e:
            raise self._fail("ensure_indexes", e) from e
        logger.info("mongodb_indexes_ensured", collection=self.collection_name)

    async def health_check(self) -> bool:
        return await self.connection.health_check()
