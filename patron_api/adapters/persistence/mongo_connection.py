# patron_api/adapters/persistence/mongo_connection.py
from typing import Optional

import structlog
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from patron_api.core.domain.exceptions import DatabaseError

logger = structlog.get_logger()

class MongoConnection:
    """
    Owns the single MongoDB client of the process.

    Built once by the DI container; the FastAPI lifespan calls `connect()` on
    startup and `disconnect()` on shutdown.
    """

    def __init__(self, uri: str, database: str, timeout_ms: int = 5000):
        self.uri = uri
        self.database_name = database
        self.timeout_ms = timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if not self._client:
            raise DatabaseError("Database is not connected", operation="database")
        return self._client[self.database_name]

    async def connect(self) -> None:
        """Opens the client and pings the server. Calling it twice is a no-op."""
        if self._client:
            return

        client = AsyncIOMotorClient(
            self.uri,
            tz_aware=True,
            serverSelectionTimeoutMS=self.timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            logger.error("mongodb_connection_failed", database=self.database_name, error=str(e))
            raise DatabaseError(f"Could not connect to MongoDB: {e}", operation="connect") from e

        self._client = client
        logger.info("mongodb_connected", database=self.database_name)

    async def disconnect(self) -> None:
        if self._client:
            self._client.close()
            self._client = None
            logger.info("mongodb_disconnected")

    async def health_check(self) -> bool:
        """Pings the server; False on any driver error or when not connected."""
        if not self._client:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning("mongodb_ping_failed", error=str(e))
            return False
