import asyncio
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.exceptions.custom_exception import PersistenceError
from utils.logger import logger


class MongoConnectionPool:
    """
    Owns the single MongoDB client of the process.

    ``open()`` is idempotent: it returns the cached database handle, or joins
    the connection attempt already in flight so concurrent callers never start
    a second client. A waiter being cancelled leaves the shared attempt running
    for the others. A failed attempt is dropped so the next call retries.
    """

    def __init__(self, uri: Optional[str], db_name: str, server_selection_timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def open(self) -> AsyncIOMotorDatabase:
        if self._client is not None:
            return self._client[self.db_name]

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._connect())

        client = await asyncio.shield(self._pending)
        return client[self.db_name]

    async def _connect(self) -> AsyncIOMotorClient:
        task = asyncio.current_task()
        try:
            client = await self._create_client()
        finally:
            if self._pending is task:
                self._pending = None
        self._client = client
        return client

    async def _create_client(self) -> AsyncIOMotorClient:
        if not self.uri:
            logger.error("MONGODB_URI is not configured")
            raise PersistenceError("MONGODB_URI environment variable is not defined")

        client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.server_selection_timeout_ms)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            client.close()
            raise PersistenceError(f"Could not connect to MongoDB: {e}") from e
        except asyncio.CancelledError:
            client.close()
            raise

        logger.info(f"MongoDB connected, database '{self.db_name}'")
        return client

    async def close(self) -> None:
        pending, self._pending = self._pending, None
        if pending is not None and not pending.done():
            pending.cancel()
            # Collects the attempt's outcome; a client it already stored is closed below
            await asyncio.gather(pending, return_exceptions=True)
            logger.info("Pending MongoDB connection attempt cancelled")

        if self._client is None:
            return
        try:
            self._client.close()
            logger.info("MongoDB connection closed")
        except Exception as e:
            logger.error(f"Failed to close MongoDB connection: {e}")
        finally:
            self._client = None
