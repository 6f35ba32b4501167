"""MongoDB document store provider implementation.

This module provides a concrete implementation of the DocumentStoreProvider
for MongoDB using motor (async driver). Live snapshots are driven by a
change stream on the collection, so the deployment must be a replica set.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import Field, PrivateAttr

from todolist.providers.core.decorators import provider
from todolist.providers.db.base import (
    DocumentStoreProvider,
    DocumentStoreSettings,
    SnapshotHandler,
    StoredDocument,
    Subscription,
)

logger = logging.getLogger(__name__)


class MongoDBStoreSettings(DocumentStoreSettings):
    """MongoDB provider settings - only MongoDB-specific fields.

    MongoDB requires:
    1. Database connection (host, port, database name)
    2. Authentication (username, password, auth_source)
    3. Timeout configuration
    """

    # Connection settings
    host: str = Field(default="localhost", description="MongoDB server host")
    port: int = Field(default=27017, description="MongoDB server port")
    username: Optional[str] = Field(default=None, description="MongoDB username")
    password: Optional[str] = Field(default=None, description="MongoDB password")
    database: str = Field(default="todolist", description="MongoDB database name")

    # Connection string override (takes precedence over host/port)
    connection_string: Optional[str] = Field(default=None, description="MongoDB connection string (overrides host/port if provided)")

    # Authentication settings
    auth_source: str = Field(default="admin", description="Authentication database name")

    # Timeout settings
    connect_timeout_ms: int = Field(default=20000, description="Connection timeout in milliseconds")
    server_selection_timeout_ms: int = Field(default=20000, description="Server selection timeout in milliseconds")

    # Additional connection arguments
    connect_args: Dict[str, Any] = Field(default_factory=dict)


def to_object_id(document_id: str) -> Any:
    """Convert a string id back to an ObjectId when it is one."""
    if ObjectId.is_valid(document_id):
        return ObjectId(document_id)
    return document_id


@provider(provider_type="document_store", name="mongodb", settings_class=MongoDBStoreSettings)
class MongoDBStoreProvider(DocumentStoreProvider[MongoDBStoreSettings]):
    """MongoDB implementation of the DocumentStoreProvider.

    This provider implements document operations using motor,
    an asynchronous driver for MongoDB.
    """

    _client: Optional[AsyncIOMotorClient] = PrivateAttr(default=None)
    _db: Optional[AsyncIOMotorDatabase] = PrivateAttr(default=None)

    def __init__(self, name: str = "mongodb", settings: Optional[MongoDBStoreSettings] = None):
        super().__init__(name=name, provider_type="document_store", settings=settings or MongoDBStoreSettings())

    def _client_args(self) -> Dict[str, Any]:
        """Build motor client arguments - only include non-None values."""
        client_args: Dict[str, Any] = {
            "serverSelectionTimeoutMS": self.settings.server_selection_timeout_ms,
            "connectTimeoutMS": self.settings.connect_timeout_ms,
            **self.settings.connect_args
        }
        if self.settings.connection_string:
            return client_args

        client_args["host"] = self.settings.host
        client_args["port"] = self.settings.port
        if self.settings.username is not None:
            client_args["username"] = self.settings.username
            client_args["authSource"] = self.settings.auth_source
        if self.settings.password is not None:
            client_args["password"] = self.settings.password
        return client_args

    def _target(self) -> str:
        """Describe the server for log lines without exposing credentials."""
        if self.settings.connection_string:
            return f"database '{self.settings.database}' via connection string"
        return f"{self.settings.host}:{self.settings.port}/{self.settings.database}"

    async def _initialize(self) -> None:
        """Connect to MongoDB and verify the connection with a ping."""
        try:
            if self.settings.connection_string:
                self._client = AsyncIOMotorClient(self.settings.connection_string, **self._client_args())
            else:
                self._client = AsyncIOMotorClient(**self._client_args())

            self._db = self._client[self.settings.database]
            await self._client.admin.command('ping')
            logger.info(f"Connected to MongoDB: {self._target()}")

        except Exception:
            self._client = None
            self._db = None
            raise

    async def _shutdown(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            try:
                self._client.close()
            finally:
                self._client = None
                self._db = None
                logger.info(f"Closed MongoDB connection: {self.settings.host}:{self.settings.port}")

    async def _get_collection(self, collection: str, operation: str) -> AsyncIOMotorCollection:
        if self._db is None:
            await self.initialize()

        if self._db is None:
            raise self._operation_error(
                message="MongoDB database not available after initialization",
                operation=operation,
                collection=collection,
                error_type="InitializationError",
            )
        return self._db[collection]

    async def _read_snapshot(self, coll: AsyncIOMotorCollection) -> List[StoredDocument]:
        """Read every document of a collection in natural order."""
        documents = await coll.find({}).to_list(length=None)
        snapshot = []
        for doc in documents:
            doc_id = doc.pop('_id')
            snapshot.append(StoredDocument(id=str(doc_id), fields=doc))
        return snapshot

    async def _pump_snapshots(self, coll: AsyncIOMotorCollection, collection: str, handler: SnapshotHandler) -> None:
        """Deliver the current snapshot, then a fresh one after every change event."""
        try:
            async with coll.watch() as stream:
                handler(await self._read_snapshot(coll))
                async for change in stream:
                    if self.settings.verbose:
                        logger.debug(f"Change on '{collection}': {change.get('operationType')}")
                    handler(await self._read_snapshot(coll))
        except asyncio.CancelledError:
            logger.debug(f"Snapshot subscription on '{collection}' cancelled")
            raise
        except Exception as e:
            logger.error(f"Snapshot subscription on '{collection}' failed: {e}")

    async def subscribe(self, collection: str, handler: SnapshotHandler) -> Subscription:
        """Start a change-stream backed subscription.

        The returned handle cancels the underlying task on the loop that
        owns it, so it can be released from any thread.
        """
        coll = await self._get_collection(collection, "subscribe")
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._pump_snapshots(coll, collection, handler), name=f"snapshots:{collection}")
        logger.info(f"Subscribed to MongoDB collection '{collection}'")
        return Subscription(collection, lambda: loop.call_soon_threadsafe(task.cancel))

    async def create_document(self, collection: str, fields: Dict[str, Any]) -> str:
        """Insert a document and return its id as a string.

        Raises:
            ProviderError: If insert fails
        """
        coll = await self._get_collection(collection, "create_document")
        try:
            result = await coll.insert_one(dict(fields))
            return str(result.inserted_id)
        except Exception as e:
            raise self._operation_error(
                message=f"Failed to insert document: {str(e)}",
                operation="create_document",
                collection=collection,
                error_type="DocumentInsertError",
                cause=e,
            ) from e

    async def update_document(self, collection: str, document_id: str, fields: Dict[str, Any]) -> None:
        """Merge fields into a document with $set.

        Raises:
            ProviderError: If update fails
        """
        coll = await self._get_collection(collection, "update_document")
        try:
            await coll.update_one({"_id": to_object_id(document_id)}, {"$set": dict(fields)})
        except Exception as e:
            raise self._operation_error(
                message=f"Failed to update document {document_id}: {str(e)}",
                operation="update_document",
                collection=collection,
                error_type="DocumentUpdateError",
                cause=e,
            ) from e

    async def delete_document(self, collection: str, document_id: str) -> None:
        """Delete a document by id.

        Raises:
            ProviderError: If delete fails
        """
        coll = await self._get_collection(collection, "delete_document")
        try:
            await coll.delete_one({"_id": to_object_id(document_id)})
        except Exception as e:
            raise self._operation_error(
                message=f"Failed to delete document {document_id}: {str(e)}",
                operation="delete_document",
                collection=collection,
                error_type="DocumentDeleteError",
                cause=e,
            ) from e


__all__ = ["MongoDBStoreProvider", "MongoDBStoreSettings", "to_object_id"]
