"""Tests for MongoDB document store provider."""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId

from todolist.core.errors.errors import ProviderError
from todolist.providers.db.mongodb.provider import (
    MongoDBStoreProvider,
    MongoDBStoreSettings,
    to_object_id,
)

OBJECT_ID = "507f1f77bcf86cd799439011"


class FakeChangeStream:
    """Async context manager and iterator standing in for collection.watch()."""

    def __init__(self, events=None, block=False):
        self.events = list(events or [])
        self.block = block
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True
        return False

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self.events:
            return self.events.pop(0)
        if self.block:
            await asyncio.Event().wait()
        raise StopAsyncIteration


class TestMongoDBStoreSettings:
    """Test MongoDB store settings."""

    def test_default_settings(self):
        settings = MongoDBStoreSettings()

        assert settings.host == "localhost"
        assert settings.port == 27017
        assert settings.database == "todolist"
        assert settings.username is None
        assert settings.password is None
        assert settings.connection_string is None
        assert settings.auth_source == "admin"
        assert settings.connect_timeout_ms == 20000
        assert settings.server_selection_timeout_ms == 20000
        assert settings.connect_args == {}

    def test_custom_settings(self):
        settings = MongoDBStoreSettings(
            host="custom-mongo",
            port=27018,
            database="test_db",
            username="test_user",
            password="test_pass",
            connection_string="mongodb://custom-mongo:27018/?replicaSet=rs0",
            connect_timeout_ms=5000,
        )

        assert settings.host == "custom-mongo"
        assert settings.port == 27018
        assert settings.connection_string == "mongodb://custom-mongo:27018/?replicaSet=rs0"
        assert settings.connect_timeout_ms == 5000


class TestToObjectId:
    """Test string id conversion."""

    def test_valid_object_id(self):
        assert to_object_id(OBJECT_ID) == ObjectId(OBJECT_ID)

    def test_other_ids_kept(self):
        assert to_object_id("task-1") == "task-1"


class TestMongoDBStoreProvider:
    """Test MongoDB store provider."""

    @pytest.fixture
    def settings(self):
        return MongoDBStoreSettings(
            host="localhost",
            port=27017,
            database="test_db",
            username="test_user",
            password="test_pass",
        )

    @pytest.fixture
    def provider(self, settings):
        return MongoDBStoreProvider(name="test_mongodb", settings=settings)

    @pytest.fixture
    def mock_collection(self):
        mock = MagicMock()
        mock.insert_one = AsyncMock()
        mock.update_one = AsyncMock()
        mock.delete_one = AsyncMock()
        return mock

    @pytest.fixture
    def mock_database(self, mock_collection):
        mock = MagicMock()
        mock.__getitem__.return_value = mock_collection
        return mock

    @pytest.fixture
    def mock_client(self, mock_database):
        mock = MagicMock()
        mock.admin.command = AsyncMock(return_value={"ok": 1})
        mock.close = MagicMock()
        mock.__getitem__.return_value = mock_database
        return mock

    @pytest.fixture
    def connected(self, provider, mock_client, mock_database):
        """Provider with mocked client state in place of a real connection."""
        provider._client = mock_client
        provider._db = mock_database
        provider._initialized = True
        return provider

    def _cursor(self, *batches):
        cursor = MagicMock()
        cursor.to_list = AsyncMock(side_effect=[[dict(doc) for doc in batch] for batch in batches])
        return cursor

    def test_init_default_settings(self):
        provider = MongoDBStoreProvider()

        assert provider.name == "mongodb"
        assert provider.provider_type == "document_store"
        assert isinstance(provider.settings, MongoDBStoreSettings)
        assert provider._client is None
        assert provider._db is None

    @pytest.mark.asyncio
    async def test_initialize_success(self, provider, mock_client, mock_database, caplog):
        caplog.set_level(logging.INFO, logger="todolist.providers.db.mongodb.provider")
        with patch("todolist.providers.db.mongodb.provider.AsyncIOMotorClient", return_value=mock_client) as client_cls:
            await provider.initialize()

        assert provider.initialized is True
        assert provider._client is mock_client
        assert provider._db is mock_database
        mock_client.admin.command.assert_awaited_once_with("ping")
        assert "Connected to MongoDB: localhost:27017/test_db" in caplog.text
        kwargs = client_cls.call_args.kwargs
        assert kwargs["host"] == "localhost"
        assert kwargs["port"] == 27017
        assert kwargs["username"] == "test_user"
        assert kwargs["password"] == "test_pass"
        assert kwargs["authSource"] == "admin"
        assert kwargs["serverSelectionTimeoutMS"] == 20000

    @pytest.mark.asyncio
    async def test_initialize_with_connection_string(self, mock_client, caplog):
        caplog.set_level(logging.INFO, logger="todolist.providers.db.mongodb.provider")
        provider = MongoDBStoreProvider(settings=MongoDBStoreSettings(
            connection_string="mongodb://db:27017/?replicaSet=rs0"
        ))

        with patch("todolist.providers.db.mongodb.provider.AsyncIOMotorClient", return_value=mock_client) as client_cls:
            await provider.initialize()

        assert client_cls.call_args.args == ("mongodb://db:27017/?replicaSet=rs0",)
        assert "host" not in client_cls.call_args.kwargs
        assert "via connection string" in caplog.text
        assert "localhost:27017" not in caplog.text

    @pytest.mark.asyncio
    async def test_initialize_connection_error(self, provider, mock_client):
        mock_client.admin.command.side_effect = Exception("Connection failed")

        with patch("todolist.providers.db.mongodb.provider.AsyncIOMotorClient", return_value=mock_client):
            with pytest.raises(ProviderError) as exc_info:
                await provider.initialize()

        assert "Connection failed" in str(exc_info.value)
        assert provider.initialized is False
        assert provider._client is None

    @pytest.mark.asyncio
    async def test_shutdown_success(self, connected, mock_client):
        await connected.shutdown()

        mock_client.close.assert_called_once()
        assert connected._client is None
        assert connected._db is None
        assert connected.initialized is False

    @pytest.mark.asyncio
    async def test_create_document(self, connected, mock_collection):
        mock_collection.insert_one.return_value = MagicMock(inserted_id=ObjectId(OBJECT_ID))
        fields = {"text": "Buy milk", "description": "", "done": False}

        document_id = await connected.create_document("tasks", fields)

        assert document_id == OBJECT_ID
        inserted = mock_collection.insert_one.await_args.args[0]
        assert inserted == fields
        assert inserted is not fields

    @pytest.mark.asyncio
    async def test_create_document_error(self, connected, mock_collection):
        mock_collection.insert_one.side_effect = Exception("write failed")

        with pytest.raises(ProviderError) as exc_info:
            await connected.create_document("tasks", {"text": "x"})

        assert exc_info.value.provider_context.operation == "create_document"
        assert exc_info.value.provider_context.collection == "tasks"
        assert str(exc_info.value.cause) == "write failed"

    @pytest.mark.asyncio
    async def test_update_document_uses_set(self, connected, mock_collection):
        await connected.update_document("tasks", OBJECT_ID, {"done": True})

        mock_collection.update_one.assert_awaited_once_with(
            {"_id": ObjectId(OBJECT_ID)}, {"$set": {"done": True}}
        )

    @pytest.mark.asyncio
    async def test_update_document_error(self, connected, mock_collection):
        mock_collection.update_one.side_effect = Exception("not primary")

        with pytest.raises(ProviderError) as exc_info:
            await connected.update_document("tasks", "task-1", {"text": "t"})

        assert exc_info.value.context.data.error_type == "DocumentUpdateError"

    @pytest.mark.asyncio
    async def test_delete_document(self, connected, mock_collection):
        await connected.delete_document("tasks", "task-1")

        mock_collection.delete_one.assert_awaited_once_with({"_id": "task-1"})

    @pytest.mark.asyncio
    async def test_delete_document_error(self, connected, mock_collection):
        mock_collection.delete_one.side_effect = Exception("timeout")

        with pytest.raises(ProviderError) as exc_info:
            await connected.delete_document("tasks", OBJECT_ID)

        assert exc_info.value.provider_context.operation == "delete_document"

    @pytest.mark.asyncio
    async def test_subscribe_delivers_snapshot_per_change(self, connected, mock_collection):
        oid = ObjectId(OBJECT_ID)
        mock_collection.find.return_value = self._cursor(
            [],
            [{"_id": oid, "text": "Buy milk", "description": "", "done": False}],
            [{"_id": oid, "text": "Buy milk", "description": "", "done": True}],
        )
        stream = FakeChangeStream(events=[{"operationType": "insert"}, {"operationType": "update"}])
        mock_collection.watch.return_value = stream
        snapshots = []
        delivered = asyncio.Event()

        def handler(documents):
            snapshots.append(documents)
            if len(snapshots) == 3:
                delivered.set()

        await connected.subscribe("tasks", handler)
        await asyncio.wait_for(delivered.wait(), timeout=1)

        assert snapshots[0] == []
        assert snapshots[1][0].id == OBJECT_ID
        assert snapshots[1][0].fields == {"text": "Buy milk", "description": "", "done": False}
        assert snapshots[2][0].fields["done"] is True
        mock_collection.find.assert_called_with({})

    @pytest.mark.asyncio
    async def test_unsubscribe_cancels_stream(self, connected, mock_collection):
        mock_collection.find.return_value = self._cursor([])
        stream = FakeChangeStream(block=True)
        mock_collection.watch.return_value = stream
        snapshots = []

        subscription = await connected.subscribe("tasks", snapshots.append)
        for _ in range(5):
            await asyncio.sleep(0)
        subscription.unsubscribe()
        for _ in range(5):
            await asyncio.sleep(0)

        assert snapshots == [[]]
        assert stream.closed is True
        assert not subscription.active

    @pytest.mark.asyncio
    async def test_stream_failure_is_logged(self, connected, mock_collection, caplog):
        mock_collection.find.return_value = self._cursor([])
        mock_collection.watch.side_effect = Exception("change streams require a replica set")

        await connected.subscribe("tasks", lambda documents: None)
        for _ in range(5):
            await asyncio.sleep(0)

        assert "change streams require a replica set" in caplog.text
