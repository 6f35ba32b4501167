"""Tests for the in-memory document store provider."""

import pytest
import pytest_asyncio

from todolist.core.errors.errors import ProviderError
from todolist.providers.db.base import StoredDocument
from todolist.providers.db.memory.provider import MemoryStoreProvider, MemoryStoreSettings


class TestMemoryStoreSettings:
    """Test in-memory store settings."""

    def test_default_settings(self):
        settings = MemoryStoreSettings()

        assert settings.seed_documents == {}
        assert settings.verbose is False


class TestMemoryStoreProvider:
    """Test MemoryStoreProvider."""

    @pytest_asyncio.fixture
    async def store(self):
        store = MemoryStoreProvider()
        await store.initialize()
        yield store
        await store.shutdown()

    @pytest.fixture
    def snapshots(self):
        return []

    def test_init_default_settings(self):
        store = MemoryStoreProvider()

        assert store.name == "memory"
        assert store.provider_type == "document_store"
        assert isinstance(store.settings, MemoryStoreSettings)

    @pytest.mark.asyncio
    async def test_seed_documents(self):
        store = MemoryStoreProvider(settings=MemoryStoreSettings(
            seed_documents={"tasks": [{"text": "a"}, {"text": "b"}]}
        ))
        await store.initialize()
        snapshots = []

        await store.subscribe("tasks", snapshots.append)

        assert [doc.fields["text"] for doc in snapshots[0]] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_subscribe_delivers_current_snapshot(self, store, snapshots):
        await store.create_document("tasks", {"text": "existing"})

        subscription = await store.subscribe("tasks", snapshots.append)

        assert subscription.active
        assert len(snapshots) == 1
        assert isinstance(snapshots[0][0], StoredDocument)
        assert snapshots[0][0].fields == {"text": "existing"}

    @pytest.mark.asyncio
    async def test_subscribe_empty_collection(self, store, snapshots):
        await store.subscribe("tasks", snapshots.append)

        assert snapshots == [[]]

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_notifies(self, store, snapshots):
        await store.subscribe("tasks", snapshots.append)

        first = await store.create_document("tasks", {"text": "one"})
        second = await store.create_document("tasks", {"text": "two"})

        assert first != second
        assert len(first) == 32
        assert [doc.id for doc in snapshots[-1]] == [first, second]
        assert len(snapshots) == 3

    @pytest.mark.asyncio
    async def test_create_copies_fields(self, store):
        fields = {"text": "one"}
        task_id = await store.create_document("tasks", fields)
        fields["text"] = "changed"

        assert store.get_document("tasks", task_id) == {"text": "one"}

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, store, snapshots):
        task_id = await store.create_document("tasks", {"text": "t", "description": "d", "done": False})
        await store.subscribe("tasks", snapshots.append)

        await store.update_document("tasks", task_id, {"done": True})

        assert store.get_document("tasks", task_id) == {"text": "t", "description": "d", "done": True}
        assert snapshots[-1][0].fields["done"] is True

    @pytest.mark.asyncio
    async def test_update_missing_document(self, store):
        with pytest.raises(ProviderError) as exc_info:
            await store.update_document("tasks", "missing", {"done": True})

        assert exc_info.value.context.data.error_type == "DocumentNotFoundError"
        assert exc_info.value.provider_context.collection == "tasks"

    @pytest.mark.asyncio
    async def test_delete_removes_document(self, store, snapshots):
        keep = await store.create_document("tasks", {"text": "keep"})
        drop = await store.create_document("tasks", {"text": "drop"})
        await store.subscribe("tasks", snapshots.append)

        await store.delete_document("tasks", drop)

        assert [doc.id for doc in snapshots[-1]] == [keep]
        assert store.get_document("tasks", drop) is None

    @pytest.mark.asyncio
    async def test_collections_are_separate(self, store, snapshots):
        await store.subscribe("tasks", snapshots.append)

        await store.create_document("other", {"text": "elsewhere"})

        assert snapshots == [[]]

    @pytest.mark.asyncio
    async def test_unsubscribe_stops_delivery(self, store, snapshots):
        subscription = await store.subscribe("tasks", snapshots.append)

        subscription.unsubscribe()
        subscription.unsubscribe()
        await store.create_document("tasks", {"text": "unseen"})

        assert not subscription.active
        assert snapshots == [[]]

    @pytest.mark.asyncio
    async def test_fail_next_fails_once(self, store, snapshots):
        await store.subscribe("tasks", snapshots.append)
        store.fail_next("create_document")

        with pytest.raises(ProviderError) as exc_info:
            await store.create_document("tasks", {"text": "lost"})
        task_id = await store.create_document("tasks", {"text": "kept"})

        assert isinstance(exc_info.value.cause, RuntimeError)
        assert exc_info.value.provider_context.operation == "create_document"
        assert [doc.id for doc in snapshots[-1]] == [task_id]
        assert len(snapshots) == 2

    @pytest.mark.asyncio
    async def test_fail_next_custom_error(self, store):
        store.fail_next("subscribe", ConnectionError("offline"))

        with pytest.raises(ProviderError) as exc_info:
            await store.subscribe("tasks", lambda docs: None)

        assert isinstance(exc_info.value.cause, ConnectionError)
