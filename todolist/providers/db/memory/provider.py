"""In-memory implementation of the DocumentStoreProvider.

This module keeps collections in process-local, insertion-ordered dictionaries. It behaves like
the remote store as far as the application can tell: identifiers are
assigned by the store, subscribers receive the current snapshot immediately
and a complete snapshot after every successful mutation.
"""

import logging
import threading
import uuid
from typing import Any, Dict, List, Optional

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


class MemoryStoreSettings(DocumentStoreSettings):
    """In-memory store settings.

    No host/port/connection needed - purely in-process.
    """

    seed_documents: Dict[str, List[Dict[str, Any]]] = Field(
        default_factory=dict, description="Documents inserted per collection at initialization"
    )


@provider(provider_type="document_store", name="memory", settings_class=MemoryStoreSettings)
class MemoryStoreProvider(DocumentStoreProvider[MemoryStoreSettings]):
    """In-memory document store.

    Handlers are called synchronously on the thread performing the mutation,
    after the store lock has been released.
    """

    _lock: Any = PrivateAttr(default_factory=threading.RLock)
    _collections: Dict[str, Dict[str, Dict[str, Any]]] = PrivateAttr(default_factory=dict)
    _handlers: Dict[str, List[SnapshotHandler]] = PrivateAttr(default_factory=dict)
    _pending_failures: Dict[str, List[Exception]] = PrivateAttr(default_factory=dict)

    def __init__(self, name: str = "memory", settings: Optional[MemoryStoreSettings] = None):
        super().__init__(name=name, provider_type="document_store", settings=settings or MemoryStoreSettings())

    async def _initialize(self) -> None:
        with self._lock:
            for collection, documents in self.settings.seed_documents.items():
                docs = self._collections.setdefault(collection, {})
                for fields in documents:
                    docs[uuid.uuid4().hex] = dict(fields)
        logger.info(f"In-memory store '{self.name}' ready with {len(self._collections)} seeded collection(s)")

    async def _shutdown(self) -> None:
        with self._lock:
            self._handlers.clear()

    def fail_next(self, operation: str, error: Optional[Exception] = None) -> None:
        """Make the next call of the named operation fail.

        Args:
            operation: One of subscribe, create_document, update_document, delete_document
            error: Cause to attach, a RuntimeError by default
        """
        with self._lock:
            self._pending_failures.setdefault(operation, []).append(
                error or RuntimeError(f"Injected failure for {operation}")
            )

    def _raise_pending_failure(self, operation: str, collection: str) -> None:
        with self._lock:
            pending = self._pending_failures.get(operation)
            cause = pending.pop(0) if pending else None
        if cause is not None:
            raise self._operation_error(
                message=f"Failed to execute in-memory operation '{operation}': {cause}",
                operation=operation,
                collection=collection,
                cause=cause,
            )

    def _snapshot(self, collection: str) -> List[StoredDocument]:
        with self._lock:
            docs = self._collections.get(collection, {})
            return [StoredDocument(id=doc_id, fields=dict(fields)) for doc_id, fields in docs.items()]

    def _notify(self, collection: str) -> None:
        with self._lock:
            handlers = list(self._handlers.get(collection, []))
        if not handlers:
            return
        snapshot = self._snapshot(collection)
        if self.settings.verbose:
            logger.debug(f"Delivering snapshot of {len(snapshot)} document(s) from '{collection}' to {len(handlers)} subscriber(s)")
        for handler in handlers:
            handler(snapshot)

    def _remove_handler(self, collection: str, handler: SnapshotHandler) -> None:
        with self._lock:
            handlers = self._handlers.get(collection, [])
            if handler in handlers:
                handlers.remove(handler)

    async def subscribe(self, collection: str, handler: SnapshotHandler) -> Subscription:
        self._raise_pending_failure("subscribe", collection)
        with self._lock:
            self._handlers.setdefault(collection, []).append(handler)
        handler(self._snapshot(collection))
        return Subscription(collection, lambda: self._remove_handler(collection, handler))

    async def create_document(self, collection: str, fields: Dict[str, Any]) -> str:
        self._raise_pending_failure("create_document", collection)
        document_id = uuid.uuid4().hex
        with self._lock:
            self._collections.setdefault(collection, {})[document_id] = dict(fields)
        self._notify(collection)
        return document_id

    async def update_document(self, collection: str, document_id: str, fields: Dict[str, Any]) -> None:
        self._raise_pending_failure("update_document", collection)
        with self._lock:
            docs = self._collections.get(collection)
            if docs is None or document_id not in docs:
                raise self._operation_error(
                    message=f"No document to update: {document_id}",
                    operation="update_document",
                    collection=collection,
                    error_type="DocumentNotFoundError",
                )
            docs[document_id].update(fields)
        self._notify(collection)

    async def delete_document(self, collection: str, document_id: str) -> None:
        self._raise_pending_failure("delete_document", collection)
        with self._lock:
            docs = self._collections.get(collection)
            if docs is not None:
                docs.pop(document_id, None)
        self._notify(collection)

    def get_document(self, collection: str, document_id: str) -> Optional[Dict[str, Any]]:
        """Return a copy of a stored document's fields, or None."""
        with self._lock:
            fields = self._collections.get(collection, {}).get(document_id)
            return dict(fields) if fields is not None else None


__all__ = ["MemoryStoreProvider", "MemoryStoreSettings"]
