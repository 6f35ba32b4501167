"""Document store provider package.

This package contains providers for document stores, offering a common
interface for live collection snapshots and single-document writes.
"""

from .base import (
    DocumentStoreProvider,
    DocumentStoreSettings,
    SnapshotHandler,
    StoredDocument,
    Subscription,
)
from .memory.provider import MemoryStoreProvider, MemoryStoreSettings
from .mongodb.provider import MongoDBStoreProvider, MongoDBStoreSettings

__all__ = [
    "DocumentStoreProvider",
    "DocumentStoreSettings",
    "SnapshotHandler",
    "StoredDocument",
    "Subscription",
    "MemoryStoreProvider",
    "MemoryStoreSettings",
    "MongoDBStoreProvider",
    "MongoDBStoreSettings",
]
