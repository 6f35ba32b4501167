"""Document store provider base class and related types.

A document store exposes named collections of schemaless documents. The
application needs four things from it: a push-based subscription that
delivers full snapshots of a collection, and create, partial update and
delete of single documents by identifier.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import Field

from todolist.core.errors.errors import ErrorContext, ProviderError
from todolist.core.errors.models import ProviderErrorContext
from todolist.core.models import StrictBaseModel
from todolist.providers.core.base import Provider, ProviderSettings

logger = logging.getLogger(__name__)


class StoredDocument(StrictBaseModel):
    """One document as delivered in a snapshot."""

    id: str = Field(..., description="Store-assigned document identifier")
    fields: Dict[str, Any] = Field(default_factory=dict, description="Document fields without the identifier")


SnapshotHandler = Callable[[List[StoredDocument]], None]


class Subscription:
    """Handle returned by DocumentStoreProvider.subscribe().

    Calling unsubscribe() stops snapshot delivery. It may be called from
    any thread and more than once.
    """

    def __init__(self, collection: str, on_unsubscribe: Callable[[], None]):
        self.collection = collection
        self._on_unsubscribe: Optional[Callable[[], None]] = on_unsubscribe
        self._lock = threading.Lock()

    @property
    def active(self) -> bool:
        return self._on_unsubscribe is not None

    def unsubscribe(self) -> None:
        with self._lock:
            callback, self._on_unsubscribe = self._on_unsubscribe, None
        if callback is not None:
            callback()
            logger.debug(f"Unsubscribed from collection '{self.collection}'")


class DocumentStoreSettings(ProviderSettings):
    """Base settings for document store providers."""


SettingsT = TypeVar("SettingsT", bound=DocumentStoreSettings)


class DocumentStoreProvider(Provider[SettingsT], Generic[SettingsT]):
    """Base class for document store providers.

    Implementations must deliver the current snapshot as soon as a
    subscription starts and a fresh complete snapshot after every change.
    """

    async def subscribe(self, collection: str, handler: SnapshotHandler) -> Subscription:
        """Start a live subscription to a collection.

        Args:
            collection: Collection name
            handler: Called with the full list of documents on every change

        Returns:
            Subscription handle

        Raises:
            ProviderError: If the subscription cannot be established
        """
        raise NotImplementedError("Subclasses must implement subscribe()")

    async def create_document(self, collection: str, fields: Dict[str, Any]) -> str:
        """Create a document and return its store-assigned identifier.

        Raises:
            ProviderError: If the insert fails
        """
        raise NotImplementedError("Subclasses must implement create_document()")

    async def update_document(self, collection: str, document_id: str, fields: Dict[str, Any]) -> None:
        """Merge the given fields into an existing document.

        Raises:
            ProviderError: If the update fails
        """
        raise NotImplementedError("Subclasses must implement update_document()")

    async def delete_document(self, collection: str, document_id: str) -> None:
        """Delete a document by identifier.

        Raises:
            ProviderError: If the delete fails
        """
        raise NotImplementedError("Subclasses must implement delete_document()")

    def _operation_error(
        self,
        message: str,
        operation: str,
        collection: str = "",
        error_type: str = "OperationExecutionError",
        cause: Optional[Exception] = None,
    ) -> ProviderError:
        """Build a ProviderError for a failed store operation."""
        return ProviderError(
            message=message,
            context=ErrorContext.create(
                component=self.name,
                error_type=error_type,
                error_location=f"{self.__class__.__name__}.{operation}",
                operation=operation,
            ),
            provider_context=ProviderErrorContext(
                provider_name=self.name,
                provider_type=self.provider_type,
                operation=operation,
                collection=collection,
            ),
            cause=cause,
        )
