"""
Service Factory for dependency injection and service lifecycle management.

Owns the document store provider selected by the settings and the task
service built on top of it.
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from todolist.core.models import MutableStrictBaseModel
from todolist.core.settings.settings import TodoSettings, get_settings
from todolist.providers.core.factory import create_store_provider
from todolist.providers.db.base import DocumentStoreProvider

from .task_service import TaskService

logger = logging.getLogger(__name__)


class ServiceFactoryState(MutableStrictBaseModel):
    """Service factory state with strict validation but mutable for runtime updates."""

    store_initialized: bool = False


class ServiceFactory(QObject):
    """
    Service factory with clean dependency injection.

    Single source of truth for service access.
    """

    # Signals for service lifecycle events
    service_created = Signal(str, object)

    def __init__(self, settings: Optional[TodoSettings] = None):
        super().__init__()
        self.settings = settings or get_settings()
        self.state = ServiceFactoryState()
        self._store: Optional[DocumentStoreProvider] = None
        self._task_service: Optional[TaskService] = None

    def get_store(self) -> DocumentStoreProvider:
        """Get the document store provider, creating it on first use.

        Raises:
            ConfigurationError: If the configured backend is unknown
        """
        if self._store is None:
            self._store = create_store_provider(self.settings)
            self.service_created.emit("document_store", self._store)
        return self._store

    def get_task_service(self) -> TaskService:
        """Get the task service bound to the configured collection."""
        if self._task_service is None:
            self._task_service = TaskService(self.get_store(), self.settings.collection_name)
            self.service_created.emit("task_service", self._task_service)
        return self._task_service

    async def initialize(self) -> None:
        """Connect the document store."""
        try:
            await self.get_store().initialize()
            self.state.store_initialized = True
            logger.info("Service factory initialized successfully")
        except Exception as e:
            logger.error(f"Service factory initialization failed: {e}")
            raise

    async def shutdown(self) -> None:
        """Release the document store connection."""
        if self._store is not None:
            await self._store.shutdown()
        self.state.store_initialized = False
        logger.info("Service factory shut down")
