"""Factory for the configured document store provider.

Maps application settings onto the settings of the selected backend and
creates an uninitialized provider through the registry.
"""

import logging
from typing import Any, Dict

from todolist.core.errors.errors import ConfigurationError, ErrorContext
from todolist.core.errors.models import ConfigurationErrorContext
from todolist.core.settings.settings import TodoSettings

# Provider modules register themselves on import
from todolist.providers.db.memory import provider as _memory_provider  # noqa: F401
from todolist.providers.db.mongodb import provider as _mongodb_provider  # noqa: F401

from .registry import provider_registry

logger = logging.getLogger(__name__)

DOCUMENT_STORE = "document_store"


def _mongodb_settings(settings: TodoSettings) -> Dict[str, Any]:
    return {
        "host": settings.mongodb_host,
        "port": settings.mongodb_port,
        "database": settings.mongodb_database,
        "username": settings.mongodb_username,
        "password": settings.mongodb_password,
        "connection_string": settings.mongodb_connection_string,
    }


def _memory_settings(settings: TodoSettings) -> Dict[str, Any]:
    return {}


_SETTINGS_MAPPERS = {
    "mongodb": _mongodb_settings,
    "memory": _memory_settings,
}


def create_store_provider(settings: TodoSettings):
    """Create the document store provider selected by settings.store_backend.

    Raises:
        ConfigurationError: If the backend is not a registered document store
    """
    backend = settings.store_backend
    mapper = _SETTINGS_MAPPERS.get(backend)
    if mapper is None or not provider_registry.contains(DOCUMENT_STORE, backend):
        available = provider_registry.list_providers(DOCUMENT_STORE)
        raise ConfigurationError(
            message=f"Unknown document store backend '{backend}'. Available: {available}",
            context=ErrorContext.create(
                component="provider_factory",
                error_type="UnknownBackendError",
                error_location="create_store_provider",
                operation="create_store_provider",
            ),
            config_context=ConfigurationErrorContext(
                config_key="store_backend",
                config_section="document_store",
                expected_type=" | ".join(available),
                actual_value=backend,
            ),
        )

    logger.info(f"Creating document store provider: {backend}")
    provider_settings = mapper(settings)
    provider_settings["verbose"] = settings.log_level == "DEBUG"
    return provider_registry.create(DOCUMENT_STORE, backend, provider_settings)
