"""Provider registry.

Implementations register a factory per (provider_type, name) through the
@provider decorator; the application asks the registry for a fresh provider
instance by name when it is assembled.
"""

import logging
import threading
from collections.abc import Callable
from typing import Any

from .base import Provider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Registry of provider factories keyed by (provider_type, name)."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._factories: dict[tuple[str, str], Callable[[dict[str, Any] | None], Provider]] = {}
        self._settings_classes: dict[tuple[str, str], type] = {}

    def register_factory(
        self,
        provider_type: str,
        name: str,
        factory: Callable[[dict[str, Any] | None], Provider],
        settings_class: type | None = None,
    ) -> None:
        """Register a factory for creating providers.

        Args:
            provider_type: Type of provider (e.g., document_store)
            name: Unique name for this provider
            factory: Factory function that creates the provider
            settings_class: Pydantic model class for provider settings
        """
        key = (provider_type, name)

        with self._lock:
            self._factories[key] = factory
            if settings_class is not None:
                self._settings_classes[key] = settings_class

        logger.debug(f"Registered provider factory: {name} (type: {provider_type})")

    def get_settings_class(self, provider_type: str, name: str) -> type | None:
        """Get the settings class for a registered provider, or None."""
        with self._lock:
            return self._settings_classes.get((provider_type, name))

    def contains(self, provider_type: str, name: str) -> bool:
        """Check whether a factory is registered under the given key."""
        with self._lock:
            return (provider_type, name) in self._factories

    def list_providers(self, provider_type: str) -> list[str]:
        """List registered provider names of one type, sorted."""
        with self._lock:
            return sorted(name for (ptype, name) in self._factories if ptype == provider_type)

    def create(
        self, provider_type: str, name: str, settings: dict[str, Any] | None = None
    ) -> Provider:
        """Create a new, uninitialized provider instance.

        Args:
            provider_type: Type of provider
            name: Registered provider name
            settings: Optional raw settings passed to the settings class

        Raises:
            KeyError: If no factory is registered under the key
        """
        key = (provider_type, name)
        with self._lock:
            if key not in self._factories:
                raise KeyError(
                    f"Provider '{name}' of type '{provider_type}' not found. "
                    f"Available: {self.list_providers(provider_type)}"
                )
            factory = self._factories[key]

        provider = factory(settings)
        logger.info(f"Created provider: {name} (type: {provider_type})")
        return provider


provider_registry = ProviderRegistry()
