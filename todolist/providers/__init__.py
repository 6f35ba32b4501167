"""Provider package for interacting with the document store.

- Core (core): provider base classes, registry and factory
- Document store providers (db): MongoDB and in-memory backends
"""

from .core.base import Provider, ProviderSettings
from .core.registry import provider_registry

__all__ = [
    "Provider",
    "ProviderSettings",
    "provider_registry",
]
