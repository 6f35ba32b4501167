"""Core provider infrastructure: base classes, registry and decorators."""

from .base import Provider, ProviderSettings
from .decorators import provider
from .provider_base import ProviderBase
from .registry import ProviderRegistry, provider_registry

__all__ = [
    "Provider",
    "ProviderBase",
    "ProviderRegistry",
    "ProviderSettings",
    "provider",
    "provider_registry",
]
