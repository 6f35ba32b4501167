"""Tests for the provider registry and the @provider decorator."""

from typing import Any

import pytest

from todolist.providers.core.base import Provider, ProviderSettings
from todolist.providers.core.decorators import provider
from todolist.providers.core.registry import ProviderRegistry, provider_registry


class EchoSettings(ProviderSettings):
    """Settings for the echo provider."""
    prefix: str = ">"


@provider(name="echo", provider_type="test_registry", settings_class=EchoSettings)
class EchoProvider(Provider[EchoSettings]):
    """Provider registered for these tests only."""

    def __init__(self, name: str = "echo", settings: Any = None):
        super().__init__(name=name, provider_type="test_registry", settings=settings)

    async def _initialize(self):
        pass


class TestProviderDecorator:
    """Test @provider registration."""

    def test_registers_factory(self):
        assert provider_registry.contains("test_registry", "echo")
        assert provider_registry.get_settings_class("test_registry", "echo") is EchoSettings
        assert EchoProvider.__provider_name__ == "echo"
        assert EchoProvider.__provider_type__ == "test_registry"

    def test_requires_settings_class(self):
        with pytest.raises(TypeError):
            provider(name="nosettings", provider_type="test_registry")

    def test_rejects_non_provider_class(self):
        with pytest.raises(TypeError):
            @provider(name="plain", provider_type="test_registry", settings_class=EchoSettings)
            class Plain:
                pass

    def test_factory_parses_settings(self):
        created = provider_registry.create("test_registry", "echo", {"prefix": "#"})

        assert isinstance(created, EchoProvider)
        assert created.settings.prefix == "#"

    def test_rejects_unknown_keywords(self):
        with pytest.raises(TypeError):
            provider(name="tagged", provider_type="test_registry", settings_class=EchoSettings, category="db")

    def test_factory_rejects_bad_settings(self):
        with pytest.raises(ValueError):
            provider_registry.create("test_registry", "echo", {"unknown": 1})


class TestProviderRegistry:
    """Test ProviderRegistry."""

    def test_create_returns_new_instances(self):
        first = provider_registry.create("test_registry", "echo")
        second = provider_registry.create("test_registry", "echo")

        assert first is not second
        assert first.initialized is False

    def test_create_unknown_raises_key_error(self):
        registry = ProviderRegistry()

        with pytest.raises(KeyError):
            registry.create("document_store", "missing")

    def test_list_providers_by_type(self):
        registry = ProviderRegistry()
        registry.register_factory("document_store", "b", lambda settings: None)
        registry.register_factory("document_store", "a", lambda settings: None)
        registry.register_factory("other", "c", lambda settings: None)

        assert registry.list_providers("document_store") == ["a", "b"]
        assert registry.get_settings_class("document_store", "a") is None

    def test_document_stores_registered(self):
        import todolist.providers.core.factory  # noqa: F401

        assert provider_registry.list_providers("document_store") == ["memory", "mongodb"]
