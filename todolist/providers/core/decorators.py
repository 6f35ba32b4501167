from collections.abc import Callable
from typing import Any

from .provider_base import ProviderBase
from .registry import provider_registry


def provider(
    name: str, provider_type: str = "document_store", *, settings_class: type | None = None
) -> Callable[[type], type]:
    """
    Register a class as a provider factory.
    Only ProviderBase subclasses can be registered, and a settings_class
    (Pydantic v2 class) is required. Fails fast if either is missing.
    """
    if settings_class is None:
        raise TypeError(
            f"Provider '{name}' must supply a 'settings_class' argument (Pydantic v2 class)"
        )

    def decorator(cls: type) -> type:
        if not isinstance(cls, type) or not issubclass(cls, ProviderBase):
            raise TypeError(
                f"Provider '{name}' must be a ProviderBase subclass (pydantic v2), got {type(cls)}"
            )

        def factory(runtime_settings_dict: dict[str, Any] | None = None) -> Any:
            if runtime_settings_dict is not None:
                try:
                    settings = settings_class(**runtime_settings_dict)
                except Exception as e:
                    raise ValueError(
                        f"Error parsing runtime_settings for '{name}' with {settings_class.__name__}: {e}. Input: {runtime_settings_dict}"
                    ) from e
            else:
                settings = settings_class()

            return cls(name=name, settings=settings)

        provider_registry.register_factory(
            name=name, factory=factory, provider_type=provider_type, settings_class=settings_class
        )
        cls.__provider_name__ = name  # type: ignore[attr-defined]
        cls.__provider_type__ = provider_type  # type: ignore[attr-defined]
        cls.settings_class = settings_class  # type: ignore[attr-defined]

        return cls

    return decorator
