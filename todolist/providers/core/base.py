"""Provider base implementation with configuration and lifecycle management.

This module provides the foundation for all providers: settings models,
idempotent initialization and graceful shutdown.
"""

import asyncio
import logging
from typing import Any, Optional, TypeVar, cast

from pydantic import Field, PrivateAttr

from todolist.core.errors.errors import ErrorContext, ProviderError
from todolist.core.errors.models import ProviderErrorContext
from todolist.core.models import StrictBaseModel

from .provider_base import ProviderBase

logger = logging.getLogger(__name__)


class ProviderSettings(StrictBaseModel):
    """Base settings for providers.

    Contains only fields that apply to ALL provider types.
    """

    verbose: bool = Field(default=False, description="Log every store call at debug level")


T = TypeVar('T', bound=ProviderSettings)


class Provider(ProviderBase[T]):
    """Base class for all providers.

    This class provides:
    1. Consistent initialization and cleanup pattern
    2. Configuration via settings models
    3. Failures wrapped in ProviderError
    """

    _initialized: bool = PrivateAttr(default=False)
    _setup_lock: asyncio.Lock = PrivateAttr(default_factory=asyncio.Lock)

    def __init__(
        self,
        name: str,
        provider_type: str,
        settings: Optional[Any] = None,
        **kwargs: Any
    ):
        if settings is None:
            settings = self._default_settings()

        super().__init__(name=name, provider_type=provider_type, settings=cast(T, settings), **kwargs)
        logger.debug(f"Created provider: {name} ({self.provider_type}) with settings: {self.settings}")

    @property
    def initialized(self) -> bool:
        """Check if provider is initialized."""
        return self._initialized

    @classmethod
    def _default_settings(cls) -> ProviderSettings:
        """Create default settings instance from the class registered by @provider.

        Raises:
            TypeError: If the provider class does not declare a settings class
        """
        settings_class = getattr(cls, "settings_class", None)
        if settings_class is None:
            raise TypeError(
                f"Provider class {cls.__name__} must specify settings type.\n"
                f"Use @provider(settings_class=YourSettings) or pass settings explicitly."
            )
        settings_instance = settings_class()
        if not isinstance(settings_instance, ProviderSettings):
            raise TypeError(f"Settings class must return ProviderSettings instance, got {type(settings_instance)}")
        return settings_instance

    async def initialize(self) -> None:
        """Initialize the provider.

        Only the first call does any work; concurrent callers wait on the
        setup lock.

        Raises:
            ProviderError: If initialization fails
        """
        if self._initialized:
            return

        async with self._setup_lock:
            if self._initialized:
                return

            try:
                await self._initialize()
                self._initialized = True
                logger.info(f"Provider '{self.name}' initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize provider '{self.name}': {str(e)}")
                raise ProviderError(
                    message=f"Failed to initialize provider: {str(e)}",
                    context=ErrorContext.create(
                        component=self.name,
                        error_type="InitializationError",
                        error_location="initialize",
                        operation="provider_initialization"
                    ),
                    provider_context=ProviderErrorContext(
                        provider_name=self.name,
                        provider_type=self.provider_type,
                        operation="initialize"
                    ),
                    cause=e
                ) from e

    async def shutdown(self) -> None:
        """Close provider resources.

        Shutdown errors are logged and not re-raised.
        """
        if not self._initialized:
            return

        try:
            await self._shutdown()
            self._initialized = False
            logger.info(f"Provider '{self.name}' shut down successfully")
        except Exception as e:
            logger.error(f"Error shutting down provider '{self.name}': {str(e)}")

    async def _initialize(self) -> None:
        """Concrete initialization logic implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement _initialize().")

    async def _shutdown(self) -> None:
        """Concrete shutdown logic implemented by subclasses.

        Default implementation does nothing.
        """
        pass
