"""Base error classes carrying structured context.

The only runtime failure the application distinguishes is a remote store
operation that did not succeed (ProviderError). ConfigurationError is only
raised while the application is being assembled.
"""

import logging
import traceback
from datetime import datetime
from typing import Any

from .models import ConfigurationErrorContext, ErrorContextData, ProviderErrorContext

logger = logging.getLogger(__name__)


class ErrorContext:
    """Structured context information for errors."""

    def __init__(self, context_data: ErrorContextData):
        self._data = context_data

    @classmethod
    def create(
        cls, component: str, error_type: str, error_location: str, operation: str
    ) -> "ErrorContext":
        """Create a new error context.

        Args:
            component: Component raising the error
            error_type: Type of error
            error_location: Location in code
            operation: Operation being performed

        Returns:
            New ErrorContext instance
        """
        context_data = ErrorContextData(
            component=component,
            error_type=error_type,
            error_location=error_location,
            operation=operation,
        )
        return cls(context_data)

    @property
    def data(self) -> ErrorContextData:
        """Get the context data."""
        return self._data

    @property
    def timestamp(self) -> datetime:
        """Get the context creation timestamp."""
        return self._data.timestamp

    def __str__(self) -> str:
        return f"ErrorContext({self._data.model_dump()})"


class BaseError(Exception):
    """Base class for all todolist errors.

    Keeps the message, the structured context and the optional cause so
    the single log line written at the call site is self-explanatory.
    """

    def __init__(self, message: str, context: ErrorContext, cause: Exception | None = None):
        self.message = message
        self.context = context
        self.cause = cause
        self.timestamp = datetime.now()
        self.traceback = traceback.format_exc()
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "context": self.context.data.model_dump(),
            "cause": str(self.cause) if self.cause else None,
            "traceback": self.traceback,
        }

    def __str__(self) -> str:
        cause_str = f" (caused by: {self.cause})" if self.cause else ""
        return f"{self.__class__.__name__}: {self.message}{cause_str}"


class ConfigurationError(BaseError):
    """Error raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        context: ErrorContext,
        config_context: ConfigurationErrorContext,
        cause: Exception | None = None,
    ):
        self.config_context = config_context
        super().__init__(message, context, cause)


class ProviderError(BaseError):
    """Error raised when a document store operation fails."""

    def __init__(
        self,
        message: str,
        context: ErrorContext,
        provider_context: ProviderErrorContext,
        cause: Exception | None = None,
    ):
        self.provider_context = provider_context
        super().__init__(message, context, cause)
