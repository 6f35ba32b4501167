from .errors import BaseError, ConfigurationError, ErrorContext, ProviderError
from .models import ConfigurationErrorContext, ErrorContextData, ProviderErrorContext

__all__ = [
    "BaseError",
    "ConfigurationError",
    "ErrorContext",
    "ProviderError",
    "ConfigurationErrorContext",
    "ErrorContextData",
    "ProviderErrorContext",
]
