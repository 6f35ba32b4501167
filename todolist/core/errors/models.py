"""Strict Pydantic models describing where and how an error happened."""

from datetime import datetime

from pydantic import Field

from todolist.core.models import StrictBaseModel


class ErrorContextData(StrictBaseModel):
    """Where an error occurred. All fields except timestamp are required."""

    component: str = Field(..., description="Component that raised the error")
    error_type: str = Field(..., description="Type of error")
    error_location: str = Field(..., description="Location in code where error occurred")
    operation: str = Field(..., description="Operation being performed")
    timestamp: datetime = Field(default_factory=datetime.now, description="When error occurred")


class ProviderErrorContext(StrictBaseModel):
    """Provider-specific error context."""

    provider_name: str = Field(..., description="Name of the provider")
    provider_type: str = Field(..., description="Type of provider")
    operation: str = Field(..., description="Operation that failed")
    collection: str = Field(default="", description="Collection the operation targeted")


class ConfigurationErrorContext(StrictBaseModel):
    """Configuration-specific error context."""

    config_key: str = Field(..., description="Configuration key that failed")
    config_section: str = Field(..., description="Configuration section")
    expected_type: str = Field(..., description="Expected type of configuration")
    actual_value: str = Field(..., description="Actual value provided")
