"""Core building blocks: strict models, structured errors and settings."""

from .models import MutableStrictBaseModel, StrictBaseModel

__all__ = ["StrictBaseModel", "MutableStrictBaseModel"]
