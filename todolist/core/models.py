"""Strict Pydantic base models shared across todolist.

Every record the application passes between layers (tasks, navigation
parameters, error contexts, provider settings) derives from one of these.
"""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Immutable base model with strict validation.

    - strict=True: no type coercion, inputs must match exact types
    - extra="forbid": unknown fields are rejected
    - validate_assignment=True: assignments are validated
    - frozen=True: instances are immutable
    """

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        frozen=True,
        validate_default=True,
        use_enum_values=False,
        arbitrary_types_allowed=False,
    )


class MutableStrictBaseModel(BaseModel):
    """Mutable version of StrictBaseModel for runtime state holders.

    Use this ONLY when mutability is explicitly required.
    """

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        frozen=False,
        validate_default=True,
        use_enum_values=False,
        arbitrary_types_allowed=False,
    )


__all__ = [
    "StrictBaseModel",
    "MutableStrictBaseModel",
]
