"""Base model and lppcodec-specific Pydantic configuration.

This module provides the LppModel class that the decoded message models inherit from.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer, model_validator


class LppModel(BaseModel):
    """Base class for all lppcodec value containers.

    Decoded messages are built once by the Decoder and handed to the caller.
    The model is frozen and every dict field is replaced by a read-only view
    after validation, so neither the attributes nor their contents can change.
    """

    model_config = ConfigDict(
        # Coerce where the union allows it (e.g. list -> tuple for xyz vectors)
        strict=False,
        # Decoded messages are read-only after return
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
    )

    @model_validator(mode="after")
    def _freeze_mappings(self) -> LppModel:
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, dict):
                # frozen=True blocks normal assignment
                object.__setattr__(self, name, MappingProxyType(dict(value)))
        return self

    @field_serializer("values", check_fields=False)
    def _dump_values(self, values: Mapping[Any, Any]) -> dict[Any, Any]:
        return dict(values)
