"""Parameter descriptors, ranges and the validation error."""

from __future__ import annotations

from enum import Enum, StrEnum
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, model_validator


class ParameterType(StrEnum):
    """Value types a search parameter can declare."""

    UUID = "uuid"
    INTEGER = "integer"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    STRING = "string"
    DATE = "date"
    ENUM = "enum"
    GEOMETRY = "geometry"


# Only numeric and date-like values may be expressed as `low,high` ranges.
RANGE_TYPES: frozenset[ParameterType] = frozenset(
    {ParameterType.INTEGER, ParameterType.DOUBLE, ParameterType.DATE}
)

_NUMERIC_TYPES: frozenset[ParameterType] = frozenset({ParameterType.INTEGER, ParameterType.DOUBLE})

Vocabulary = type[Enum]


class ParameterDescriptor(BaseModel):
    """A search parameter: its identity and the type expected for its values."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    type: ParameterType
    vocabulary: Vocabulary | None = None
    min_value: float | None = None
    max_value: float | None = None

    @model_validator(mode="after")
    def validate_declaration(self) -> ParameterDescriptor:
        """Enumerated parameters need a vocabulary; only numeric parameters take bounds."""

        if (self.type == ParameterType.ENUM) != (self.vocabulary is not None):
            raise ValueError("vocabulary is required for, and only allowed on, enum parameters")

        has_bounds = self.min_value is not None or self.max_value is not None
        if has_bounds and self.type not in _NUMERIC_TYPES:
            raise ValueError("min_value/max_value are only supported for numeric parameters")
        if (
                self.min_value is not None
                and self.max_value is not None
                and self.min_value > self.max_value
        ):
            raise ValueError("min_value must be <= max_value")
        return self

    @property
    def supports_range(self) -> bool:
        return self.type in RANGE_TYPES


class ParameterRange(NamedTuple):
    """Range bounds; `None` marks an open (`*`) endpoint."""

    low: Any
    high: Any


class InvalidParameterValueError(ValueError):
    """Raised when a raw value is not valid for the declared parameter type."""

    def __init__(self, parameter: str, value: str | None, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for parameter {parameter}: {reason}")
        self.parameter = parameter
        self.value = value
        self.reason = reason
