"""Search parameter value validation.

Values are checked against the type declared by a `ParameterDescriptor`. Numeric and date
parameters also accept comma separated ranges, e.g.:
    - `*,1810`      up to and including 1810
    - `1848,1933`   between 1848 and 1933
    - `2001-02,*`   from the first day of 2001-02 onwards

Validation is strict: there is no coercion and no partial success. A range with one invalid
endpoint is rejected as a whole.
"""

from __future__ import annotations

import logging
import re
import uuid
from typing import Any

from src.params import dates
from src.params.geometry import validate_wkt
from src.params.schema import (
    RANGE_TYPES,
    InvalidParameterValueError,
    ParameterDescriptor,
    ParameterRange,
    ParameterType,
)

logger = logging.getLogger(__name__)

WILDCARD = "*"

_INTEGER_RE = re.compile(r"^-?\d+$", flags=re.ASCII)
_DOUBLE_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$", flags=re.ASCII)
_UUID_RE = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}|[0-9a-f]{32})$",
    flags=re.IGNORECASE,
)


def _is_range_endpoint(value: str) -> bool:
    return (
            value == WILDCARD
            or _DOUBLE_RE.fullmatch(value) is not None
            or dates.is_partial_date(value)
    )


def is_range(raw: str | None) -> bool:
    """Whether the value is a `low,high` range.

    A range has exactly one comma and each trimmed side is `*`, a decimal number or a partial date.
    This is a shape check only: whether the bounds suit a parameter is decided by `validate`.
    A bare `*` is not a range.
    """

    if not raw:
        return False
    parts = raw.split(",")
    if len(parts) != 2:
        return False
    return all(_is_range_endpoint(p.strip()) for p in parts)


def parse_range(raw: str) -> ParameterRange:
    """Split a range into its trimmed bounds; `*` becomes `None`.

    Raises:
        ValueError: If the value is not a range.
    """

    if not is_range(raw):
        raise ValueError(f"not a range: {raw!r}")
    low, high = (p.strip() for p in raw.split(","))
    return ParameterRange(
        low=None if low == WILDCARD else low,
        high=None if high == WILDCARD else high,
    )


def _check_bounds(descriptor: ParameterDescriptor, number: float) -> None:
    if descriptor.min_value is not None and number < descriptor.min_value:
        raise ValueError(f"below the minimum {descriptor.min_value:g}")
    if descriptor.max_value is not None and number > descriptor.max_value:
        raise ValueError(f"above the maximum {descriptor.max_value:g}")


def _parse_scalar(descriptor: ParameterDescriptor, value: str) -> Any:
    """Parse a single trimmed value into its Python type, raising `ValueError` with a reason."""

    kind = descriptor.type

    if kind == ParameterType.UUID:
        if not _UUID_RE.fullmatch(value):
            raise ValueError("not a UUID")
        return uuid.UUID(value)

    if kind == ParameterType.INTEGER:
        if not _INTEGER_RE.fullmatch(value):
            raise ValueError("not an integer")
        number = int(value)
        _check_bounds(descriptor, number)
        return number

    if kind == ParameterType.DOUBLE:
        if not _DOUBLE_RE.fullmatch(value):
            raise ValueError("not a decimal number")
        number = float(value)
        _check_bounds(descriptor, number)
        return number

    if kind == ParameterType.BOOLEAN:
        lowered = value.lower()
        if lowered not in {"true", "false"}:
            raise ValueError("expected true or false")
        return lowered == "true"

    if kind == ParameterType.ENUM:
        assert descriptor.vocabulary is not None
        members = {m.name.lower(): m for m in descriptor.vocabulary}
        member = members.get(value.lower())
        if member is None:
            raise ValueError(f"not a {descriptor.vocabulary.__name__} value")
        return member

    if kind == ParameterType.DATE:
        return dates.parse_partial_date(value)

    if kind == ParameterType.GEOMETRY:
        validate_wkt(value)

    return value


def parse_value(
        descriptor: ParameterDescriptor,
        raw: str | None,
        *,
        allow_wildcard: bool = True,
) -> Any:
    """Validate a raw value and return it parsed.

    Returns:
        The typed scalar (`uuid.UUID`, `int`, `float`, `bool`, enum member, `PartialDate` or `str`),
        a `ParameterRange` of typed bounds for ranges, or `None` for the `*` wildcard.

    Raises:
        InvalidParameterValueError: If the value is not valid for the parameter.
    """

    value = (raw or "").strip()
    try:
        if not value:
            raise ValueError("empty value")

        if descriptor.type == ParameterType.GEOMETRY:
            return _parse_scalar(descriptor, value)

        if value == WILDCARD:
            if not allow_wildcard:
                raise ValueError("wildcard not allowed")
            return None

        if "," in value:
            if descriptor.type not in RANGE_TYPES:
                raise ValueError(f"ranges are not supported for {descriptor.type} parameters")
            sides = [side.strip() for side in value.split(",")]
            if len(sides) != 2 or not all(sides):
                raise ValueError("malformed range")
            # Each bound follows the scalar grammar and bounds of the parameter type.
            low, high = (
                None if side == WILDCARD else _parse_scalar(descriptor, side) for side in sides
            )
            return ParameterRange(low=low, high=high)

        return _parse_scalar(descriptor, value)
    except ValueError as exc:
        logger.debug("rejected parameter=%s value=%r reason=%s", descriptor.name, raw, exc)
        raise InvalidParameterValueError(descriptor.name, raw, str(exc)) from exc


def validate(
        descriptor: ParameterDescriptor,
        raw: str | None,
        *,
        allow_wildcard: bool = True,
) -> None:
    """Validate a raw value (scalar or range) for the parameter.

    Raises:
        InvalidParameterValueError: If the value is not valid for the parameter.
    """

    parse_value(descriptor, raw, allow_wildcard=allow_wildcard)


def validate_range(descriptor: ParameterDescriptor, raw: str) -> ParameterRange:
    """Validate a range value and return its trimmed string bounds (`None` for `*`).

    Raises:
        InvalidParameterValueError: If the value is not a valid range for the parameter.
    """

    validate(descriptor, raw)
    if not is_range(raw):
        raise InvalidParameterValueError(descriptor.name, raw, "not a range")
    return parse_range(raw)
