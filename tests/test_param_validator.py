"""Tests for typed search parameter validation and range parsing."""

from __future__ import annotations

import uuid

import pytest

from src.params.dates import PartialDate
from src.params.registry import CHECKLIST_PARAMETERS, OCCURRENCE_PARAMETERS, get_parameter
from src.params.schema import (
    InvalidParameterValueError,
    ParameterDescriptor,
    ParameterRange,
    ParameterType,
)
from src.params.validator import is_range, parse_range, parse_value, validate, validate_range
from src.params.vocabularies import BasisOfRecord

OCC = OCCURRENCE_PARAMETERS
CHK = CHECKLIST_PARAMETERS

# (descriptor, raw value, valid, is range)
CASES: list[tuple[ParameterDescriptor, str, bool, bool]] = [
    (OCC["MODIFIED"], "2000-10,*", True, True),
    (OCC["COLLECTOR_NAME"], "henry", True, False),
    (OCC["ALTITUDE"], "1080", True, False),
    (OCC["ALTITUDE"], "1080.32", False, False),
    (OCC["ALTITUDE"], "1080m", False, False),
    (OCC["ALTITUDE"], "*, 900", True, True),
    (OCC["ALTITUDE"], "100 , *", True, True),
    (OCC["ALTITUDE"], "100,200", True, True),
    (OCC["ALTITUDE"], " , 200", False, False),
    (OCC["ALTITUDE"], "*1,200", False, False),
    (OCC["ALTITUDE"], "*.1,200", False, False),
    (OCC["ALTITUDE"], " , ", False, False),
    (OCC["ALTITUDE"], "[1 TO 2]", False, False),
    (OCC["ALTITUDE"], "{1,2}", False, False),
    (OCC["ALTITUDE"], "1,2,3", False, False),
    (OCC["DATASET_KEY"], str(uuid.uuid4()), True, False),
    (OCC["DATASET_KEY"], "f81d4fae-7dec-11d0-a765-00a0c91e6bf6", True, False),
    (OCC["DATASET_KEY"], "F81D4FAE-7DEC-11D0-A765-00A0C91E6BF6", True, False),
    (OCC["DATASET_KEY"], "F81D4FAE7DEC11D0A76500A0C91E6BF6", True, False),
    (OCC["DATASET_KEY"], "f81d4fae-7dec-11d0-a765", False, False),
    (OCC["DATASET_KEY"], "g81d4fae-7dec-11d0-a765-00a0c91e6bf6", False, False),
    (CHK["EXTINCT"], "true", True, False),
    (CHK["EXTINCT"], "FALSE", True, False),
    (CHK["EXTINCT"], "True", True, False),
    (CHK["EXTINCT"], "1", False, False),
    (CHK["EXTINCT"], "0", False, False),
    (CHK["EXTINCT"], "10", False, False),
    (CHK["EXTINCT"], "ja", False, False),
    (CHK["EXTINCT"], "no", False, False),
    (OCC["SCIENTIFIC_NAME"], "abies%", True, False),
    (OCC["COLLECTOR_NAME"], "Smith, J.", False, False),
    (OCC["GEOMETRY"], "POINT (30 10)", True, False),
    (OCC["GEOMETRY"], "POLYGON ((30 10, 10 20, 20 40, 40 40, 30 10))", True, False),
    (OCC["GEOMETRY"], "POLYGON ((30 10, 10 20, 20 40, 40 40, 30 10),)", False, False),
    (OCC["GEOMETRY"], "LINESTRING (30 10, 10 30, 40 40,)", False, False),
    (OCC["GEOMETRY"], "*", False, False),
    (OCC["YEAR"], "1991", True, False),
    (OCC["YEAR"], "1991-01-31", False, False),
    (OCC["YEAR"], "860", True, False),
    (OCC["YEAR"], "1860, 1911", True, True),
    (OCC["YEAR"], "1", True, False),
    (OCC["YEAR"], "-10", True, False),
    (OCC["YEAR"], "3018", True, False),
    (OCC["MONTH"], "1991", False, False),
    (OCC["MONTH"], "00", False, False),
    (OCC["MONTH"], "13", False, False),
    (OCC["MONTH"], "10", True, False),
    (OCC["MONTH"], "", False, False),
    (OCC["MONTH"], "0", False, False),
    (OCC["MONTH"], "1", True, False),
    (OCC["MONTH"], "-11", False, False),
    (OCC["MONTH"], "1267", False, False),
    (OCC["MONTH"], "4,8", True, True),
    (OCC["DATE"], "1900-06", True, False),
    (OCC["DATE"], "01-01", True, False),
    (OCC["DATE"], "1900-01-01", True, False),
    (OCC["DATE"], "1900-1-01", True, False),
    (OCC["DATE"], "1900-1-1", True, False),
    (OCC["DATE"], "1900-13-01", False, False),
    (OCC["DATE"], "10", False, False),
    (OCC["DATE"], "2000", True, False),
    (OCC["DATE"], "*", True, False),
    (OCC["DATE"], "*,2000", True, True),
    (OCC["DATE"], "2001,2010-01", True, True),
    (OCC["LATITUDE"], "90.0", True, False),
    (OCC["LATITUDE"], "180.0", False, False),
    (OCC["LATITUDE"], "50.0,92.2", False, True),
    (OCC["LATITUDE"], "50.5,89.9", True, True),
    (OCC["LONGITUDE"], "180.0", True, False),
    (OCC["LONGITUDE"], "180.01", False, False),
    (OCC["LONGITUDE"], "-190.0,92.2", False, True),
    (OCC["LONGITUDE"], "-150.5,119.9", True, True),
    (OCC["BASIS_OF_RECORD"], "preserved_specimen", True, False),
    (OCC["BASIS_OF_RECORD"], "PRESERVED", False, False),
    (CHK["RANK"], "Subspecies", True, False),
    (CHK["NAME_TYPE"], "candidatus", True, False),
]


def test_validate_and_is_range() -> None:
    for descriptor, raw, valid, range_ in CASES:
        if valid:
            validate(descriptor, raw)
        else:
            with pytest.raises(InvalidParameterValueError):
                validate(descriptor, raw)
        assert is_range(raw) == range_, f"is_range({raw!r})"


def test_invalid_value_error_carries_parameter_and_value() -> None:
    with pytest.raises(InvalidParameterValueError) as exc_info:
        validate(OCC["ALTITUDE"], "1080.32")
    assert exc_info.value.parameter == "ALTITUDE"
    assert exc_info.value.value == "1080.32"
    assert isinstance(exc_info.value, ValueError)


def test_range_with_one_invalid_endpoint_is_rejected() -> None:
    with pytest.raises(InvalidParameterValueError):
        validate(OCC["LATITUDE"], "*,92.2")
    with pytest.raises(InvalidParameterValueError):
        validate(OCC["DATE"], "2000-13,*")


def test_ranges_are_only_supported_for_numeric_and_date_types() -> None:
    with pytest.raises(InvalidParameterValueError):
        validate(CHK["EXTINCT"], "true,false")
    with pytest.raises(InvalidParameterValueError):
        validate(OCC["DATASET_KEY"], "*,f81d4fae-7dec-11d0-a765-00a0c91e6bf6")


def test_open_ended_ranges_have_one_bound() -> None:
    for descriptor, value in (
            (OCC["ALTITUDE"], "1080"),
            (OCC["ALTITUDE"], "-10"),
            (OCC["LATITUDE"], "12.5"),
            (OCC["DATE"], "2000-10"),
    ):
        assert validate_range(descriptor, f"{value},*") == ParameterRange(low=value, high=None)
        assert validate_range(descriptor, f"*,{value}") == ParameterRange(low=None, high=value)


def test_parse_range_trims_bounds() -> None:
    assert parse_range("100 , 200") == ParameterRange(low="100", high="200")
    low, high = parse_range("*, 900")
    assert low is None
    assert high == "900"
    assert parse_range("*,*") == ParameterRange(low=None, high=None)


def test_parse_range_rejects_non_ranges() -> None:
    for value in ("100", "*", "1,2,3", " , 200", ""):
        with pytest.raises(ValueError):
            parse_range(value)


def test_validate_range_requires_a_range() -> None:
    with pytest.raises(InvalidParameterValueError):
        validate_range(OCC["ALTITUDE"], "100")


def test_parse_value_returns_typed_values() -> None:
    assert parse_value(OCC["ALTITUDE"], " 1080 ") == 1080
    assert parse_value(OCC["LATITUDE"], "-12.5") == -12.5
    assert parse_value(CHK["EXTINCT"], "TRUE") is True
    assert parse_value(OCC["DATASET_KEY"], "F81D4FAE7DEC11D0A76500A0C91E6BF6") == uuid.UUID(
        "f81d4fae-7dec-11d0-a765-00a0c91e6bf6"
    )
    assert parse_value(OCC["BASIS_OF_RECORD"], "fossil_specimen") == BasisOfRecord.FOSSIL_SPECIMEN
    assert parse_value(OCC["DATE"], "2001-02") == PartialDate(year=2001, month=2)
    assert parse_value(OCC["SCIENTIFIC_NAME"], "Abies alba") == "Abies alba"
    assert parse_value(OCC["ALTITUDE"], "100,*") == ParameterRange(low=100, high=None)
    assert parse_value(OCC["DATE"], "*") is None


def test_wildcard_can_be_disabled() -> None:
    validate(OCC["ALTITUDE"], "*")
    with pytest.raises(InvalidParameterValueError):
        validate(OCC["ALTITUDE"], "*", allow_wildcard=False)


def test_none_is_invalid() -> None:
    with pytest.raises(InvalidParameterValueError):
        validate(OCC["SCIENTIFIC_NAME"], None)


def test_descriptor_declaration_rules() -> None:
    with pytest.raises(ValueError):
        ParameterDescriptor(name="BASIS", type=ParameterType.ENUM)
    with pytest.raises(ValueError):
        ParameterDescriptor(name="NAME", type=ParameterType.STRING, vocabulary=BasisOfRecord)
    with pytest.raises(ValueError):
        ParameterDescriptor(name="CODE", type=ParameterType.STRING, min_value=1)
    with pytest.raises(ValueError):
        ParameterDescriptor(name="MONTH", type=ParameterType.INTEGER, min_value=12, max_value=1)

    assert OCC["DATE"].supports_range
    assert not OCC["GEOMETRY"].supports_range


def test_get_parameter() -> None:
    assert get_parameter("altitude").type == ParameterType.INTEGER
    assert get_parameter("EXTINCT", "checklist").type == ParameterType.BOOLEAN
    with pytest.raises(KeyError):
        get_parameter("EXTINCT")


def test_decimal_range_bounds_accept_every_scalar_form() -> None:
    latitude = OCC["LATITUDE"]
    for value in ("1e1", "+5", ".5", "5.", "-2.5E-1"):
        validate(latitude, value)
        assert validate_range(latitude, f"{value},*") == ParameterRange(low=value, high=None)
        assert validate_range(latitude, f"*,{value}") == ParameterRange(low=None, high=value)
        assert is_range(f"{value},{value}")
    assert parse_value(latitude, ".5,1e1") == ParameterRange(low=0.5, high=10.0)
    with pytest.raises(InvalidParameterValueError, match="above the maximum"):
        validate(latitude, "*,1e3")


def test_non_ascii_digits_are_rejected() -> None:
    arabic_indic = "١٠٨٠"  # 1080
    for descriptor, value in (
            (OCC["ALTITUDE"], arabic_indic),
            (OCC["ALTITUDE"], f"{arabic_indic},*"),
            (OCC["LATITUDE"], "٥.5"),
            (OCC["DATE"], "٢٠٠١"),
            (OCC["GEOMETRY"], "POINT (٣٠ 10)"),
    ):
        with pytest.raises(InvalidParameterValueError):
            validate(descriptor, value)
    assert not is_range(f"{arabic_indic},*")
