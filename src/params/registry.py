"""Declared search parameters for the occurrence and checklist (name usage) searches.

This is static configuration: every parameter is declared once with the type expected for its
values. The validator consumes these declarations but does not own them.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from src.names.ranks import NameType, Rank
from src.params.schema import ParameterDescriptor, ParameterType
from src.params.vocabularies import (
    BasisOfRecord,
    NomenclaturalStatus,
    TaxonomicStatus,
    ThreatStatus,
    TypeStatus,
)


class SearchDomain(StrEnum):
    """Which search a parameter registry belongs to."""

    occurrence = "occurrence"
    checklist = "checklist"


def _registry(descriptors: Iterable[ParameterDescriptor]) -> dict[str, ParameterDescriptor]:
    return {d.name: d for d in descriptors}


_T = ParameterType

OCCURRENCE_PARAMETERS: dict[str, ParameterDescriptor] = _registry(
    [
        ParameterDescriptor(name="DATASET_KEY", type=_T.UUID),
        # 4 digit year; a year of 98 is 98 AD, not 1998.
        ParameterDescriptor(name="YEAR", type=_T.INTEGER),
        ParameterDescriptor(name="MONTH", type=_T.INTEGER, min_value=1, max_value=12),
        ParameterDescriptor(name="DATE", type=_T.DATE),
        ParameterDescriptor(name="MODIFIED", type=_T.DATE),
        ParameterDescriptor(name="LATITUDE", type=_T.DOUBLE, min_value=-90, max_value=90),
        ParameterDescriptor(name="LONGITUDE", type=_T.DOUBLE, min_value=-180, max_value=180),
        # Meters above sea level.
        ParameterDescriptor(name="ALTITUDE", type=_T.INTEGER),
        # Meters below the surface.
        ParameterDescriptor(name="DEPTH", type=_T.INTEGER),
        ParameterDescriptor(name="INSTITUTION_CODE", type=_T.STRING),
        ParameterDescriptor(name="COLLECTION_CODE", type=_T.STRING),
        ParameterDescriptor(name="CATALOG_NUMBER", type=_T.STRING),
        ParameterDescriptor(name="COLLECTOR_NAME", type=_T.STRING),
        ParameterDescriptor(name="RECORD_NUMBER", type=_T.STRING),
        ParameterDescriptor(name="BASIS_OF_RECORD", type=_T.ENUM, vocabulary=BasisOfRecord),
        ParameterDescriptor(name="TAXON_KEY", type=_T.INTEGER),
        ParameterDescriptor(name="SCIENTIFIC_NAME", type=_T.STRING),
        ParameterDescriptor(name="GEOREFERENCED", type=_T.BOOLEAN),
        ParameterDescriptor(name="GEOMETRY", type=_T.GEOMETRY),
        ParameterDescriptor(name="SPATIAL_ISSUES", type=_T.BOOLEAN),
        ParameterDescriptor(name="TYPE_STATUS", type=_T.ENUM, vocabulary=TypeStatus),
    ]
)

CHECKLIST_PARAMETERS: dict[str, ParameterDescriptor] = _registry(
    [
        ParameterDescriptor(name="DATASET_KEY", type=_T.UUID),
        ParameterDescriptor(name="RANK", type=_T.ENUM, vocabulary=Rank),
        ParameterDescriptor(name="HIGHERTAXON_KEY", type=_T.INTEGER),
        ParameterDescriptor(name="STATUS", type=_T.ENUM, vocabulary=TaxonomicStatus),
        ParameterDescriptor(name="EXTINCT", type=_T.BOOLEAN),
        ParameterDescriptor(name="HABITAT", type=_T.STRING),
        ParameterDescriptor(name="THREAT", type=_T.ENUM, vocabulary=ThreatStatus),
        ParameterDescriptor(
            name="NOMENCLATURAL_STATUS", type=_T.ENUM, vocabulary=NomenclaturalStatus
        ),
        ParameterDescriptor(name="NAME_TYPE", type=_T.ENUM, vocabulary=NameType),
    ]
)

REGISTRIES: dict[SearchDomain, dict[str, ParameterDescriptor]] = {
    SearchDomain.occurrence: OCCURRENCE_PARAMETERS,
    SearchDomain.checklist: CHECKLIST_PARAMETERS,
}


def get_parameter(name: str, domain: SearchDomain | str = SearchDomain.occurrence) -> ParameterDescriptor:
    """Look up a declared parameter by name (case-insensitive).

    Raises:
        KeyError: If the domain does not declare the parameter.
    """

    registry = REGISTRIES[SearchDomain(domain)]
    key = (name or "").strip().upper()
    if key not in registry:
        raise KeyError(f"unknown {SearchDomain(domain)} parameter: {name}")
    return registry[key]
