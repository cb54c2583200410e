"""Controlled vocabularies used by enumerated search parameters."""

from __future__ import annotations

from enum import StrEnum


class BasisOfRecord(StrEnum):
    PRESERVED_SPECIMEN = "PRESERVED_SPECIMEN"
    FOSSIL_SPECIMEN = "FOSSIL_SPECIMEN"
    LIVING_SPECIMEN = "LIVING_SPECIMEN"
    HUMAN_OBSERVATION = "HUMAN_OBSERVATION"
    MACHINE_OBSERVATION = "MACHINE_OBSERVATION"
    MATERIAL_SAMPLE = "MATERIAL_SAMPLE"
    LITERATURE = "LITERATURE"
    UNKNOWN = "UNKNOWN"


class TaxonomicStatus(StrEnum):
    ACCEPTED = "ACCEPTED"
    DOUBTFUL = "DOUBTFUL"
    SYNONYM = "SYNONYM"
    HETEROTYPIC_SYNONYM = "HETEROTYPIC_SYNONYM"
    HOMOTYPIC_SYNONYM = "HOMOTYPIC_SYNONYM"
    PROPARTE_SYNONYM = "PROPARTE_SYNONYM"
    MISAPPLIED = "MISAPPLIED"


class ThreatStatus(StrEnum):
    """IUCN Red List categories."""

    EXTINCT = "EXTINCT"
    EXTINCT_IN_THE_WILD = "EXTINCT_IN_THE_WILD"
    CRITICALLY_ENDANGERED = "CRITICALLY_ENDANGERED"
    ENDANGERED = "ENDANGERED"
    VULNERABLE = "VULNERABLE"
    NEAR_THREATENED = "NEAR_THREATENED"
    LEAST_CONCERN = "LEAST_CONCERN"
    DATA_DEFICIENT = "DATA_DEFICIENT"
    NOT_EVALUATED = "NOT_EVALUATED"


class NomenclaturalStatus(StrEnum):
    LEGITIMATE = "LEGITIMATE"
    VALIDLY_PUBLISHED = "VALIDLY_PUBLISHED"
    NEW_COMBINATION = "NEW_COMBINATION"
    REPLACEMENT = "REPLACEMENT"
    CONSERVED = "CONSERVED"
    PROTECTED = "PROTECTED"
    CORRECTED = "CORRECTED"
    ORIGINAL_COMBINATION = "ORIGINAL_COMBINATION"
    NEW_SPECIES = "NEW_SPECIES"
    NEW_GENUS = "NEW_GENUS"
    ALTERNATIVE = "ALTERNATIVE"
    OBSCURE = "OBSCURE"
    ABORTED = "ABORTED"
    CONSERVED_PROPOSAL = "CONSERVED_PROPOSAL"
    PROVISIONAL = "PROVISIONAL"
    SUBNUDUM = "SUBNUDUM"
    REJECTED_PROPOSAL = "REJECTED_PROPOSAL"
    REJECTED_OUTRIGHT_PROPOSAL = "REJECTED_OUTRIGHT_PROPOSAL"
    DOUBTFUL = "DOUBTFUL"
    AMBIGUOUS = "AMBIGUOUS"
    CONFUSED = "CONFUSED"
    FORGOTTEN = "FORGOTTEN"
    ORTHOGRAPHIC_VARIANT = "ORTHOGRAPHIC_VARIANT"
    SUPERFLUOUS = "SUPERFLUOUS"
    NUDUM = "NUDUM"
    NULL_NAME = "NULL_NAME"
    SUPPRESSED = "SUPPRESSED"
    REJECTED_OUTRIGHT = "REJECTED_OUTRIGHT"
    REJECTED = "REJECTED"
    ILLEGITIMATE = "ILLEGITIMATE"
    INVALID = "INVALID"
    DENIED = "DENIED"


class TypeStatus(StrEnum):
    """Nomenclatural type status of a specimen."""

    TYPE = "TYPE"
    ALLOTYPE = "ALLOTYPE"
    EPITYPE = "EPITYPE"
    HOLOTYPE = "HOLOTYPE"
    ISOTYPE = "ISOTYPE"
    LECTOTYPE = "LECTOTYPE"
    NEOTYPE = "NEOTYPE"
    PARATYPE = "PARATYPE"
    PARALECTOTYPE = "PARALECTOTYPE"
    SYNTYPE = "SYNTYPE"
    TOPOTYPE = "TOPOTYPE"
    TYPE_SPECIES = "TYPE_SPECIES"
    TYPE_GENUS = "TYPE_GENUS"
