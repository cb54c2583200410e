"""Taxon name record and rendering options (Pydantic models).

`TaxonName` is the contract between whatever assembles an atomised name (parsers, mappers) and the
renderer. Hybrid markers on name parts and `notho` rank prefixes are resolved once, when the record
is constructed.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from src.names.normalize import strip_hybrid_marker
from src.names.ranks import NamePart, NameType, Rank, infer_rank, normalize_rank_marker

# Field aliases accepted from loosely-typed input records.
_FIELD_ALIASES: dict[str, str] = {
    "type": "name_type",
    "rank": "rank_marker",
    "infra_generic": "infrageneric",
    "infra_specific_epithet": "infraspecific_epithet",
}

# Order matters: when several parts carry a hybrid marker, the last one wins.
_HYBRID_PARTS: tuple[tuple[str, NamePart], ...] = (
    ("genus_or_above", NamePart.GENERIC),
    ("infrageneric", NamePart.INFRAGENERIC),
    ("specific_epithet", NamePart.SPECIFIC),
    ("infraspecific_epithet", NamePart.INFRASPECIFIC),
)


def _parse_int(value: str | None) -> int | None:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


class TaxonName(BaseModel):
    """A taxon name atomised into at most three name parts plus rank, authorship and notes."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, frozen=True)

    key: int | None = None
    scientific_name: str | None = None
    name_type: NameType | None = None

    genus_or_above: str | None = None
    infrageneric: str | None = None
    specific_epithet: str | None = None
    infraspecific_epithet: str | None = None
    notho: NamePart | None = None
    rank_marker: str | None = None

    authors_parsed: bool = True
    authorship: str | None = None
    year: str | None = None
    bracket_authorship: str | None = None
    bracket_year: str | None = None

    cultivar_epithet: str | None = None
    strain: str | None = None
    sensu: str | None = None
    nom_status: str | None = None
    remarks: str | None = None

    @model_validator(mode="before")
    @classmethod
    def parse_name_parts(cls, data: Any) -> Any:
        """Blank strings become null, hybrid markers move into `notho`, rank markers normalize."""

        if not isinstance(data, dict):
            return data

        values: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, str) and not isinstance(value, StrEnum):
                value = value.strip() or None
            field = _FIELD_ALIASES.get(key, key)
            # The field name wins over its alias when a record carries both.
            if field != key and field in data:
                continue
            values[field] = value

        for field, part in _HYBRID_PARTS:
            raw = values.get(field)
            if not isinstance(raw, str):
                continue
            stripped, is_hybrid = strip_hybrid_marker(raw)
            if is_hybrid:
                values[field] = stripped or None
                values["notho"] = part

        marker = values.get("rank_marker")
        if isinstance(marker, Rank):
            values["rank_marker"] = marker.marker
        elif isinstance(marker, str):
            values["rank_marker"], is_notho = normalize_rank_marker(marker)
            if is_notho:
                values["notho"] = NamePart.INFRASPECIFIC

        return values

    @property
    def rank(self) -> Rank | None:
        """The inferred rank, or `None` if it cannot be determined."""

        rank = infer_rank(
            self.genus_or_above,
            self.infrageneric,
            self.specific_epithet,
            self.rank_marker,
            self.infraspecific_epithet,
        )
        return None if rank == Rank.UNRANKED else rank

    @property
    def terminal_epithet(self) -> str | None:
        """The infraspecific epithet if present, else the species epithet."""

        return self.specific_epithet if self.infraspecific_epithet is None else self.infraspecific_epithet

    @property
    def is_binomial(self) -> bool:
        return self.genus_or_above is not None and self.specific_epithet is not None

    @property
    def is_autonym(self) -> bool:
        return self.specific_epithet is not None and self.specific_epithet == self.infraspecific_epithet

    @property
    def is_indetermined(self) -> bool:
        """Names with a rank marker but a missing lowest name part.

        E.g. `Coccyzus americanus ssp.` or `Asteraceae spec.`, but not `Maxillaria sect. Acaules`.
        """

        return (
                self.rank_marker is not None
                and self.infraspecific_epithet is None
                and (self.specific_epithet is not None or self.infrageneric is None)
        )

    @property
    def has_authorship(self) -> bool:
        return any(
            v is not None
            for v in (self.authorship, self.year, self.bracket_authorship, self.bracket_year)
        )

    @property
    def is_qualified(self) -> bool:
        return any((self.authorship, self.year, self.bracket_authorship, self.bracket_year))

    @property
    def is_recombination(self) -> bool:
        """Whether a bracket authorship marks the name as subsequently recombined."""

        return any(v and v.strip() for v in (self.bracket_authorship, self.bracket_year))

    @property
    def is_hybrid_formula(self) -> bool:
        return self.name_type == NameType.HYBRID

    @property
    def is_parsable_type(self) -> bool:
        return self.name_type is not None and self.name_type.is_parsable

    @property
    def year_int(self) -> int | None:
        return _parse_int(self.year)

    @property
    def bracket_year_int(self) -> int | None:
        return _parse_int(self.bracket_year)

    def __str__(self) -> str:
        if self.is_hybrid_formula:
            return " [hybrid]"

        out = [str(self.scientific_name)]
        if self.key is not None:
            out.append(f" [{self.key}]")
        for label, value in (
                ("G", self.genus_or_above),
                ("IG", self.infrageneric),
                ("S", self.specific_epithet),
                ("R", self.rank_marker),
                ("IS", self.infraspecific_epithet),
                ("CV", self.cultivar_epithet),
                ("STR", self.strain),
                ("A", self.authorship),
                ("Y", self.year),
                ("BA", self.bracket_authorship),
                ("BY", self.bracket_year),
        ):
            if value is not None:
                out.append(f" {label}:{value}")
        if self.name_type is not None:
            out.append(f" [{self.name_type}]")
        return "".join(out)


class RenderOptions(BaseModel):
    """Switches controlling which parts and adornments a rendered name includes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hybrid_marker: bool = False
    rank_marker: bool = False
    authorship: bool = False
    show_infrageneric: bool = False
    genus_for_infrageneric: bool = False
    abbreviate_genus: bool = False
    decompose_unicode: bool = False
    ascii_only: bool = False
    show_indet: bool = False
    show_nom_status: bool = False
    show_remarks: bool = False
    show_sensu: bool = False
    show_cultivar: bool = False
    show_strain: bool = False


class RenderProfile(StrEnum):
    """Named rendering presets."""

    canonical = "canonical"
    canonical_with_marker = "canonical_with_marker"
    canonical_complete = "canonical_complete"
    full_name = "full_name"


# Up to three name parts, no markers, authorship or adornments.
CANONICAL = RenderOptions(
    show_indet=True,
    decompose_unicode=True,
    ascii_only=True,
)

# Code compliant canonical name with rank and hybrid markers, cultivar and strain.
CANONICAL_WITH_MARKER = RenderOptions(
    hybrid_marker=True,
    rank_marker=True,
    genus_for_infrageneric=True,
    show_indet=True,
    show_cultivar=True,
    show_strain=True,
    decompose_unicode=True,
    ascii_only=True,
)

# Canonical name with markers and authorship; no notes, concept references or subgenus.
CANONICAL_COMPLETE = RenderOptions(
    hybrid_marker=True,
    rank_marker=True,
    authorship=True,
    genus_for_infrageneric=True,
    show_indet=True,
    show_cultivar=True,
    show_strain=True,
)

FULL_NAME = RenderOptions(
    hybrid_marker=True,
    rank_marker=True,
    authorship=True,
    show_infrageneric=True,
    genus_for_infrageneric=True,
    show_indet=True,
    show_nom_status=True,
    show_remarks=True,
    show_sensu=True,
    show_cultivar=True,
    show_strain=True,
)

PRESETS: dict[RenderProfile, RenderOptions] = {
    RenderProfile.canonical: CANONICAL,
    RenderProfile.canonical_with_marker: CANONICAL_WITH_MARKER,
    RenderProfile.canonical_complete: CANONICAL_COMPLETE,
    RenderProfile.full_name: FULL_NAME,
}
