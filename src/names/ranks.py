"""Rank, name type and hybrid name part vocabularies.

The rank marker table maps free-text markers (e.g. "ssp.", "var", "forma") to a `Rank`. It is kept
small and deterministic: unknown markers are not guessed.
"""

from __future__ import annotations

from enum import StrEnum


class NameType(StrEnum):
    """Kind of a parsed name, governing special rendering cases."""

    SCIENTIFIC = "SCIENTIFIC"
    VIRUS = "VIRUS"
    HYBRID = "HYBRID"
    INFORMAL = "INFORMAL"
    CULTIVAR = "CULTIVAR"
    CANDIDATUS = "CANDIDATUS"
    OTU = "OTU"
    DOUBTFUL = "DOUBTFUL"
    PLACEHOLDER = "PLACEHOLDER"
    NO_NAME = "NO_NAME"
    BLACKLISTED = "BLACKLISTED"

    @property
    def is_parsable(self) -> bool:
        return self in _PARSABLE_NAME_TYPES


_PARSABLE_NAME_TYPES: frozenset[NameType] = frozenset(
    {
        NameType.SCIENTIFIC,
        NameType.INFORMAL,
        NameType.CULTIVAR,
        NameType.CANDIDATUS,
        NameType.DOUBTFUL,
    }
)


class NamePart(StrEnum):
    """The name part of a named hybrid that carries the hybrid (notho) marker."""

    GENERIC = "GENERIC"
    INFRAGENERIC = "INFRAGENERIC"
    SPECIFIC = "SPECIFIC"
    INFRASPECIFIC = "INFRASPECIFIC"


class Rank(StrEnum):
    """Taxonomic ranks, ordered from highest to lowest."""

    DOMAIN = "DOMAIN"
    SUPERKINGDOM = "SUPERKINGDOM"
    KINGDOM = "KINGDOM"
    SUBKINGDOM = "SUBKINGDOM"
    SUPERPHYLUM = "SUPERPHYLUM"
    PHYLUM = "PHYLUM"
    SUBPHYLUM = "SUBPHYLUM"
    SUPERCLASS = "SUPERCLASS"
    CLASS = "CLASS"
    SUBCLASS = "SUBCLASS"
    SUPERORDER = "SUPERORDER"
    ORDER = "ORDER"
    SUBORDER = "SUBORDER"
    SUPERFAMILY = "SUPERFAMILY"
    FAMILY = "FAMILY"
    SUBFAMILY = "SUBFAMILY"
    TRIBE = "TRIBE"
    SUBTRIBE = "SUBTRIBE"
    SUPRAGENERIC_NAME = "SUPRAGENERIC_NAME"
    GENUS = "GENUS"
    SUBGENUS = "SUBGENUS"
    INFRAGENERIC_NAME = "INFRAGENERIC_NAME"
    SECTION = "SECTION"
    SUBSECTION = "SUBSECTION"
    SERIES = "SERIES"
    SUBSERIES = "SUBSERIES"
    SPECIES_AGGREGATE = "SPECIES_AGGREGATE"
    SPECIES = "SPECIES"
    INFRASPECIFIC_NAME = "INFRASPECIFIC_NAME"
    GREX = "GREX"
    SUBSPECIES = "SUBSPECIES"
    CULTIVAR_GROUP = "CULTIVAR_GROUP"
    CONVARIETY = "CONVARIETY"
    INFRASUBSPECIFIC_NAME = "INFRASUBSPECIFIC_NAME"
    PROLES = "PROLES"
    RACE = "RACE"
    NATIO = "NATIO"
    ABERRATION = "ABERRATION"
    MORPH = "MORPH"
    VARIETY = "VARIETY"
    SUBVARIETY = "SUBVARIETY"
    FORM = "FORM"
    SUBFORM = "SUBFORM"
    PATHOVAR = "PATHOVAR"
    BIOVAR = "BIOVAR"
    CHEMOVAR = "CHEMOVAR"
    MORPHOVAR = "MORPHOVAR"
    PHAGOVAR = "PHAGOVAR"
    SEROVAR = "SEROVAR"
    CHEMOFORM = "CHEMOFORM"
    FORMA_SPECIALIS = "FORMA_SPECIALIS"
    CULTIVAR = "CULTIVAR"
    STRAIN = "STRAIN"
    INFORMAL = "INFORMAL"
    UNRANKED = "UNRANKED"

    @property
    def marker(self) -> str | None:
        """The canonical abbreviated rank marker, e.g. `subsp.` for SUBSPECIES."""

        return RANK_MARKERS.get(self)

    @property
    def is_infrageneric(self) -> bool:
        """Whether the rank lies strictly between genus and species."""

        return _RANK_ORDER[Rank.GENUS] < _RANK_ORDER[self] < _RANK_ORDER[Rank.SPECIES]

    @property
    def is_infraspecific(self) -> bool:
        """Whether the rank is below species (informal and unranked excluded)."""

        return (
                _RANK_ORDER[Rank.SPECIES] < _RANK_ORDER[self] < _RANK_ORDER[Rank.INFORMAL]
        )

    @property
    def is_uncomparable(self) -> bool:
        return self in UNCOMPARABLE_RANKS


_RANK_ORDER: dict[Rank, int] = {rank: idx for idx, rank in enumerate(Rank)}

UNCOMPARABLE_RANKS: frozenset[Rank] = frozenset(
    {
        Rank.SUPRAGENERIC_NAME,
        Rank.INFRAGENERIC_NAME,
        Rank.INFRASPECIFIC_NAME,
        Rank.INFRASUBSPECIFIC_NAME,
        Rank.INFORMAL,
        Rank.UNRANKED,
    }
)

RANK_MARKERS: dict[Rank, str] = {
    Rank.DOMAIN: "dom.",
    Rank.SUPERKINGDOM: "superreg.",
    Rank.KINGDOM: "reg.",
    Rank.SUBKINGDOM: "subreg.",
    Rank.SUPERPHYLUM: "superphyl.",
    Rank.PHYLUM: "phyl.",
    Rank.SUBPHYLUM: "subphyl.",
    Rank.SUPERCLASS: "supercl.",
    Rank.CLASS: "cl.",
    Rank.SUBCLASS: "subcl.",
    Rank.SUPERORDER: "superord.",
    Rank.ORDER: "ord.",
    Rank.SUBORDER: "subord.",
    Rank.SUPERFAMILY: "superfam.",
    Rank.FAMILY: "fam.",
    Rank.SUBFAMILY: "subfam.",
    Rank.TRIBE: "trib.",
    Rank.SUBTRIBE: "subtrib.",
    Rank.SUPRAGENERIC_NAME: "supragen.",
    Rank.GENUS: "gen.",
    Rank.SUBGENUS: "subgen.",
    Rank.INFRAGENERIC_NAME: "infragen.",
    Rank.SECTION: "sect.",
    Rank.SUBSECTION: "subsect.",
    Rank.SERIES: "ser.",
    Rank.SUBSERIES: "subser.",
    Rank.SPECIES_AGGREGATE: "agg.",
    Rank.SPECIES: "sp.",
    Rank.INFRASPECIFIC_NAME: "infrasp.",
    Rank.GREX: "gx",
    Rank.SUBSPECIES: "subsp.",
    Rank.CULTIVAR_GROUP: "cvgr.",
    Rank.CONVARIETY: "convar.",
    Rank.INFRASUBSPECIFIC_NAME: "infrasubsp.",
    Rank.PROLES: "prol.",
    Rank.RACE: "race",
    Rank.NATIO: "natio",
    Rank.ABERRATION: "ab.",
    Rank.MORPH: "morph",
    Rank.VARIETY: "var.",
    Rank.SUBVARIETY: "subvar.",
    Rank.FORM: "f.",
    Rank.SUBFORM: "subf.",
    Rank.PATHOVAR: "pv.",
    Rank.BIOVAR: "biovar",
    Rank.CHEMOVAR: "chemovar",
    Rank.MORPHOVAR: "morphovar",
    Rank.PHAGOVAR: "phagovar",
    Rank.SEROVAR: "serovar",
    Rank.CHEMOFORM: "chemoform",
    Rank.FORMA_SPECIALIS: "f.sp.",
    Rank.CULTIVAR: "cv.",
    Rank.STRAIN: "strain",
}

RANK_MARKER_SYNONYMS: dict[Rank, tuple[str, ...]] = {
    Rank.KINGDOM: ("kingdom", "regnum"),
    Rank.PHYLUM: ("phylum", "division", "div."),
    Rank.CLASS: ("class", "classis"),
    Rank.ORDER: ("order", "ordo"),
    Rank.FAMILY: ("family", "familia"),
    Rank.SUBFAMILY: ("subfamily", "subfamilia"),
    Rank.TRIBE: ("tribe", "tribus"),
    Rank.GENUS: ("genus",),
    Rank.SUBGENUS: ("subgenus", "subg."),
    Rank.SECTION: ("section", "sectio"),
    Rank.SUBSECTION: ("subsection", "subsectio"),
    Rank.SERIES: ("series",),
    Rank.SPECIES_AGGREGATE: ("aggr.", "aggregate"),
    Rank.SPECIES: ("spec.", "species", "spp."),
    Rank.INFRASPECIFIC_NAME: ("infraspec.",),
    Rank.GREX: ("grex",),
    Rank.SUBSPECIES: ("ssp.", "subspecies"),
    Rank.CULTIVAR_GROUP: ("group", "cultivar group"),
    Rank.CONVARIETY: ("convariety",),
    Rank.PROLES: ("proles",),
    Rank.ABERRATION: ("aberration",),
    Rank.VARIETY: ("variety", "varietas"),
    Rank.SUBVARIETY: ("subvariety",),
    Rank.FORM: ("fo.", "forma", "form"),
    Rank.SUBFORM: ("subforma",),
    Rank.PATHOVAR: ("pathovar",),
    Rank.FORMA_SPECIALIS: ("f. sp.", "forma specialis"),
    Rank.CULTIVAR: ("cultivar",),
}


def _marker_lookup() -> dict[str, Rank]:
    lookup: dict[str, Rank] = {}
    for rank, marker in RANK_MARKERS.items():
        lookup[marker] = rank
        lookup.setdefault(marker.rstrip("."), rank)
    for rank, synonyms in RANK_MARKER_SYNONYMS.items():
        for synonym in synonyms:
            lookup.setdefault(synonym, rank)
            lookup.setdefault(synonym.rstrip("."), rank)
    return lookup


_MARKER_TO_RANK: dict[str, Rank] = _marker_lookup()


def infer_rank_from_marker(marker: str | None) -> Rank | None:
    """Resolve a free-text rank marker (case-insensitive) to a `Rank`, or `None` if unknown."""

    value = (marker or "").strip().lower()
    if not value:
        return None
    return _MARKER_TO_RANK.get(value)


def infer_rank(
        genus_or_above: str | None,
        infrageneric: str | None,
        specific_epithet: str | None,
        rank_marker: str | None,
        infraspecific_epithet: str | None,
) -> Rank:
    """Infer the rank of an atomised name.

    An explicit rank marker wins. Without a marker the lowest populated name part decides:
    infraspecific epithet, species epithet, then infrageneric name. Monomials and unknown markers
    are `Rank.UNRANKED`.
    """

    if rank_marker:
        return infer_rank_from_marker(rank_marker) or Rank.UNRANKED

    if infraspecific_epithet is not None:
        return Rank.INFRASPECIFIC_NAME
    if specific_epithet is not None:
        return Rank.SPECIES
    if infrageneric is not None:
        return Rank.INFRAGENERIC_NAME
    return Rank.UNRANKED


def normalize_rank_marker(raw: str | None) -> tuple[str | None, bool]:
    """Normalize a raw rank marker.

    The marker is trimmed and lowercased. A leading `notho` prefix is stripped. Markers resolving to
    a comparable rank are replaced by that rank's canonical marker; anything else is kept verbatim.

    Returns:
        `(marker, is_notho)` where `marker` is `None` for blank input.
    """

    value = (raw or "").strip().lower()
    if not value:
        return None, False

    is_notho = False
    if value.startswith("notho"):
        value = value[len("notho"):].strip()
        is_notho = True
        if not value:
            return None, is_notho

    rank = infer_rank_from_marker(value)
    if rank is None or rank.is_uncomparable:
        return value, is_notho
    return rank.marker, is_notho
