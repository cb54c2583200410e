"""Deterministic scientific name builder.

The builder renders a `TaxonName` in a single pass following botanical/zoological formatting
conventions. It never fails: missing name parts are simply omitted, and an empty rendering is
returned as `None`.
"""

from __future__ import annotations

from src.names.normalize import HYBRID_MARKER, ascii_fold, decompose, hyphenate_epithet
from src.names.ranks import NamePart, NameType, Rank
from src.names.schema import (
    CANONICAL,
    CANONICAL_COMPLETE,
    CANONICAL_WITH_MARKER,
    FULL_NAME,
    PRESETS,
    RenderOptions,
    RenderProfile,
    TaxonName,
)


def _authorship(name: TaxonName) -> str:
    """Bracket (original) authorship followed by the current citation, each only if present."""

    out: list[str] = []
    if name.bracket_authorship is not None:
        if name.bracket_year is not None:
            out.append(f" ({name.bracket_authorship}, {name.bracket_year})")
        else:
            out.append(f" ({name.bracket_authorship})")
    elif name.bracket_year is not None:
        out.append(f" ({name.bracket_year})")

    if name.authorship is not None:
        out.append(f" {name.authorship}")
    if name.year is not None:
        out.append(f", {name.year}")
    return "".join(out)


def _genus(name: TaxonName, options: RenderOptions) -> str:
    if name.genus_or_above is None:
        return ""
    # A standalone infrageneric name only shows its genus when asked to.
    if not (
            options.genus_for_infrageneric
            or name.infrageneric is None
            or name.specific_epithet is not None
    ):
        return ""

    prefix = HYBRID_MARKER if options.hybrid_marker and name.notho == NamePart.GENERIC else ""
    if options.abbreviate_genus:
        return f"{prefix}{name.genus_or_above[0]}."
    return f"{prefix}{name.genus_or_above}"


def _supraspecific(name: TaxonName, rank: Rank | None, options: RenderOptions) -> str:
    """Terminal part for names without a species epithet (genus or infrageneric)."""

    out: list[str] = []
    if rank == Rank.SPECIES:
        if options.show_indet:
            out.append(" spec.")
    elif rank is not None and rank.is_infraspecific:
        if options.show_indet:
            out.append(f" {rank.marker}")
    elif name.infrageneric is not None:
        if options.rank_marker and name.rank_marker is not None:
            # Known rank: explicit marker, as botanical infrageneric names are formed.
            out.append(f" {name.rank_marker} {name.infrageneric}")
        elif options.genus_for_infrageneric and name.genus_or_above is not None:
            out.append(f" ({name.infrageneric})")
        else:
            out.append(name.infrageneric)

    if options.authorship:
        out.append(_authorship(name))
    return "".join(out)


def _species(name: TaxonName, rank: Rank | None, options: RenderOptions) -> str:
    """Species and optional infraspecific part."""

    assert name.specific_epithet is not None

    out: list[str] = []
    if (
            options.show_infrageneric
            and name.infrageneric is not None
            and (name.rank_marker is None or rank == Rank.GENUS)
    ):
        out.append(f" ({name.infrageneric})")

    out.append(" ")
    if options.hybrid_marker and name.notho == NamePart.SPECIFIC:
        out.append(HYBRID_MARKER)
    out.append(hyphenate_epithet(name.specific_epithet))

    if name.infraspecific_epithet is None:
        # A cultivar epithet stands in for the indetermined cultivar marker.
        if (
                options.show_indet
                and rank is not None
                and rank.is_infraspecific
                and (rank != Rank.CULTIVAR or name.cultivar_epithet is None)
        ):
            out.append(f" {rank.marker}")
        if options.authorship:
            out.append(_authorship(name))
        return "".join(out)

    out.append(" ")
    show_marker = options.rank_marker and name.rank_marker is not None
    if options.hybrid_marker and name.notho == NamePart.INFRASPECIFIC:
        out.append("notho" if show_marker else HYBRID_MARKER)
    if show_marker:
        out.append(f"{name.rank_marker} ")
    out.append(hyphenate_epithet(name.infraspecific_epithet))

    if options.authorship and not name.is_autonym:
        out.append(_authorship(name))
    return "".join(out)


def _adornments(name: TaxonName, options: RenderOptions) -> str:
    out: list[str] = []
    if options.show_strain and name.strain is not None:
        out.append(f" {name.strain}")
    if options.show_cultivar and name.cultivar_epithet is not None:
        out.append(f" '{name.cultivar_epithet}'")
    if options.show_sensu and name.sensu is not None:
        out.append(f" {name.sensu}")
    if options.show_nom_status and name.nom_status is not None:
        out.append(f", {name.nom_status}")
    if options.show_remarks and name.remarks is not None:
        out.append(f" [{name.remarks}]")
    return "".join(out)


def build_name(name: TaxonName, options: RenderOptions) -> str | None:
    """Render a name with the parts and adornments selected by `options`.

    Returns:
        The rendered name, or `None` if nothing is left to show.
    """

    rank = name.rank
    out: list[str] = []

    if name.name_type == NameType.CANDIDATUS:
        out.append("Candidatus ")
    out.append(_genus(name, options))

    if name.specific_epithet is None:
        out.append(_supraspecific(name, rank, options))
    else:
        out.append(_species(name, rank, options))
    out.append(_adornments(name, options))

    value = "".join(out).strip()
    # Decomposition expands ligatures into letters the ASCII folding can handle.
    if options.decompose_unicode:
        value = decompose(value)
    if options.ascii_only:
        value = ascii_fold(value)
    return value or None


def render(name: TaxonName, profile: RenderProfile | str) -> str | None:
    """Render a name using one of the named presets."""

    return build_name(name, PRESETS[RenderProfile(profile)])


def canonical_name(name: TaxonName) -> str | None:
    """Up to three name parts without rank or hybrid markers, authorship or notes, ASCII only.

    For example `Abies alba`, `Abies alba alpina` or `Heucherella tiarelloides`.
    """

    return build_name(name, CANONICAL)


def canonical_name_with_marker(name: TaxonName) -> str | None:
    """Canonical name with rank and hybrid markers, cultivar and strain, ASCII only.

    For example `Abies alba subsp. alpina`, `Abies sect. Bracteata` or `×Heucherella tiarelloides`.
    """

    return build_name(name, CANONICAL_WITH_MARKER)


def canonical_name_complete(name: TaxonName) -> str | None:
    """Canonical name with markers, authorship, cultivar or strain."""

    return build_name(name, CANONICAL_COMPLETE)


def full_name(name: TaxonName) -> str | None:
    """The name with all details that exist."""

    return build_name(name, FULL_NAME)


def authorship_complete(name: TaxonName) -> str:
    """The full concatenated authorship, or an empty string."""

    return _authorship(name).strip()


def canonical_species_name(name: TaxonName) -> str | None:
    """The species binomial for names at or below species rank, else `None`."""

    if name.is_binomial:
        return f"{name.genus_or_above} {name.specific_epithet}"
    return None
