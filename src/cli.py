"""Command-line entry point.

Examples:
    python -m src.cli render '{"genus_or_above": "Abies", "specific_epithet": "alba"}'
    python -m src.cli validate ALTITUDE "100,200"
    python -m src.cli validate EXTINCT true --domain checklist
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

from pydantic import ValidationError

from src.config.logging import configure_logging
from src.config.settings import Settings, load_settings
from src.names.renderer import render
from src.names.schema import RenderProfile, TaxonName
from src.params.registry import SearchDomain, get_parameter
from src.params.schema import InvalidParameterValueError, ParameterRange
from src.params.validator import parse_value

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_INVALID = 2


def _render(args: argparse.Namespace, settings: Settings) -> int:
    try:
        record = json.loads(args.record)
        name = TaxonName.model_validate(record)
    except (json.JSONDecodeError, ValidationError) as exc:
        print(f"invalid name record: {exc}")
        return EXIT_INVALID

    profile = RenderProfile(args.profile) if args.profile else settings.name_profile
    rendered = render(name, profile)
    logger.info("rendered profile=%s empty=%s", profile, rendered is None)
    if rendered is None:
        return EXIT_EMPTY

    print(rendered)
    return EXIT_OK


def _format_bound(value: object) -> str:
    return "*" if value is None else str(value)


def _validate(args: argparse.Namespace, settings: Settings) -> int:
    try:
        descriptor = get_parameter(args.parameter, args.domain)
    except KeyError as exc:
        print(exc.args[0])
        return EXIT_INVALID

    try:
        parsed = parse_value(descriptor, args.value, allow_wildcard=settings.allow_wildcard)
    except InvalidParameterValueError as exc:
        logger.info("invalid parameter=%s", descriptor.name)
        print(exc)
        return EXIT_INVALID

    if isinstance(parsed, ParameterRange):
        print(f"ok range {_format_bound(parsed.low)}..{_format_bound(parsed.high)}")
    else:
        print("ok")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render scientific names and validate search parameter values."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a name record given as JSON.")
    render_parser.add_argument("record", help="JSON object with TaxonName fields.")
    render_parser.add_argument(
        "--profile",
        choices=[p.value for p in RenderProfile],
        help="Rendering preset (defaults to NAME_PROFILE).",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate a search parameter value.")
    validate_parser.add_argument("parameter", help="Parameter name, e.g. ALTITUDE.")
    validate_parser.add_argument("value", help="Raw value, e.g. 100,200.")
    validate_parser.add_argument(
        "--domain",
        choices=[d.value for d in SearchDomain],
        default=SearchDomain.occurrence.value,
        help="Parameter registry to look the parameter up in.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit code."""

    args = _build_parser().parse_args(argv)

    settings = load_settings()
    configure_logging(settings.log_level)

    if args.command == "render":
        return _render(args, settings)
    return _validate(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
