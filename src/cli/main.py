"""Explorer filters CLI entry points.

This module exposes the filter engine for scripting and debugging.
It maps argparse commands onto reducer, resolver, and catalog calls.
"""

from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from catalog.catalog_io import load_configured_catalog
from catalog.measurement_tests import build_test_name_options
from core.config import ExplorerConfig, parse_frozen_today
from core.constants import ANY, DEFAULT_STATUS, SUPPORTED_STATUSES
from core.errors import ExplorerError
from core.types import OptionGroup
from filters.applicability import resolve_applicability
from filters.query_codec import filter_to_query
from filters.reducer import FieldChanged, FilterSession, TestNameChanged


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="explorer-filters",
        description="Measurement search filter engine",
    )
    parser.add_argument("--today", help="Override EXPLORER_FROZEN_TODAY (YYYY-MM-DD)")
    parser.add_argument("--catalog", help="Override EXPLORER_CATALOG_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_fields_command(subparsers)
    _add_tests_command(subparsers)
    _add_normalize_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the explorer filters CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.today, args.catalog)
        if args.command == "fields":
            return _run_fields_command(args)
        if args.command == "tests":
            return _run_tests_command(config)
        if args.command == "normalize":
            return _run_normalize_command(config, args)
    except ExplorerError as error:
        print(f"error={error}")
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(today: str | None, catalog: str | None) -> ExplorerConfig:
    """Build config with optional CLI overrides.

    Args:
        today: Optional frozen UTC date.
        catalog: Optional catalog path.

    Returns:
        Configured runtime settings.
    """
    config = ExplorerConfig.from_env()
    if today:
        config = replace(config, frozen_today=parse_frozen_today(today))
    if catalog:
        config = replace(config, catalog_path=Path(catalog).expanduser().resolve())
    return config


def _run_fields_command(args: argparse.Namespace) -> int:
    """Handle fields command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    applicability = resolve_applicability(args.test_name)
    print(f"show_domain={str(applicability.show_domain).lower()}")
    print(f"show_confirmed={str(applicability.show_confirmed).lower()}")
    print(f"show_anomalies={str(applicability.show_anomalies).lower()}")
    return 0


def _run_tests_command(config: ExplorerConfig) -> int:
    """Handle tests command.

    Args:
        config: Runtime settings.

    Returns:
        Exit code.
    """
    catalog = load_configured_catalog(config)
    for entry in build_test_name_options(catalog.test_names):
        if isinstance(entry, OptionGroup):
            for option in entry.options:
                print(f"{entry.group}\t{option.value}\t{option.label}")
        else:
            print(f"-\t{entry.value}\t{entry.label}")
    return 0


def _run_normalize_command(config: ExplorerConfig, args: argparse.Namespace) -> int:
    """Handle normalize command.

    Args:
        config: Runtime settings.
        args: Parsed CLI args.

    Returns:
        Exit code; 1 when any field fails validation.
    """
    session = FilterSession(config.build_clock())
    session.dispatch(TestNameChanged(args.test_name))
    session.dispatch(FieldChanged("country", args.country))
    session.dispatch(FieldChanged("asn", args.asn))
    session.dispatch(FieldChanged("domain", args.domain))
    session.dispatch(FieldChanged("since", args.since))
    if args.until is not None:
        session.dispatch(FieldChanged("until", args.until))
    session.dispatch(FieldChanged("status", args.status))
    session.dispatch(FieldChanged("hide_failed_measurements", not args.show_failed))
    result = session.submit()
    if result.filter is None:
        for issue in result.issues:
            print(f"field_error={issue.field}:{issue.kind}:{issue.message}")
        return 1
    print(json.dumps(result.filter.to_payload(), sort_keys=True))
    if args.query:
        print(json.dumps(filter_to_query(result.filter), sort_keys=True))
    return 0


def _add_fields_command(subparsers: Any) -> None:
    """Register fields subcommand."""
    parser = subparsers.add_parser("fields", help="Show optional fields for a test type")
    parser.add_argument("--test-name", default=ANY, help="Test identifier, XX for any")


def _add_tests_command(subparsers: Any) -> None:
    """Register tests subcommand."""
    subparsers.add_parser("tests", help="List grouped test name options")


def _add_normalize_command(subparsers: Any) -> None:
    """Register normalize subcommand."""
    parser = subparsers.add_parser(
        "normalize",
        help="Validate filter values and print the normalized filter",
    )
    parser.add_argument("--test-name", default=ANY, help="Test identifier, XX for any")
    parser.add_argument("--country", default=ANY, help="Alpha-2 country code, XX for any")
    parser.add_argument("--asn", default="", help="ASN, e.g. AS1234")
    parser.add_argument("--domain", default="", help="Domain or IP address")
    parser.add_argument("--since", default="", help="Range start date (YYYY-MM-DD)")
    parser.add_argument("--until", help="Range end date (YYYY-MM-DD), defaults to tomorrow")
    parser.add_argument(
        "--status",
        default=DEFAULT_STATUS,
        choices=SUPPORTED_STATUSES,
        help="Result status filter",
    )
    parser.add_argument(
        "--show-failed",
        action="store_true",
        help="Include failed measurements",
    )
    parser.add_argument(
        "--query",
        action="store_true",
        help="Also print the deep-link query parameters",
    )
