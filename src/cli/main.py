"""Sift CLI entry points.
This module exposes the clean and report commands for batch runs.
It maps argparse commands onto pipeline, report and export calls.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Sequence

from core.config import SiftConfig
from core.constants import DEFAULT_TIMELINE_COMPANY
from core.errors import SiftError
from core.types import CleaningResult, ReportOptions
from ingest.pipeline import build_cleaning_options, clean_layoff_file
from reports.report_bundle import build_report_bundle, bundle_to_payload
from store.dataset_export import write_cleaned_dataset, write_report_tables


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="sift", description="Layoff dataset cleaning CLI")
    parser.add_argument("--rules", help="Override SIFT_RULES_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    rules_parent = _build_rules_parent()
    _add_clean_command(subparsers, rules_parent)
    _add_report_command(subparsers, rules_parent)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Sift CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = SiftConfig.from_env()
        if args.command == "clean":
            return _run_clean_command(config, args)
        if args.command == "report":
            return _run_report_command(config, args)
    except SiftError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _clean_source(config: SiftConfig, args: argparse.Namespace) -> CleaningResult:
    """Clean the command source file.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Cleaning result.
    """
    options = build_cleaning_options(config, rules_path=args.rules)
    return clean_layoff_file(args.source, options)


def _run_clean_command(config: SiftConfig, args: argparse.Namespace) -> int:
    """Handle clean command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = _clean_source(config, args)
    output_path = write_cleaned_dataset(result.dataset, args.output)
    for summary in result.stage_summaries:
        print(f"{summary.stage}\t{summary.input_rows}\t{summary.output_rows}")
    print(output_path)
    return 0


def _run_report_command(config: SiftConfig, args: argparse.Namespace) -> int:
    """Handle report command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    result = _clean_source(config, args)
    options = ReportOptions(
        company=args.company,
        top_n=args.top_n if args.top_n is not None else config.top_companies,
        outlier_sigma=args.sigma if args.sigma is not None else config.outlier_sigma,
    )
    bundle = build_report_bundle(result.dataset, options)
    if args.output_dir:
        for table_path in write_report_tables(bundle, args.output_dir):
            print(table_path)
        return 0
    print(json.dumps(bundle_to_payload(bundle), indent=2))
    return 0


def _build_rules_parent() -> argparse.ArgumentParser:
    """Build the shared parser accepting --rules after a subcommand."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--rules",
        default=argparse.SUPPRESS,
        help="Override SIFT_RULES_PATH for this command",
    )
    return parent


def _add_clean_command(subparsers: Any, rules_parent: argparse.ArgumentParser) -> None:
    """Register clean subcommand."""
    parser = subparsers.add_parser(
        "clean",
        parents=[rules_parent],
        help="Clean a raw layoff CSV file",
    )
    parser.add_argument("source", help="Raw layoff CSV file")
    parser.add_argument("--output", required=True, help="Cleaned CSV destination")


def _add_report_command(subparsers: Any, rules_parent: argparse.ArgumentParser) -> None:
    """Register report subcommand."""
    parser = subparsers.add_parser(
        "report",
        parents=[rules_parent],
        help="Clean a raw file and print every report",
    )
    parser.add_argument("source", help="Raw layoff CSV file")
    parser.add_argument(
        "--company",
        default=DEFAULT_TIMELINE_COMPANY,
        help="Company for the single-company timeline",
    )
    parser.add_argument("--top-n", type=int, help="Top companies to list (SIFT_TOP_COMPANIES)")
    parser.add_argument(
        "--sigma",
        type=float,
        help="Outlier standard deviation multiplier (SIFT_OUTLIER_SIGMA)",
    )
    parser.add_argument("--output-dir", help="Write one CSV per report instead of JSON")
