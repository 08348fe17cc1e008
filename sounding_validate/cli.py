"""
Command-line interface for sounding-validate.

Validates one or more sounding files and prints a summary of every
consistency violation found.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from sounding_validate import __version__
from sounding_validate.config import ValidatorConfig, load_config
from sounding_validate.loader import load_sounding
from sounding_validate.report import ValidationSummary, validate_sounding

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: int = logging.INFO,
                  fmt: Optional[str] = None) -> None:
    """Configure logging."""
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format=fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def run_validation(args: argparse.Namespace, config: ValidatorConfig) -> int:
    """Validate every file in ``args.paths``."""
    summary = ValidationSummary()
    n_load_failures = 0

    check_indices = config.checks.derived_indices and not args.skip_indices

    for path in args.paths:
        try:
            snd = load_sounding(path)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load {path}: {e}")
            n_load_failures += 1
            continue
        summary.add_report(validate_sounding(snd, source=path, check_indices=check_indices))

    output_format = args.format or config.output.format
    if output_format == "json":
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        summary.print_summary()

    output_path = args.output or config.output.output_path
    if output_path:
        summary.save(output_path)
        logger.info(f"Report saved to: {output_path}")

    if n_load_failures or not summary.all_passed:
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sounding-validate",
        description="Check atmospheric soundings for physical consistency",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Validate a single sounding
    sounding-validate oun_2024061200.json

    # Validate several files, JSON report to disk
    sounding-validate data/*.yaml --format json --output report.json

    # Use a configuration file
    sounding-validate --config validate.yaml data/oun.csv
        """,
    )

    parser.add_argument(
        "paths",
        nargs="+",
        help="Sounding files (.json, .yaml, .yml, .csv)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"sounding-validate {__version__}",
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to YAML or JSON configuration file",
    )
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=["text", "json"],
        help="Console output format",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Save JSON report to this path",
    )
    parser.add_argument(
        "--skip-indices",
        action="store_true",
        help="Skip CAPE/CIN/PWAT sign checks",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else ValidatorConfig()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    issues = config.validate()
    if issues:
        for issue in issues:
            print(f"Error: {issue}")
        return 1

    setup_logging(args.verbose, config.log_level, config.logging.format)

    try:
        return run_validation(args, config)
    except Exception as e:
        logging.exception(f"Validation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
