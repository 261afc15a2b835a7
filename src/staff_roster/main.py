"""
Main entry point for the staff roster application.
"""

import sys
import argparse
import logging

from .config import ConfigLoader, ConfigurationError, InvalidDateFormatError
from .differ import compare_shifts
from .exporters import RosterCSVExporter, RosterExcelExporter
from .reporter import ComparisonReporter, RosterReporter
from .service import RosterService
from .store import RosterStore
from .validator import AssignmentValidator

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="staff-roster",
        description="Generate staff shift rosters from the fixed rotation rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full report with all details
  staff-roster config/roster.yaml

  # Compare with a roster generated from another config
  staff-roster config/roster.yaml --compare config/next.yaml

  # Export to Excel
  staff-roster config/roster.yaml --export-xlsx roster.xlsx
        """,
    )

    parser.add_argument("config", type=str, help="Path to YAML configuration file")
    parser.add_argument(
        "--compare", type=str, help="Second YAML configuration to compare against"
    )
    parser.add_argument("--export-csv", type=str, help="Export roster to CSV file")
    parser.add_argument("--export-xlsx", type=str, help="Export roster to Excel file")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress detailed output (only show roster and hours)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        print(f"Loading configuration from: {args.config}")
        loader = ConfigLoader(args.config)
        config = loader.load()

        print("✓ Configuration loaded successfully")
        print(loader.get_summary())
        print()

        store = RosterStore(AssignmentValidator(config.allow_unassign_locked))
        service = RosterService(store)
        roster = service.generate_from_config(config)

        RosterReporter(roster).print_report(args.quiet)

        if args.compare:
            other_config = ConfigLoader(args.compare).load()
            other = service.generate_from_config(other_config)

            label_a, label_b = roster.name, other.name
            if label_a == label_b:
                label_a, label_b = f"{label_a} (1)", f"{label_b} (2)"

            comparisons = compare_shifts(roster.shifts, other.shifts)
            ComparisonReporter(comparisons, label_a, label_b).print_report(args.quiet)

        if args.export_csv:
            RosterCSVExporter(roster).export(args.export_csv)

        if args.export_xlsx:
            RosterExcelExporter(roster).export(args.export_xlsx)

        sys.exit(0)

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except InvalidDateFormatError as e:
        print(f"Date Format Error: {e}", file=sys.stderr)
        print(
            "\n Tip: Use ISO 8601 format (YYYY-MM-DD) for all dates.", file=sys.stderr
        )
        print("   Example: 2024-06-03", file=sys.stderr)
        sys.exit(1)

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        print(f"Unexpected Error: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
