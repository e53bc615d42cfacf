"""Command-line interface for yearpick."""

import argparse
import logging
import sys
from dataclasses import dataclass
from datetime import date

from app import YearPickerApp, configure_logging
from constants import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR
from controller.validators import parse_iso_date
from model import YearRangeConfig
from ui import PickerOptions

YEARPICK_VERSION = "0.1.0"

log = logging.getLogger(__name__)


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    year_range: YearRangeConfig
    default_date: date | None
    no_calendar: bool
    multiple: bool
    pickers: int

    @property
    def picker_options(self) -> PickerOptions:
        return PickerOptions(
            no_calendar=self.no_calendar,
            mode="multiple" if self.multiple else "single",
        )


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


def _iso_date(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    parsed = parse_iso_date(value)
    if parsed is None:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}")
    return parsed


def _positive_int(value: str) -> int:
    """argparse type for a count of at least one."""
    if not value.strip().isdigit() or int(value) < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return int(value)


class YearpickHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "yearpick - date pickers with a constrained year select.",
            f"Version: {YEARPICK_VERSION}",
            "",
            "Usage:",
            "  yearpick [options]",
            "",
            "Year Range:",
            f"  --min-year <year>                     First year offered (default {DEFAULT_MIN_YEAR})",
            f"  --max-year <year>                     Last year offered (default {DEFAULT_MAX_YEAR})",
            "",
            "Picker Options:",
            "  --date <YYYY-MM-DD>                   Preselected date (default: none, opens on today)",
            "  --multiple                            Allow selecting several dates",
            "  --no-calendar                         Time entry only (year select inactive)",
            "  --pickers <n>                         Number of independent pickers (default 1)",
            "",
            "Other:",
            "  --version                             Print version and exit",
            "  -h, --help                            Show this help",
            "",
            "Keys:",
            "  ctrl+o  open/close the calendar    escape  close    ctrl+q  quit",
            "",
            "Examples:",
            "  yearpick --min-year 1950 --max-year 2030 --date 1999-12-31",
            "  yearpick --pickers 2 --multiple",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for yearpick CLI."""
    parser = argparse.ArgumentParser(
        prog="yearpick",
        formatter_class=YearpickHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--min-year", type=int, default=DEFAULT_MIN_YEAR, help=argparse.SUPPRESS)
    parser.add_argument("--max-year", type=int, default=DEFAULT_MAX_YEAR, help=argparse.SUPPRESS)
    parser.add_argument("--date", type=_iso_date, default=None, help=argparse.SUPPRESS)
    parser.add_argument("--no-calendar", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--multiple", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--pickers", type=_positive_int, default=1, help=argparse.SUPPRESS)
    parser.add_argument("--version", action="version", version=f"yearpick {YEARPICK_VERSION}")
    return parser


def parse_args() -> ParsedArgs:
    """Parse command line arguments.

    Returns:
        ParsedArgs with the year range and picker options.
    """
    args = create_parser().parse_args(sys.argv[1:])

    # An inverted range is allowed: the year select is simply empty
    year_range = YearRangeConfig.resolve({"min_year": args.min_year, "max_year": args.max_year})

    return ParsedArgs(
        year_range=year_range,
        default_date=args.date,
        no_calendar=args.no_calendar,
        multiple=args.multiple,
        pickers=args.pickers,
    )


def main() -> None:
    """Main entry point."""
    parsed = parse_args()

    try:
        configure_logging()
    except OSError as e:
        print_error_box("Cannot open log file", str(e), "Continuing without a log file.")

    if parsed.year_range.is_empty:
        log.warning(f"Empty year range: {parsed.year_range}")

    app = YearPickerApp(
        year_range=parsed.year_range,
        options=parsed.picker_options,
        default_date=parsed.default_date,
        pickers=parsed.pickers,
        version=YEARPICK_VERSION,
    )
    app.run()


if __name__ == "__main__":
    main()
