"""Command line front end.

Interactive mode (no arguments) asks for a date and a pattern in a loop:

    $ dateformatter
    Insert date (YYYY-MM-DD): 2024-03-17
    Insert format: dd mmmm yyyy
    Formatted date: 17 March 2024

One-shot mode formats a single date:

    $ dateformatter 2024-01-05 m/d/yy
    1/5/24
    $ dateformatter --today yyyy-mm-dd

Exit Codes:
    0: Success (or end of interactive input)
    1: Invalid date or pattern
    2: Usage error

Python 3.13+.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import date

from . import __version__
from .diagnostics import DateFormatError, DiagnosticFormatter, OutputFormat
from .engine import format_date

__all__ = ["main", "parse_args"]

logger = logging.getLogger(__name__)

DATE_PROMPT = "Insert date (YYYY-MM-DD): "
FORMAT_PROMPT = "Insert format: "


def parse_args(args: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="dateformatter",
        description="Format dates with patterns like 'dd mmmm yyyy' or 'm/d/yy'",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="ARG",
        help="DATE PATTERN, or PATTERN alone with --today; none for interactive mode",
    )
    parser.add_argument(
        "--today",
        action="store_true",
        help="Format the current local date",
    )
    parser.add_argument(
        "--error-format",
        choices=[str(option) for option in OutputFormat],
        default=str(OutputFormat.RUST),
        help="How pattern errors are shown (default: rust)",
    )
    parser.add_argument(
        "--color",
        action="store_true",
        help="Highlight pattern errors with ANSI colors",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parsed = parser.parse_args(args)

    expected = 1 if parsed.today else 2
    if parsed.arguments and len(parsed.arguments) != expected:
        parser.error("expected DATE PATTERN, or PATTERN with --today")
    if parsed.today and not parsed.arguments:
        parser.error("--today requires a PATTERN")
    return parsed


def _describe(error: DateFormatError, formatter: DiagnosticFormatter) -> str:
    if error.diagnostic is not None:
        return formatter.format(error.diagnostic)
    return str(error)


def _format_once(value: date, pattern: str, formatter: DiagnosticFormatter) -> int:
    try:
        print(format_date(value, pattern))
    except DateFormatError as e:
        print(_describe(e, formatter), file=sys.stderr)
        return 1
    return 0


def _interactive(formatter: DiagnosticFormatter) -> int:
    """Prompt for date and pattern until end of input."""
    while True:
        try:
            raw_date = input(DATE_PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        try:
            value = date.fromisoformat(raw_date.strip())
        except ValueError as e:
            print(f"Error: {e}")
            continue

        try:
            pattern = input(FORMAT_PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        try:
            print(f"Formatted date: {format_date(value, pattern.strip())}")
        except DateFormatError as e:
            print(f"Error: {_describe(e, formatter)}")


def main(args: Sequence[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command line arguments (None uses sys.argv)

    Returns:
        Exit code: 0 success, 1 invalid date or pattern
    """
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(parsed.error_format), color=parsed.color
    )

    if not parsed.arguments:
        logger.debug("Starting interactive mode")
        return _interactive(formatter)

    if parsed.today:
        return _format_once(date.today(), parsed.arguments[0], formatter)

    raw_date, pattern = parsed.arguments
    try:
        value = date.fromisoformat(raw_date)
    except ValueError as e:
        print(f"Error: invalid date '{raw_date}': {e}", file=sys.stderr)
        return 1
    return _format_once(value, pattern, formatter)
