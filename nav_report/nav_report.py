import argparse
import logging
import sys

from nav_report.config import LOG_FORMAT, LOG_LEVEL
from nav_report.display import display_data, display_summary
from nav_report.errors import NavReportError
from nav_report.fetch import fetch_nav_report, parse_report_date, report_date_for
from nav_report.parser import parse_nav_report, parse_records, read_records

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Show AMFI mutual fund NAVs grouped by category and fund house.")
    parser.add_argument(
        "--date",
        type=parse_report_date,
        default=None,
        help="Report date as YYYY-MM-DD or DD-Mon-YYYY (default: yesterday).",
    )
    parser.add_argument("--input", default=None, help="Read a saved NAV report file instead of downloading.")
    parser.add_argument("--summary", action="store_true", help="Print fund house counts instead of NAV tables.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOG_LEVEL.upper(),
        help="Logging level (default: %(default)s).",
    )
    return parser.parse_args(argv)


def load_categories(args):
    if args.input:
        logger.info(f"Reading NAV report from file: {args.input}")
        with open(args.input, "r", encoding="utf-8", newline="") as f:
            return parse_records(read_records(f))

    report_date = args.date or report_date_for()
    return parse_nav_report(fetch_nav_report(report_date))


def run(args, out=None):
    """Fetch, parse and print the report. Returns True on success."""
    try:
        categories = load_categories(args)
    except NavReportError as e:
        logger.error(str(e))
        return False
    except OSError as e:
        logger.error(f"Error reading NAV report: {e}")
        return False

    if args.summary:
        display_summary(categories, out)
    else:
        display_data(categories, out)
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT, stream=sys.stderr)

    try:
        return 0 if run(args) else 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
