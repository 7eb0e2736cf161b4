import logging
from datetime import datetime, timedelta

import requests

from nav_report.config import AMFI_NAV_URL, NAV_DATE_FORMAT, REQUEST_TIMEOUT
from nav_report.errors import NavFetchError

logger = logging.getLogger(__name__)


def report_date_for(today=None):
    """AMFI publishes the NAV report a day late, so we ask for yesterday."""
    today = today or datetime.now().date()
    return today - timedelta(days=1)


def parse_report_date(value):
    """Accept 2025-02-24 or 24-Feb-2025."""
    for fmt in ("%Y-%m-%d", NAV_DATE_FORMAT):
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Could not parse date: {value}")


def build_report_url(report_date, base_url=AMFI_NAV_URL):
    return f"{base_url}?frmdt={report_date.strftime(NAV_DATE_FORMAT)}"


def fetch_nav_report(report_date=None, base_url=AMFI_NAV_URL, timeout=REQUEST_TIMEOUT):
    """
    Download the NAV history report for a single date and return its text.

    One request only. Any transport or HTTP status failure is raised as
    NavFetchError.
    """
    report_date = report_date or report_date_for()
    url = build_report_url(report_date, base_url)
    logger.info(f"Downloading NAV report from: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise NavFetchError(f"Error fetching NAV report for {report_date}: {e}") from e

    # Saved reports are read as UTF-8 too
    response.encoding = "utf-8"
    text = response.text
    logger.info(f"Downloaded {len(text.splitlines())} lines of NAV data for {report_date}")
    return text
