import csv
import io
import logging
from dataclasses import dataclass

from nav_report.config import CATEGORY_MARKER
from nav_report.errors import MalformedReportError
from nav_report.models import FundEntry, FundHouse, SchemeCategory

logger = logging.getLogger(__name__)

# Scheme Code;Scheme Name;ISIN Div Payout;ISIN Div Reinvestment;NAV;Repurchase;Sale;Date
FUND_RECORD_FIELDS = 8


def contains_marker(marker):
    """Build the default category test: the header text contains `marker`."""
    def is_category(name):
        return marker in name
    return is_category


def is_blank(record):
    return len(record) == 1 and not record[0].strip()


def read_records(stream):
    """
    Yield semicolon delimited records from an open text stream.

    The AMFI report mixes 1 column header lines with 8 column NAV lines,
    so no field count is enforced. Bad quoting stops the read with
    MalformedReportError.
    """
    reader = csv.reader(stream, delimiter=";", strict=True)
    try:
        for record in reader:
            # csv gives [] for a completely empty line
            if record:
                yield record
    except csv.Error as e:
        raise MalformedReportError(
            f"Error reading NAV report at line {reader.line_num}: {e}",
            line_num=reader.line_num,
        ) from e
    except UnicodeDecodeError as e:
        raise MalformedReportError(
            f"NAV report is not valid UTF-8 after line {reader.line_num}: {e}",
            line_num=reader.line_num,
        ) from e


@dataclass
class ParseStats:
    records: int = 0
    blank_lines: int = 0
    nav_rows: int = 0
    orphan_rows: int = 0
    unrecognised_rows: int = 0
    empty_fund_houses: int = 0
    orphan_fund_houses: int = 0
    empty_categories: int = 0


class NavReportParser:
    """
    Turns the flat AMFI NAV report into categories -> fund houses -> funds.

    Lines are classified one at a time:
      * a single empty column is a separator and is skipped
      * a single column is a header; it opens a scheme category when
        `is_category` accepts it, otherwise a fund house
      * 8 columns are a NAV row for the open fund house

    A fund house is closed when the next header arrives or the input ends
    and is only kept if it received at least one NAV row. Categories are
    kept only if they hold at least one fund house.
    """

    def __init__(self, is_category=None):
        self.is_category = is_category or contains_marker(CATEGORY_MARKER)
        self._reset()

    def _reset(self):
        self.categories = []
        self.stats = ParseStats()
        self._category = None
        self._fund_house = None

    def parse(self, records):
        self._reset()
        for record in records:
            self.feed(record)
        return self.finish()

    def feed(self, record):
        self.stats.records += 1

        if is_blank(record):
            self.stats.blank_lines += 1
            return

        if len(record) == 1:
            name = record[0].strip()
            if self.is_category(name):
                self._open_category(name)
            else:
                self._open_fund_house(name)
        elif len(record) == FUND_RECORD_FIELDS:
            self._add_fund(record)
        else:
            self.stats.unrecognised_rows += 1
            logger.debug(f"Skipping record {self.stats.records} with {len(record)} columns")

    def finish(self):
        self._close_category()
        logger.info(
            f"Parsed {len(self.categories)} scheme categories, "
            f"{sum(len(c.fund_houses) for c in self.categories)} fund houses and "
            f"{self.stats.nav_rows} NAV records"
        )
        dropped = self.stats.orphan_rows + self.stats.unrecognised_rows
        if dropped:
            logger.info(f"Dropped {dropped} records that did not fit the report layout")
        return self.categories

    def _open_category(self, name):
        self._close_category()
        self._category = SchemeCategory(name=name)

    def _open_fund_house(self, name):
        self._close_fund_house()
        self._fund_house = FundHouse(name=name)

    def _add_fund(self, record):
        if self._fund_house is None:
            self.stats.orphan_rows += 1
            logger.debug(f"NAV record {self.stats.records} has no fund house, skipping")
            return
        self._fund_house.funds.append(FundEntry.from_record(record))
        self.stats.nav_rows += 1

    def _close_fund_house(self):
        fund_house, self._fund_house = self._fund_house, None
        if fund_house is None:
            return
        if not fund_house.funds:
            self.stats.empty_fund_houses += 1
            return
        if self._category is None:
            self.stats.orphan_fund_houses += 1
            logger.debug(f"Fund house '{fund_house.name}' appears before any scheme category, skipping")
            return
        self._category.fund_houses.append(fund_house)

    def _close_category(self):
        self._close_fund_house()
        category, self._category = self._category, None
        if category is None:
            return
        if category.fund_houses:
            self.categories.append(category)
        else:
            self.stats.empty_categories += 1


def parse_records(records, is_category=None):
    return NavReportParser(is_category).parse(records)


def parse_nav_report(text, is_category=None):
    """Parse the full report text as returned by AMFI."""
    return parse_records(read_records(io.StringIO(text, newline="")), is_category)
