from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class FundEntry:
    """One NAV row from the AMFI report. Values are kept exactly as downloaded."""
    scheme_code: str
    scheme_name: str
    isin_div_payout: str
    isin_div_reinvestment: str
    net_asset_value: str
    repurchase_price: str
    sale_price: str
    date: str

    @classmethod
    def from_record(cls, record):
        # Column order of the AMFI NAV history report
        return cls(*record[:8])


@dataclass
class FundHouse:
    name: str
    funds: List[FundEntry] = field(default_factory=list)


@dataclass
class SchemeCategory:
    name: str
    fund_houses: List[FundHouse] = field(default_factory=list)
