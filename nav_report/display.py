import sys

import pandas as pd

from nav_report.config import DISPLAY_COLUMNS


def fund_house_frame(fund_house):
    """One row per scheme. Repurchase and sale prices are not shown."""
    rows = [
        (
            fund.scheme_code,
            fund.scheme_name,
            fund.isin_div_payout,
            fund.isin_div_reinvestment,
            fund.net_asset_value,
            fund.date,
        )
        for fund in fund_house.funds
    ]
    return pd.DataFrame(rows, columns=DISPLAY_COLUMNS)


def display_data(categories, out=None):
    """Print every category, then a table per fund house."""
    out = out or sys.stdout
    for category in categories:
        out.write(f"\nScheme Category: {category.name}\n\n")

        for fund_house in category.fund_houses:
            out.write(f"Fund House: {fund_house.name}\n")
            out.write(fund_house_frame(fund_house).to_string(index=False))
            out.write("\n\n")


def summary_frame(categories):
    rows = [
        (category.name, fund_house.name, len(fund_house.funds))
        for category in categories
        for fund_house in category.fund_houses
    ]
    return pd.DataFrame(rows, columns=["Scheme Category", "Fund House", "Schemes"])


def display_summary(categories, out=None):
    out = out or sys.stdout
    df = summary_frame(categories)
    if df.empty:
        out.write("No NAV data found\n")
        return
    out.write(df.to_string(index=False))
    out.write(f"\n\nTotal: {len(categories)} categories, {len(df)} fund houses, {df['Schemes'].sum()} schemes\n")
