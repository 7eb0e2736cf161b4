import pytest

SAMPLE_REPORT = (
    "Scheme Code;Scheme Name;ISIN Div Payout/ISIN Growth;ISIN Div Reinvestment;"
    "Net Asset Value;Repurchase Price;Sale Price;Date\r\n"
    "\r\n"
    "Open Ended Schemes(Debt Scheme - Banking and PSU Fund)\r\n"
    "\r\n"
    "Aditya Birla Sun Life Mutual Fund\r\n"
    "\r\n"
    "119551;Aditya Birla Sun Life Banking & PSU Debt Fund - DIRECT - IDCW;INF209KA12Z1;INF209KA13Z9;107.5126;;;18-Oct-2026\r\n"
    "119552;Aditya Birla Sun Life Banking & PSU Debt Fund - Direct - Growth;INF209K01ZU5;;361.2340;;;18-Oct-2026\r\n"
    "\r\n"
    "Axis Mutual Fund\r\n"
    "\r\n"
    "Baroda BNP Paribas Mutual Fund\r\n"
    "\r\n"
    "152047;Baroda BNP Paribas Banking and PSU Fund - Direct - Growth;INF251K01SS8;;11.9204;;;18-Oct-2026\r\n"
    "\r\n"
    "Close Ended Schemes(Income)\r\n"
    "\r\n"
    "HDFC Mutual Fund\r\n"
    "\r\n"
    "Interval Fund Schemes(Income)\r\n"
    "\r\n"
    "ICICI Prudential Mutual Fund\r\n"
    "\r\n"
    "101234;ICICI Prudential Interval Fund - Growth;INF109K01AB1;INF109K01AC9;25.1000;24.9000;25.3000;18-Oct-2026\r\n"
)


@pytest.fixture
def sample_report():
    return SAMPLE_REPORT


@pytest.fixture
def sample_report_file(tmp_path):
    path = tmp_path / "nav_report.txt"
    path.write_bytes(SAMPLE_REPORT.encode("utf-8"))
    return path
