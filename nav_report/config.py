import os

# ===================== CONFIG =====================
AMFI_NAV_URL = os.getenv(
    "AMFI_NAV_URL",
    "https://portal.amfiindia.com/DownloadNAVHistoryReport_Po.aspx",
)

# e.g. 24-Feb-2025
NAV_DATE_FORMAT = os.getenv("NAV_DATE_FORMAT", "%d-%b-%Y")

# Single column lines containing this text are scheme categories,
# every other single column line is a fund house
CATEGORY_MARKER = os.getenv("NAV_CATEGORY_MARKER", "Schemes")

# Seconds; unset means wait for AMFI as long as it takes
_timeout = os.getenv("NAV_REQUEST_TIMEOUT", "").strip()
REQUEST_TIMEOUT = float(_timeout) if _timeout else None

LOG_LEVEL = os.getenv("NAV_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

DISPLAY_COLUMNS = [
    "Scheme Code",
    "Scheme Name",
    "ISIN Div Payout",
    "ISIN Div Reinvestment",
    "Net Asset Value",
    "Date",
]
# ==================================================
