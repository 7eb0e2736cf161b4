from __future__ import annotations

import io
import logging
from datetime import datetime, timedelta, timezone

from airflow import DAG
from airflow.operators.python import PythonOperator

from nav_report.display import display_data
from nav_report.fetch import fetch_nav_report
from nav_report.parser import parse_nav_report

logger = logging.getLogger(__name__)

# ===================== CONFIG =====================
DEFAULT_ARGS = {
    "owner": "airflow",
    "depends_on_past": False,
    # AMFI is asked once per run
    "retries": 0,
}

# Run daily ~06:00 IST (00:30 UTC)
CRON_6AM_IST = "30 0 * * *"
# ==================================================


def run_nav_report(ds=None, **_):
    """Fetch yesterday's NAV report (relative to the run date) and log it."""
    run_date = datetime.strptime(ds, "%Y-%m-%d").date() if ds else datetime.now().date()
    report_date = run_date - timedelta(days=1)

    categories = parse_nav_report(fetch_nav_report(report_date))

    buffer = io.StringIO()
    display_data(categories, buffer)
    logger.info(buffer.getvalue())

    return {
        "report_date": report_date.isoformat(),
        "categories": len(categories),
        "fund_houses": sum(len(c.fund_houses) for c in categories),
        "schemes": sum(len(fh.funds) for c in categories for fh in c.fund_houses),
    }


with DAG(
    dag_id="amfi_nav_report",
    description="AMFI NAV history report grouped by scheme category and fund house",
    default_args=DEFAULT_ARGS,
    schedule=CRON_6AM_IST,
    start_date=datetime(2025, 1, 1, tzinfo=timezone.utc),
    catchup=False,
    max_active_runs=1,
    tags=["mutualfunds", "nav", "amfi"],
) as dag:

    nav_report = PythonOperator(
        task_id="fetch_and_show_nav_report",
        python_callable=run_nav_report,
    )

    nav_report
