"""Load the workforce table exports (one CSV per table) into a snapshot."""

import logging
from pathlib import Path

import pandas as pd

from workforce_pipeline.utils.io import read_optional_table, read_table
from workforce_pipeline.utils.types import WorkforceTables

logger = logging.getLogger(__name__)

TABLE_FILES = {
    "employees": "employees.csv",
    "departments": "departments.csv",
    "projects": "projects.csv",
    "performance_reviews": "performance_reviews.csv",
    "salaries": "salaries.csv",
}
MEMBERSHIP_FILE = "project_memberships.csv"

EMPLOYEE_DATE_COLUMNS = ("hire_date", "termination_date")


def missing_tables(data_dir: Path) -> list[str]:
    return [name for name, filename in TABLE_FILES.items() if not (data_dir / filename).exists()]


def ingest_workforce_tables(data_dir: Path) -> WorkforceTables:
    """Read every table export from ``data_dir``.

    Raises ``FileNotFoundError`` when the directory or a required export is
    missing; ``project_memberships.csv`` is optional.
    """
    data_dir = Path(data_dir)
    if not data_dir.exists():
        raise FileNotFoundError(f"Workforce export directory missing: {data_dir}")

    missing = missing_tables(data_dir)
    if missing:
        raise FileNotFoundError(f"Missing table exports in {data_dir}: {', '.join(missing)}")

    frames: dict[str, pd.DataFrame] = {}
    for name, filename in TABLE_FILES.items():
        date_columns = EMPLOYEE_DATE_COLUMNS if name == "employees" else ()
        frames[name] = read_table(data_dir / filename, date_columns)

    memberships = read_optional_table(data_dir / MEMBERSHIP_FILE)
    if memberships is not None:
        logger.info("Using explicit project memberships (%d rows)", len(memberships))

    tables = WorkforceTables(project_memberships=memberships, **frames)
    logger.info("Ingested workforce tables: %s", tables.row_counts())
    return tables
