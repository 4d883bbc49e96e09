"""Normalize and clean the raw workforce tables before analysis."""

import logging

import pandas as pd

from workforce_pipeline.utils.types import WorkforceTables

logger = logging.getLogger(__name__)

EMPLOYEE_COLUMNS = ["employee_id", "name", "department_id", "hire_date", "termination_date"]
DEPARTMENT_COLUMNS = ["department_id", "department_name"]
PROJECT_COLUMNS = ["project_id", "project_name"]
REVIEW_COLUMNS = ["review_id", "employee_id", "score"]
SALARY_COLUMNS = ["employee_id", "salary"]
MEMBERSHIP_COLUMNS = ["employee_id", "project_id"]


def _normalize_name(name) -> str:
    """Strip whitespace from names; non-strings become empty."""
    return name.strip() if isinstance(name, str) else ""


def _ensure_columns(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Add any missing expected columns as nulls so empty exports still join."""
    df = df.copy()
    for col in columns:
        if col not in df.columns:
            df[col] = pd.Series(dtype="object")
    return df


def normalize_employees(employees: pd.DataFrame) -> pd.DataFrame:
    df = _ensure_columns(employees, EMPLOYEE_COLUMNS)
    df["name"] = df["name"].apply(_normalize_name)
    for col in ("hire_date", "termination_date"):
        df[col] = pd.to_datetime(df[col], errors="coerce")
    return df


def normalize_tables(tables: WorkforceTables) -> WorkforceTables:
    """Coerce dtypes and fill in missing columns for every table."""
    departments = _ensure_columns(tables.departments, DEPARTMENT_COLUMNS)
    departments["department_name"] = departments["department_name"].apply(_normalize_name)

    projects = _ensure_columns(tables.projects, PROJECT_COLUMNS)
    projects["project_name"] = projects["project_name"].apply(_normalize_name)

    reviews = _ensure_columns(tables.performance_reviews, REVIEW_COLUMNS)
    reviews["score"] = pd.to_numeric(reviews["score"], errors="coerce").astype("float64")

    salaries = _ensure_columns(tables.salaries, SALARY_COLUMNS)
    salaries["salary"] = pd.to_numeric(salaries["salary"], errors="coerce").astype("float64")

    memberships = tables.project_memberships
    if memberships is not None:
        memberships = _ensure_columns(memberships, MEMBERSHIP_COLUMNS).drop_duplicates(MEMBERSHIP_COLUMNS)

    normalized = WorkforceTables(
        employees=normalize_employees(tables.employees),
        departments=departments,
        projects=projects,
        performance_reviews=reviews,
        salaries=salaries,
        project_memberships=memberships,
    )
    logger.info("Normalized workforce tables: %s", normalized.row_counts())
    return normalized
