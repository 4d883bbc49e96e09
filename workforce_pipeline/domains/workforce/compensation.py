"""Salary distribution within each department: quartiles and percentiles."""

import logging

import pandas as pd

from workforce_pipeline.utils.transforms import merge_datasets
from workforce_pipeline.utils.windows import annotate_window

logger = logging.getLogger(__name__)

SALARY_QUARTILES = 4

SALARY_QUARTILE_COLUMNS = [
    "department_id",
    "department_name",
    "employee_id",
    "salary",
    "salary_quartile",
    "salary_percentile",
    "salary_cume_dist",
]

QUARTILE_SUMMARY_COLUMNS = [
    "department_id",
    "salary_quartile",
    "salary_count",
    "min_salary",
    "max_salary",
    "avg_salary",
    "max_salary_percentile",
    "max_salary_cume_dist",
]


def analyze_salary_quartiles(
    employees: pd.DataFrame,
    salaries: pd.DataFrame,
    departments: pd.DataFrame,
) -> pd.DataFrame:
    """Place every salaried employee in their department's salary distribution.

    Within a department, salaries are ordered ascending (ties by
    ``employee_id``) and annotated with an NTILE(4) bucket, the percent rank
    and the cumulative distribution.
    """
    paid = merge_datasets(
        employees[["employee_id", "department_id"]],
        salaries[["employee_id", "salary"]],
        on="employee_id",
        how="inner",
    )
    paid = merge_datasets(
        paid,
        departments[["department_id", "department_name"]],
        on="department_id",
        how="inner",
    )
    if paid.empty:
        logger.info("No salaries joined to departments")
        return pd.DataFrame(columns=SALARY_QUARTILE_COLUMNS)

    distribution = annotate_window(
        paid,
        order_by="salary",
        columns={
            "salary_quartile": ("ntile", SALARY_QUARTILES),
            "salary_percentile": "percent_rank",
            "salary_cume_dist": "cume_dist",
        },
        partition_by="department_id",
        ascending=True,
        tiebreak=["employee_id"],
    )

    logger.info(
        "Computed salary quartiles for %d employees in %d departments",
        len(distribution),
        distribution["department_id"].nunique(),
    )
    return distribution[SALARY_QUARTILE_COLUMNS]


def summarize_quartiles(salary_quartiles: pd.DataFrame) -> pd.DataFrame:
    """Collapse per-employee rows into one row per (department, quartile)."""
    if salary_quartiles.empty:
        return pd.DataFrame(columns=QUARTILE_SUMMARY_COLUMNS)

    summary = (
        salary_quartiles.groupby(["department_id", "salary_quartile"], sort=True)
        .agg(
            salary_count=("employee_id", "count"),
            min_salary=("salary", "min"),
            max_salary=("salary", "max"),
            avg_salary=("salary", "mean"),
            max_salary_percentile=("salary_percentile", "max"),
            max_salary_cume_dist=("salary_cume_dist", "max"),
        )
        .reset_index()
    )
    return summary[QUARTILE_SUMMARY_COLUMNS]
