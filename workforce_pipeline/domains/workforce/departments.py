"""Department-level performance metrics over raw review scores."""

import logging

import pandas as pd

from workforce_pipeline.utils.transforms import merge_datasets
from workforce_pipeline.utils.windows import annotate_window

logger = logging.getLogger(__name__)

DEPARTMENT_METRIC_COLUMNS = [
    "department_id",
    "department_name",
    "average_department_score",
    "min_department_score",
    "max_department_score",
    "stddev_department_score",
    "employee_count",
    "total_department_score",
    "department_performance_rank",
]


def aggregate_departments(
    employees: pd.DataFrame,
    reviews: pd.DataFrame,
    departments: pd.DataFrame,
) -> pd.DataFrame:
    """Summarize every review in each department and rank departments globally.

    Statistics run over individual reviews, so an employee with more reviews
    weighs more. ``department_performance_rank`` is a row number on
    descending average score; ties fall back to ``department_id`` order.
    """
    reviewed = merge_datasets(
        employees[["employee_id", "department_id"]],
        reviews[["employee_id", "score"]],
        on="employee_id",
        how="inner",
    )
    reviewed = merge_datasets(
        reviewed,
        departments[["department_id", "department_name"]],
        on="department_id",
        how="inner",
    )
    if reviewed.empty:
        logger.info("No reviews joined to departments")
        return pd.DataFrame(columns=DEPARTMENT_METRIC_COLUMNS)

    metrics = (
        reviewed.groupby(["department_id", "department_name"], sort=True)
        .agg(
            average_department_score=("score", "mean"),
            min_department_score=("score", "min"),
            max_department_score=("score", "max"),
            stddev_department_score=("score", "std"),
            employee_count=("employee_id", "nunique"),
            total_department_score=("score", "sum"),
        )
        .reset_index()
    )

    ranked = annotate_window(
        metrics,
        order_by="average_department_score",
        columns={"department_performance_rank": "row_number"},
        ascending=False,
        tiebreak=["department_id"],
    )

    logger.info("Aggregated metrics for %d departments", len(ranked))
    return ranked[DEPARTMENT_METRIC_COLUMNS]
