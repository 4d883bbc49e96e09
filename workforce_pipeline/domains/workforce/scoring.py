"""Per-employee performance review statistics."""

import logging

import pandas as pd

from workforce_pipeline.utils.transforms import merge_datasets

logger = logging.getLogger(__name__)

EMPLOYEE_SCORE_COLUMNS = [
    "employee_id",
    "employee_name",
    "department_id",
    "average_score",
    "review_count",
    "min_score",
    "max_score",
    "stddev_score",
]


def score_employees(employees: pd.DataFrame, reviews: pd.DataFrame) -> pd.DataFrame:
    """Aggregate every employee's review scores.

    Employees without reviews drop out of the inner join. The standard
    deviation is the sample one, so a single review leaves it NaN.
    """
    reviewed = merge_datasets(
        employees[["employee_id", "name", "department_id"]],
        reviews[["employee_id", "score"]],
        on="employee_id",
        how="inner",
    )
    if reviewed.empty:
        logger.info("No reviewed employees to score")
        return pd.DataFrame(columns=EMPLOYEE_SCORE_COLUMNS)

    scores = (
        reviewed.groupby(["employee_id", "name", "department_id"], sort=True, dropna=False)
        .agg(
            average_score=("score", "mean"),
            review_count=("score", "count"),
            min_score=("score", "min"),
            max_score=("score", "max"),
            stddev_score=("score", "std"),
        )
        .reset_index()
        .rename(columns={"name": "employee_name"})
    )

    logger.info("Scored %d employees from %d reviews", len(scores), len(reviewed))
    return scores[EMPLOYEE_SCORE_COLUMNS]
