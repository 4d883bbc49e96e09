"""Compose the denormalized workforce report from the stage outputs."""

import logging

import pandas as pd

from workforce_pipeline.domains.workforce.compensation import summarize_quartiles
from workforce_pipeline.domains.workforce.ranking import top_performers
from workforce_pipeline.utils.transforms import merge_datasets
from workforce_pipeline.utils.types import JoinMode

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "department_name",
    "average_department_score",
    "min_department_score",
    "max_department_score",
    "total_department_score",
    "stddev_department_score",
    "employee_count",
    "department_performance_rank",
    "top_performer_name",
    "top_performer_score",
    "top_performer_review_count",
    "top_performer_min_score",
    "top_performer_max_score",
    "top_performer_stddev_score",
    "top_performer_dept_rank",
    "salary_quartile",
    "salary_count",
    "min_salary",
    "max_salary",
    "avg_salary",
    "max_salary_percentile",
    "max_salary_cume_dist",
    "highest_turnover_project",
    "turnover_rate",
    "turnover_rank",
    "avg_tenure_rank",
    "latest_turnover_date",
]

_TOP_PERFORMER_RENAMES = {
    "employee_id": "top_performer_id",
    "employee_name": "top_performer_name",
    "average_score": "top_performer_score",
    "review_count": "top_performer_review_count",
    "min_score": "top_performer_min_score",
    "max_score": "top_performer_max_score",
    "stddev_score": "top_performer_stddev_score",
    "dept_rank": "top_performer_dept_rank",
}


def compose_report(
    department_metrics: pd.DataFrame,
    department_ranking: pd.DataFrame,
    salary_quartiles: pd.DataFrame,
    project_turnover: pd.DataFrame,
    how: str = JoinMode.INNER,
) -> pd.DataFrame:
    """Join department metrics with top performers, salary buckets and turnover.

    One row per (department, top performer, salary quartile). Turnover is
    matched on ``project_id == department_id``. With ``how="inner"`` a
    department missing any of the three parts is dropped; ``how="left"``
    keeps it with nulls instead.
    """
    match how:
        case JoinMode.INNER | JoinMode.LEFT:
            join = str(how)
        case other:
            raise ValueError(f"Unsupported report join: {other}")

    leaders = top_performers(department_ranking)[list(_TOP_PERFORMER_RENAMES) + ["department_id"]]
    leaders = leaders.rename(columns=_TOP_PERFORMER_RENAMES)

    buckets = summarize_quartiles(salary_quartiles)

    turnover = project_turnover[
        ["project_id", "project_name", "turnover_rate", "turnover_rank", "avg_tenure_rank", "latest_turnover_date"]
    ].rename(columns={"project_name": "highest_turnover_project"})

    report = merge_datasets(department_metrics, leaders, on="department_id", how=join)
    report = merge_datasets(report, buckets, on="department_id", how=join)
    report = merge_datasets(
        report,
        turnover,
        how=join,
        left_on="department_id",
        right_on="project_id",
    )

    report = report.sort_values(
        ["average_department_score", "turnover_rate", "department_id", "top_performer_id", "salary_quartile"],
        ascending=[False, False, True, True, True],
        kind="mergesort",
        na_position="last",
    ).reset_index(drop=True)

    dropped = department_metrics["department_id"].nunique() - report["department_id"].nunique()
    if dropped:
        logger.warning("%d department(s) dropped by %s joins", dropped, join)
    logger.info("Composed workforce report with %d rows", len(report))
    return report[REPORT_COLUMNS]
