"""Rank employees inside their department."""

import logging

import pandas as pd

from workforce_pipeline.domains.workforce.scoring import EMPLOYEE_SCORE_COLUMNS
from workforce_pipeline.utils.windows import annotate_window

logger = logging.getLogger(__name__)

RANKING_COLUMNS = EMPLOYEE_SCORE_COLUMNS + ["dept_rank", "review_count_rank"]


def rank_within_departments(employee_scores: pd.DataFrame) -> pd.DataFrame:
    """Attach ``dept_rank`` and ``review_count_rank`` to each scored employee.

    ``dept_rank`` is a competition rank on descending average score and
    ``review_count_rank`` a dense rank on descending review count, both
    restarting at 1 in every department.
    """
    if employee_scores.empty:
        return pd.DataFrame(columns=RANKING_COLUMNS)

    by_score = annotate_window(
        employee_scores,
        order_by="average_score",
        columns={"dept_rank": "rank"},
        partition_by="department_id",
        ascending=False,
        tiebreak=["employee_id"],
    )
    ranked = annotate_window(
        by_score,
        order_by="review_count",
        columns={"review_count_rank": "dense_rank"},
        partition_by="department_id",
        ascending=False,
        tiebreak=["employee_id"],
    )

    ranked = ranked.sort_values(
        ["department_id", "dept_rank", "employee_id"], kind="mergesort"
    ).reset_index(drop=True)
    logger.info(
        "Ranked %d employees across %d departments",
        len(ranked),
        ranked["department_id"].nunique(),
    )
    return ranked[RANKING_COLUMNS]


def top_performers(ranking: pd.DataFrame) -> pd.DataFrame:
    """Every employee holding rank 1 in their department, ties included."""
    leaders = ranking[ranking["dept_rank"] == 1].reset_index(drop=True)
    tied = leaders.groupby("department_id", dropna=False).size()
    if (tied > 1).any():
        logger.info("%d department(s) have tied top performers", int((tied > 1).sum()))
    return leaders
