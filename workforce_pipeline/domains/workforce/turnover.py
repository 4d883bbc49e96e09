"""Project turnover: departures, rates and tenure of departed employees."""

import logging

import numpy as np
import pandas as pd

from workforce_pipeline.utils.transforms import merge_datasets, whole_years_between
from workforce_pipeline.utils.windows import annotate_window

logger = logging.getLogger(__name__)

PROJECT_TURNOVER_COLUMNS = [
    "project_id",
    "project_name",
    "total_employees",
    "turnover_count",
    "turnover_rate",
    "avg_tenure_years",
    "latest_turnover_date",
    "turnover_rank",
    "avg_tenure_rank",
]


def associate_employees(
    employees: pd.DataFrame,
    projects: pd.DataFrame,
    memberships: pd.DataFrame | None = None,
) -> pd.DataFrame:
    """Pair each project with the employees associated to it.

    Without ``memberships`` an employee belongs to the project whose
    ``project_id`` equals their ``department_id``. Projects nobody maps to
    are kept with a null ``employee_id``.
    """
    staff = employees[["employee_id", "department_id", "hire_date", "termination_date"]]

    if memberships is None:
        logger.warning(
            "No project membership table; associating employees to projects "
            "through department_id"
        )
        linked = staff.rename(columns={"department_id": "project_id"})
    else:
        linked = merge_datasets(
            memberships[["employee_id", "project_id"]],
            staff.drop(columns=["department_id"]),
            on="employee_id",
            how="inner",
        )

    return merge_datasets(
        projects[["project_id", "project_name"]],
        linked,
        on="project_id",
        how="left",
    )


def turnover_rate(turnover_count: pd.Series, total_employees: pd.Series) -> pd.Series:
    """Departures over associated headcount; NaN where nobody is associated."""
    total = total_employees.astype("float64")
    rate = np.where(total > 0, turnover_count.astype("float64") / total.where(total > 0, 1.0), np.nan)
    return pd.Series(rate, index=turnover_count.index, dtype="float64")


def compute_project_turnover(
    employees: pd.DataFrame,
    projects: pd.DataFrame,
    memberships: pd.DataFrame | None = None,
) -> pd.DataFrame:
    """Per-project turnover statistics and rankings.

    ``total_employees`` counts everyone associated with the project before
    restricting to departed employees; the departure count, average whole
    years of tenure and latest termination date come from departed
    employees only. Projects are ranked by descending ``turnover_rate``
    (competition rank) and descending ``avg_tenure_years`` (dense rank).
    """
    if projects.empty:
        logger.info("No projects to analyze for turnover")
        return pd.DataFrame(columns=PROJECT_TURNOVER_COLUMNS)

    associated = associate_employees(employees, projects, memberships)
    associated["departed"] = associated["termination_date"].notna()
    associated["tenure_years"] = whole_years_between(
        associated["hire_date"], associated["termination_date"]
    )
    departed_dates = associated["termination_date"].where(associated["departed"])

    per_project = (
        associated.assign(departed_termination=departed_dates)
        .groupby(["project_id", "project_name"], sort=True, dropna=False)
        .agg(
            total_employees=("employee_id", "count"),
            turnover_count=("departed", "sum"),
            avg_tenure_years=("tenure_years", "mean"),
            latest_turnover_date=("departed_termination", "max"),
        )
        .reset_index()
    )
    per_project["turnover_count"] = per_project["turnover_count"].astype("int64")
    per_project["turnover_rate"] = turnover_rate(
        per_project["turnover_count"], per_project["total_employees"]
    )

    ranked = annotate_window(
        per_project,
        order_by="turnover_rate",
        columns={"turnover_rank": "rank"},
        ascending=False,
        tiebreak=["project_id"],
    )
    ranked = annotate_window(
        ranked,
        order_by="avg_tenure_years",
        columns={"avg_tenure_rank": "dense_rank"},
        ascending=False,
        tiebreak=["project_id"],
    )
    ranked = ranked.sort_values(["turnover_rank", "project_id"], kind="mergesort").reset_index(drop=True)

    logger.info(
        "Computed turnover for %d projects (%d departures)",
        len(ranked),
        int(ranked["turnover_count"].sum()),
    )
    return ranked[PROJECT_TURNOVER_COLUMNS]
