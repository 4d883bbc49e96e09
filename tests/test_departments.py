import numpy as np
import pandas as pd
import pytest

from workforce_pipeline.domains.workforce.departments import aggregate_departments
from workforce_pipeline.domains.workforce.scoring import score_employees


@pytest.fixture
def metrics(normalized):
    return aggregate_departments(
        normalized.employees, normalized.performance_reviews, normalized.departments
    ).set_index("department_name")


def test_engineering_average_is_weighted_by_review(metrics):
    engineering = metrics.loc["Engineering"]
    assert engineering["average_department_score"] == pytest.approx(460 / 6)
    assert engineering["average_department_score"] == pytest.approx(76.67, abs=0.01)
    assert engineering["min_department_score"] == 60
    assert engineering["max_department_score"] == 100
    assert engineering["total_department_score"] == 460
    assert engineering["employee_count"] == 3
    assert engineering["stddev_department_score"] == pytest.approx(
        np.std([80, 90, 100, 70, 60, 60], ddof=1)
    )


def test_unreviewed_employees_do_not_count(metrics):
    assert metrics.loc["Sales", "employee_count"] == 2
    assert metrics.loc["Sales", "total_department_score"] == 270


def test_departments_without_reviews_have_no_row(metrics):
    assert "Legal" not in metrics.index


def test_global_rank_is_ordinal(metrics):
    assert metrics.loc["Sales", "department_performance_rank"] == 1
    assert metrics.loc["Engineering", "department_performance_rank"] == 2


def test_average_matches_review_weighted_employee_scores(normalized, metrics):
    scores = score_employees(normalized.employees, normalized.performance_reviews)
    scores = scores.merge(normalized.departments, on="department_id")
    for name, group in scores.groupby("department_name"):
        weighted = (group["average_score"] * group["review_count"]).sum() / group["review_count"].sum()
        assert metrics.loc[name, "average_department_score"] == pytest.approx(weighted)


def test_tied_departments_get_distinct_ranks():
    employees = pd.DataFrame({"employee_id": [1, 2], "department_id": [20, 10]})
    reviews = pd.DataFrame({"employee_id": [1, 2], "score": [75.0, 75.0]})
    departments = pd.DataFrame({"department_id": [10, 20], "department_name": ["Ops", "Legal"]})

    result = aggregate_departments(employees, reviews, departments)
    assert result["department_id"].tolist() == [10, 20]
    assert result["department_performance_rank"].tolist() == [1, 2]
