import pandas as pd

from workforce_pipeline.domains.workforce.checks import validate_tables
from workforce_pipeline.domains.workforce.transform import normalize_tables
from workforce_pipeline.utils.types import WorkforceTables
from workforce_pipeline.utils.validators import validate_referential_integrity


def test_fixture_tables_are_valid(normalized):
    results = validate_tables(normalized)
    assert all(r["valid"] for r in results.values()), results


def test_orphan_review_is_reported(workforce_tables):
    reviews = pd.concat(
        [
            workforce_tables.performance_reviews,
            pd.DataFrame({"review_id": [99], "employee_id": [404], "score": [50]}),
        ],
        ignore_index=True,
    )
    tables = normalize_tables(
        WorkforceTables(
            employees=workforce_tables.employees,
            departments=workforce_tables.departments,
            projects=workforce_tables.projects,
            performance_reviews=reviews,
            salaries=workforce_tables.salaries,
        )
    )

    results = validate_tables(tables)
    assert not results["performance_reviews"]["valid"]
    assert "404" in results["performance_reviews"]["errors"][0]
    assert results["employees"]["valid"]


def test_negative_salary_fails_schema(workforce_tables):
    salaries = workforce_tables.salaries.copy()
    salaries.loc[0, "salary"] = -1
    tables = normalize_tables(
        WorkforceTables(
            employees=workforce_tables.employees,
            departments=workforce_tables.departments,
            projects=workforce_tables.projects,
            performance_reviews=workforce_tables.performance_reviews,
            salaries=salaries,
        )
    )
    assert not validate_tables(tables)["salaries"]["valid"]


def test_memberships_are_checked_when_present(workforce_tables):
    tables = normalize_tables(
        WorkforceTables(
            employees=workforce_tables.employees,
            departments=workforce_tables.departments,
            projects=workforce_tables.projects,
            performance_reviews=workforce_tables.performance_reviews,
            salaries=workforce_tables.salaries,
            project_memberships=pd.DataFrame({"employee_id": [1], "project_id": [77]}),
        )
    )
    results = validate_tables(tables)
    assert not results["project_memberships"]["valid"]


def test_referential_integrity_ignores_null_keys():
    child = pd.DataFrame({"key": [1, None]})
    parent = pd.DataFrame({"key": [1]})
    assert validate_referential_integrity(child, parent, "key", "key")["valid"]
