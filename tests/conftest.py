import pandas as pd
import pytest

from workforce_pipeline.domains.workforce.transform import normalize_tables
from workforce_pipeline.utils.types import WorkforceTables


def _employees() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "employee_id": [1, 2, 3, 4, 5, 6],
            "name": ["Ada Park", "Ben Ortiz", "Cy Novak", "Dee Laine", "Eli Moss", "Fay Quinn"],
            "department_id": [1, 1, 1, 2, 2, 2],
            "hire_date": [
                "2018-01-15", "2019-03-01", "2020-06-01",
                "2017-05-10", "2021-01-01", "2022-01-01",
            ],
            "termination_date": [None, "2022-02-28", None, "2021-05-10", None, None],
        }
    )


@pytest.fixture
def workforce_tables() -> WorkforceTables:
    """Two staffed departments, one empty department and one orphan project.

    Engineering (1): Ada scores {80, 90, 100}, Ben {70}, Cy {60, 60}.
    Sales (2): Dee {85, 95} and Eli {90} tie on average; Fay has no reviews.
    Project ids 1 and 2 line up with the department ids; project 9 matches none.
    """
    return WorkforceTables(
        employees=_employees(),
        departments=pd.DataFrame(
            {"department_id": [1, 2, 3], "department_name": ["Engineering", "Sales", "Legal"]}
        ),
        projects=pd.DataFrame(
            {"project_id": [1, 2, 9], "project_name": ["Apollo", "Borealis", "Dormant"]}
        ),
        performance_reviews=pd.DataFrame(
            {
                "review_id": list(range(1, 10)),
                "employee_id": [1, 1, 1, 2, 3, 3, 4, 4, 5],
                "score": [80, 90, 100, 70, 60, 60, 85, 95, 90],
            }
        ),
        salaries=pd.DataFrame(
            {
                "employee_id": [1, 2, 3, 4, 5, 6],
                "salary": [120_000, 90_000, 90_000, 100_000, 80_000, 70_000],
            }
        ),
    )


@pytest.fixture
def normalized(workforce_tables) -> WorkforceTables:
    return normalize_tables(workforce_tables)


@pytest.fixture
def empty_tables() -> WorkforceTables:
    return WorkforceTables(
        employees=pd.DataFrame(
            columns=["employee_id", "name", "department_id", "hire_date", "termination_date"]
        ),
        departments=pd.DataFrame(columns=["department_id", "department_name"]),
        projects=pd.DataFrame(columns=["project_id", "project_name"]),
        performance_reviews=pd.DataFrame(columns=["review_id", "employee_id", "score"]),
        salaries=pd.DataFrame(columns=["employee_id", "salary"]),
    )
