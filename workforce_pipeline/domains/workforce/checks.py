"""Input table checks: pandera schemas plus cross-table key integrity."""

import logging

from workforce_pipeline.domains.workforce.models import (
    department_schema,
    employee_schema,
    membership_schema,
    project_schema,
    review_schema,
    salary_schema,
)
from workforce_pipeline.utils.types import WorkforceTables
from workforce_pipeline.utils.validators import (
    ValidationResult,
    merge_results,
    validate_dataframe,
    validate_referential_integrity,
)

logger = logging.getLogger(__name__)


def validate_tables(tables: WorkforceTables) -> dict[str, ValidationResult]:
    """Validate each table and its foreign keys; one result per table."""
    results = {
        "employees": merge_results([
            validate_dataframe(tables.employees, employee_schema),
            validate_referential_integrity(
                tables.employees, tables.departments, "department_id", "department_id"
            ),
        ]),
        "departments": validate_dataframe(tables.departments, department_schema),
        "projects": validate_dataframe(tables.projects, project_schema),
        "performance_reviews": merge_results([
            validate_dataframe(tables.performance_reviews, review_schema),
            validate_referential_integrity(
                tables.performance_reviews, tables.employees, "employee_id", "employee_id"
            ),
        ]),
        "salaries": merge_results([
            validate_dataframe(tables.salaries, salary_schema),
            validate_referential_integrity(
                tables.salaries, tables.employees, "employee_id", "employee_id"
            ),
        ]),
    }

    if tables.project_memberships is not None:
        results["project_memberships"] = merge_results([
            validate_dataframe(tables.project_memberships, membership_schema),
            validate_referential_integrity(
                tables.project_memberships, tables.employees, "employee_id", "employee_id"
            ),
            validate_referential_integrity(
                tables.project_memberships, tables.projects, "project_id", "project_id"
            ),
        ])

    for table, result in results.items():
        if not result["valid"]:
            logger.warning("Table %s failed validation: %s", table, "; ".join(result["errors"]))
    return results
