"""Workforce analytics domain pipeline.

Scores employees from performance reviews, ranks them inside their
department, summarizes department performance, places salaries in
per-department quartiles, measures project turnover, and joins the lot
into one reporting table.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime

import pandas as pd

from workforce_pipeline.config import AnalyticsConfig, resolve_config
from workforce_pipeline.domains.workforce.checks import validate_tables
from workforce_pipeline.domains.workforce.compensation import analyze_salary_quartiles
from workforce_pipeline.domains.workforce.departments import aggregate_departments
from workforce_pipeline.domains.workforce.ingest import ingest_workforce_tables
from workforce_pipeline.domains.workforce.models import report_schema
from workforce_pipeline.domains.workforce.ranking import rank_within_departments
from workforce_pipeline.domains.workforce.report import compose_report
from workforce_pipeline.domains.workforce.scoring import score_employees
from workforce_pipeline.domains.workforce.transform import normalize_tables
from workforce_pipeline.domains.workforce.turnover import compute_project_turnover
from workforce_pipeline.utils.io import output_suffix, write_output
from workforce_pipeline.utils.types import PipelineContext, PipelineStatus, WorkforceTables
from workforce_pipeline.utils.validators import validate_dataframe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkforceReport:
    employee_scores: pd.DataFrame
    department_ranking: pd.DataFrame
    department_metrics: pd.DataFrame
    salary_quartiles: pd.DataFrame
    project_turnover: pd.DataFrame
    report: pd.DataFrame


def build_report(tables: WorkforceTables, join: str = "inner") -> WorkforceReport:
    """Run every analysis stage over an in-memory snapshot."""
    tables = normalize_tables(tables)

    employee_scores = score_employees(tables.employees, tables.performance_reviews)
    department_ranking = rank_within_departments(employee_scores)
    department_metrics = aggregate_departments(
        tables.employees, tables.performance_reviews, tables.departments
    )
    salary_quartiles = analyze_salary_quartiles(
        tables.employees, tables.salaries, tables.departments
    )
    project_turnover = compute_project_turnover(
        tables.employees, tables.projects, tables.project_memberships
    )
    report = compose_report(
        department_metrics,
        department_ranking,
        salary_quartiles,
        project_turnover,
        how=join,
    )

    return WorkforceReport(
        employee_scores=employee_scores,
        department_ranking=department_ranking,
        department_metrics=department_metrics,
        salary_quartiles=salary_quartiles,
        project_turnover=project_turnover,
        report=report,
    )


def validate(config: AnalyticsConfig | None = None) -> dict:
    """Validate that the workforce table exports are present and well formed."""
    config = config or resolve_config()
    try:
        tables = normalize_tables(ingest_workforce_tables(config.storage.data_dir))
        results = validate_tables(tables)
    except (FileNotFoundError, ValueError) as exc:
        return {"status": "error", "message": str(exc)}
    except Exception as exc:
        return {"status": "error", "message": f"Unexpected: {exc}"}

    errors = [f"{table}: {err}" for table, r in results.items() for err in r["errors"]]
    if errors:
        return {"status": "error", "message": "; ".join(errors[:5])}
    return {"status": "ok", "rows_available": sum(tables.row_counts().values())}


def run(incremental: bool = False, config: AnalyticsConfig | None = None) -> WorkforceReport:
    """Execute the full workforce pipeline and write the report."""
    if incremental:
        logger.warning("Incremental mode is not supported; running a full batch")

    config = config or resolve_config()
    context = PipelineContext(
        domain="workforce",
        run_id=uuid.uuid4().hex[:12],
        start_time=datetime.now(),
        incremental=False,
    )
    logger.info("Starting %s run %s", context.domain, context.run_id)

    tables = ingest_workforce_tables(config.storage.data_dir)
    if config.validate_inputs:
        results = validate_tables(normalize_tables(tables))
        failed = [table for table, r in results.items() if not r["valid"]]
        if failed and config.strict_validation:
            raise ValueError(f"Input validation failed for: {', '.join(failed)}")

    result = build_report(tables, join=config.report_join)
    contract = validate_dataframe(result.report, report_schema)
    if not contract["valid"]:
        logger.error("Report violates its schema: %s", "; ".join(contract["errors"][:5]))
        if config.strict_validation:
            raise ValueError(f"Report failed schema checks: {contract['errors'][:5]}")

    from workforce_pipeline.validation.expectations import run_domain_expectations

    outcome = run_domain_expectations("workforce", result.report, strict=config.strict_validation)
    status = PipelineStatus.FAILED if outcome["status"] == "failed" else PipelineStatus.SUCCESS
    if status is PipelineStatus.FAILED and config.strict_validation:
        raise ValueError(f"Report failed expectations: {outcome['failed_expectations']}")

    output_path = config.storage.output_dir / f"workforce_report{output_suffix(config.storage.output_format)}"
    write_output(result.report, output_path, fmt=config.storage.output_format)

    elapsed = (datetime.now() - context.start_time).total_seconds()
    logger.info("Run %s finished with status %s in %.2fs", context.run_id, status, elapsed)
    return result
