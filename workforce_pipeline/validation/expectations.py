"""Domain-specific expectation runners using Great Expectations."""

import logging

import great_expectations as gx
import pandas as pd
from rich.console import Console

from workforce_pipeline.validation.context import batch_for_dataframe
from workforce_pipeline.validation.suites import build_suite_for_domain

type ValidationStatus = str  # "passed" | "warning" | "failed"
type DomainName = str

console = Console()
logger = logging.getLogger(__name__)


def run_domain_expectations(
    domain: DomainName,
    df: pd.DataFrame,
    strict: bool = False,
) -> dict[str, ValidationStatus | int | list[str]]:
    """Run the expectation suite for a given domain against a DataFrame.

    Returns a summary dict with pass/fail status and details about
    any failed expectations.
    """
    batch = batch_for_dataframe(df)
    suite_config = build_suite_for_domain(domain)

    failed_expectations: list[str] = []
    total = 0
    passed = 0

    for expectation in suite_config:
        total += 1
        class_name = expectation["expectation_type"]
        kwargs = expectation.get("kwargs", {})

        try:
            expectation_cls = getattr(gx.expectations, class_name)
        except AttributeError:
            console.print(f"  [yellow]Unknown expectation: {class_name}[/yellow]")
            failed_expectations.append(f"{class_name}: not supported")
            continue

        result = batch.validate(expectation_cls(**kwargs))
        if result.success:
            passed += 1
        else:
            failed_expectations.append(
                f"{class_name}({kwargs}): "
                f"{result.result.get('unexpected_count', '?')} failures"
            )

    status: ValidationStatus
    match (total - passed):
        case 0:
            status = "passed"
        case n if n <= 2 and not strict:
            status = "warning"
        case _:
            status = "failed"

    logger.info("%s: %d/%d expectations passed (%s)", domain, passed, total, status)
    console.print(
        f"  [{_status_color(status)}]{domain}: "
        f"{passed}/{total} expectations passed ({status})[/{_status_color(status)}]"
    )

    return {
        "domain": domain,
        "status": status,
        "total": total,
        "passed": passed,
        "failed_expectations": failed_expectations,
    }


def _status_color(status: ValidationStatus) -> str:
    match status:
        case "passed":
            return "green"
        case "warning":
            return "yellow"
        case "failed":
            return "red"
        case _:
            return "white"
