"""Output validation using Great Expectations."""

from workforce_pipeline.validation.expectations import run_domain_expectations
from workforce_pipeline.validation.context import get_data_context
from workforce_pipeline.validation.suites import build_suite_for_domain
