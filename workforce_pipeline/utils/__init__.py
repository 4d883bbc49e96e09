"""Shared utilities for the data pipeline."""

from workforce_pipeline.utils.io import read_table, read_optional_table, write_output
from workforce_pipeline.utils.transforms import normalize_columns, merge_datasets, whole_years_between
from workforce_pipeline.utils.validators import validate_dataframe
from workforce_pipeline.utils.types import JoinMode, PipelineStatus, WorkforceTables
from workforce_pipeline.utils.windows import annotate_window
