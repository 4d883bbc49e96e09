"""Shared type definitions for the pipeline."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import StrEnum

import pandas as pd


class PipelineStatus(StrEnum):
    SUCCESS = "success"
    FAILED = "failed"


class JoinMode(StrEnum):
    INNER = "inner"
    LEFT = "left"


@dataclass(frozen=True)
class PipelineContext:
    domain: str
    run_id: str
    start_time: datetime
    incremental: bool = False


@dataclass(frozen=True)
class WorkforceTables:
    """Immutable snapshot of the input tables.

    Each frame is copied on construction so later mutation of the caller's
    DataFrames cannot leak into a running computation.
    """

    employees: pd.DataFrame
    departments: pd.DataFrame
    projects: pd.DataFrame
    performance_reviews: pd.DataFrame
    salaries: pd.DataFrame
    project_memberships: pd.DataFrame | None = field(default=None)

    def __post_init__(self) -> None:
        for f in fields(self):
            frame = getattr(self, f.name)
            if frame is not None:
                object.__setattr__(self, f.name, frame.copy())

    def row_counts(self) -> dict[str, int]:
        return {
            f.name: len(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
