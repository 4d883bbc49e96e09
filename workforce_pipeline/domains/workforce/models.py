"""Pandera schemas for workforce input tables and the composed report."""

import pandera as pa
from pandera import Column, Check


employee_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(nullable=False, unique=True),
        "name": Column(str, Check.str_length(min_value=1, max_value=200)),
        "department_id": Column(nullable=False),
        "hire_date": Column(pa.DateTime, nullable=False),
        "termination_date": Column(pa.DateTime, nullable=True),
    },
    checks=Check(
        lambda df: df["termination_date"].isna() | (df["termination_date"] >= df["hire_date"]),
        element_wise=False,
        error="termination_date before hire_date",
    ),
    strict=False,
    coerce=True,
)


department_schema = pa.DataFrameSchema(
    {
        "department_id": Column(nullable=False, unique=True),
        "department_name": Column(str, nullable=False),
    },
    strict=False,
    coerce=True,
)


project_schema = pa.DataFrameSchema(
    {
        "project_id": Column(nullable=False, unique=True),
        "project_name": Column(str, nullable=False),
    },
    strict=False,
    coerce=True,
)


review_schema = pa.DataFrameSchema(
    {
        "review_id": Column(nullable=False, unique=True),
        "employee_id": Column(nullable=False),
        "score": Column(float, nullable=False),
    },
    strict=False,
    coerce=True,
)


salary_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(nullable=False, unique=True),
        "salary": Column(float, Check.greater_than_or_equal_to(0)),
    },
    strict=False,
    coerce=True,
)


membership_schema = pa.DataFrameSchema(
    {
        "employee_id": Column(nullable=False),
        "project_id": Column(nullable=False),
    },
    strict=False,
    coerce=True,
)


report_schema = pa.DataFrameSchema(
    {
        "department_name": Column(str, nullable=False),
        "average_department_score": Column(float, nullable=False),
        "employee_count": Column(int, Check.greater_than(0)),
        "department_performance_rank": Column(int, Check.greater_than_or_equal_to(1)),
        "top_performer_dept_rank": Column(float, Check.equal_to(1), nullable=True),
        "salary_quartile": Column(float, Check.isin([1, 2, 3, 4]), nullable=True),
        "max_salary_percentile": Column(float, Check.in_range(0.0, 1.0), nullable=True),
        "max_salary_cume_dist": Column(float, Check.in_range(0.0, 1.0, include_min=False), nullable=True),
        "turnover_rate": Column(float, Check.in_range(0.0, 1.0), nullable=True),
    },
    strict=False,
    coerce=True,
)
