"""Data validation utilities using pandera."""

import pandera as pa
import pandas as pd
from pandera import DataFrameSchema

type ValidationResult = dict[str, str | bool | list[str]]


def _ok() -> ValidationResult:
    return {"valid": True, "status": "ok", "errors": []}


def _failed(errors: list[str]) -> ValidationResult:
    return {"valid": False, "status": "error", "errors": errors}


def validate_dataframe(df: pd.DataFrame, schema: DataFrameSchema) -> ValidationResult:
    """Validate a DataFrame against a pandera schema."""
    try:
        schema.validate(df, lazy=True)
        return _ok()
    except pa.errors.SchemaErrors as e:
        errors = []
        for _, row in e.failure_cases.iterrows():
            match row.to_dict():
                case {"column": col, "check": check, "failure_case": val}:
                    errors.append(f"Column '{col}' failed check '{check}': {val}")
                case failure:
                    errors.append(f"Validation failure: {failure}")
        return _failed(errors)


def validate_referential_integrity(
    child: pd.DataFrame,
    parent: pd.DataFrame,
    child_key: str,
    parent_key: str,
) -> ValidationResult:
    """Validate that all child keys exist in parent."""
    orphans = set(child[child_key].dropna().unique()) - set(parent[parent_key].unique())

    match len(orphans):
        case 0:
            return _ok()
        case n:
            sample = sorted(orphans, key=str)[:5]
            return _failed([f"Found {n} orphan {child_key} keys. Sample: {sample}"])


def merge_results(results: list[ValidationResult]) -> ValidationResult:
    """Fold several validation results into one."""
    errors = [err for r in results for err in r["errors"]]
    return _ok() if not errors else _failed(errors)
