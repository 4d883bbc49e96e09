"""Common data transformation utilities."""

import pandas as pd


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Normalize column names to snake_case."""
    df = df.copy()
    df.columns = [str(col).strip().lower().replace(" ", "_").replace("-", "_") for col in df.columns]
    return df


def merge_datasets(
    left: pd.DataFrame,
    right: pd.DataFrame,
    on: str | list[str] | None = None,
    how: str = "left",
    left_on: str | None = None,
    right_on: str | None = None,
) -> pd.DataFrame:
    """Merge two datasets, rejecting unknown join types."""
    keys = {"on": on} if on is not None else {"left_on": left_on, "right_on": right_on}

    match how:
        case "left" | "inner":
            result = pd.merge(left, right, how=how, **keys)
        case other:
            raise ValueError(f"Unsupported merge type: {other}")

    return result


def whole_years_between(start: pd.Series, end: pd.Series) -> pd.Series:
    """Elapsed whole calendar years from ``start`` to ``end``, truncated.

    Matches ``EXTRACT(YEAR FROM AGE(end, start))``: a year only counts once
    its anniversary has been reached. Nulls on either side propagate.
    """
    start = pd.to_datetime(start)
    end = pd.to_datetime(end)
    years = end.dt.year - start.dt.year
    before_anniversary = (end.dt.month < start.dt.month) | (
        (end.dt.month == start.dt.month) & (end.dt.day < start.dt.day)
    )
    return (years - before_anniversary.astype("float64")).astype("float64")

