"""File I/O utilities for reading and writing pipeline data."""

import logging
from pathlib import Path

import pandas as pd
from rich.console import Console

from workforce_pipeline.utils.transforms import normalize_columns

type FilePath = str | Path

console = Console()
logger = logging.getLogger(__name__)


def read_table(path: FilePath, date_columns: tuple[str, ...] = ()) -> pd.DataFrame:
    """Read one CSV table export, normalizing headers and parsing date columns."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Table export missing: {path}")

    try:
        raw = pd.read_csv(path)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as exc:
        raise ValueError(f"Table export unreadable: {path.name} ({exc})") from exc

    df = normalize_columns(raw)
    for col in date_columns:
        if col in df.columns:
            df[col] = pd.to_datetime(df[col], errors="coerce")

    logger.info("Read %d rows from %s", len(df), path.name)
    return df


def read_optional_table(path: FilePath, date_columns: tuple[str, ...] = ()) -> pd.DataFrame | None:
    """Like ``read_table`` but returns ``None`` when the file is absent."""
    path = Path(path)
    if not path.exists():
        logger.debug("Optional table %s not present", path.name)
        return None
    return read_table(path, date_columns)


def write_output(df: pd.DataFrame, path: FilePath, fmt: str = "csv") -> Path:
    """Write a DataFrame to the specified format."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    match fmt:
        case "csv":
            df.to_csv(path, index=False)
        case "parquet":
            df.to_parquet(path, index=False)
        case "excel":
            df.to_excel(path, index=False)
        case "json":
            df.to_json(path, orient="records", indent=2, date_format="iso")
        case other:
            raise ValueError(f"Unsupported output format: {other}")

    console.print(f"  Wrote {len(df)} rows to {path}")
    return path


def output_suffix(fmt: str) -> str:
    match fmt:
        case "csv" | "json" | "parquet":
            return f".{fmt}"
        case "excel":
            return ".xlsx"
        case other:
            raise ValueError(f"Unsupported output format: {other}")

