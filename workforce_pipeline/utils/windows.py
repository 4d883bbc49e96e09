"""Window-function style annotations over partitioned DataFrames.

Mirrors the SQL ``<fn>() OVER (PARTITION BY ... ORDER BY ...)`` family:
sort once per call, group by the partition keys, and attach one column per
requested function.
"""

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

type WindowFunction = str | tuple[str, int]
type WindowColumns = dict[str, WindowFunction]


def _ntile(position: pd.Series, size: pd.Series, buckets: int) -> pd.Series:
    """Assign NTILE buckets from 0-based positions and partition sizes.

    The first ``size % buckets`` buckets get one extra row each.
    """
    base, remainder = np.divmod(size.to_numpy(), buckets)
    pos = position.to_numpy()
    large_span = remainder * (base + 1)
    # base == 0 only happens when every row lands in a large bucket
    safe_base = np.where(base == 0, 1, base)
    tile = np.where(
        pos < large_span,
        pos // (base + 1) + 1,
        remainder + (pos - large_span) // safe_base + 1,
    )
    return pd.Series(tile, index=position.index, dtype="int64")


def annotate_window(
    df: pd.DataFrame,
    order_by: str,
    columns: WindowColumns,
    partition_by: str | list[str] | None = None,
    ascending: bool = True,
    tiebreak: list[str] | None = None,
) -> pd.DataFrame:
    """Return a sorted copy of ``df`` with window-function columns attached.

    Supported functions: ``"row_number"``, ``"rank"`` (competition),
    ``"dense_rank"``, ``"percent_rank"``, ``"cume_dist"`` and
    ``("ntile", n)``. Rank-type functions compare only ``order_by``;
    ``tiebreak`` columns (always ascending) fix the order of tied rows for
    ``row_number`` and ``ntile``. Null ``order_by`` values sort and rank last.
    """
    partition = [partition_by] if isinstance(partition_by, str) else list(partition_by or [])
    tiebreak = list(tiebreak or [])

    ordered = df.sort_values(
        partition + [order_by] + tiebreak,
        ascending=[True] * len(partition) + [ascending] + [True] * len(tiebreak),
        kind="mergesort",
        na_position="last",
    ).reset_index(drop=True)

    if partition:
        grouper = ordered.groupby(partition, sort=False, dropna=False)[order_by]
    else:
        grouper = ordered.groupby(np.zeros(len(ordered), dtype="int64"), sort=False)[order_by]

    size = grouper.transform("size")
    position = grouper.cumcount()

    def _rank(method: str) -> pd.Series:
        return grouper.rank(method=method, ascending=ascending, na_option="bottom").astype("int64")

    for name, func in columns.items():
        match func:
            case "row_number":
                ordered[name] = position + 1
            case "rank":
                ordered[name] = _rank("min")
            case "dense_rank":
                ordered[name] = _rank("dense")
            case "percent_rank":
                ordered[name] = np.where(size > 1, (_rank("min") - 1) / (size - 1).clip(lower=1), 0.0)
            case "cume_dist":
                ordered[name] = _rank("max") / size
            case ("ntile", int(buckets)) if buckets > 0:
                ordered[name] = _ntile(position, size, buckets)
            case other:
                raise ValueError(f"Unsupported window function: {other!r}")

    logger.debug(
        "Annotated %d rows over %s with %s",
        len(ordered),
        partition or "<all>",
        list(columns),
    )
    return ordered
