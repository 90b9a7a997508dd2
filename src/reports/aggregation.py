"""Shared aggregation helpers for report queries."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from core.constants import DATE_COLUMN, TOTAL_LAID_OFF_COLUMN, YEAR_MONTH_FORMAT

LAYOFFS_COLUMN = "layoffs"
YEAR_COLUMN = "year"
YEAR_MONTH_COLUMN = "year_month"


def sum_layoffs(
    frame: pd.DataFrame,
    keys: Sequence[str],
    dropna: bool = True,
) -> pd.DataFrame:
    """Sum ``total_laid_off`` per group with SQL null semantics.

    Nulls are ignored, and a group holding only nulls sums to null.

    Args:
        frame: Cleaned dataset, optionally with derived date columns.
        keys: Grouping columns.
        dropna: Drop groups whose key is null.

    Returns:
        One row per group with the key columns and ``layoffs``.
    """
    grouped = frame.groupby(list(keys), dropna=dropna, sort=False)[TOTAL_LAID_OFF_COLUMN]
    totals = grouped.sum(min_count=1).astype("Int64")
    return totals.rename(LAYOFFS_COLUMN).reset_index()


def with_date_parts(frame: pd.DataFrame) -> pd.DataFrame:
    """Return dated records with ``year`` and ``year_month`` columns.

    Records without a date are excluded from time-bucketed aggregates.
    """
    timestamps = pd.to_datetime(frame[DATE_COLUMN], errors="coerce")
    dated = frame.loc[timestamps.notna()].copy()
    dated_timestamps = timestamps[timestamps.notna()]
    dated[YEAR_COLUMN] = dated_timestamps.dt.year.astype("Int64")
    dated[YEAR_MONTH_COLUMN] = dated_timestamps.dt.strftime(YEAR_MONTH_FORMAT)
    return dated


def sort_by_layoffs(table: pd.DataFrame, leading: Sequence[str] = ()) -> pd.DataFrame:
    """Sort a summed table by leading keys ascending, then layoffs descending."""
    columns = [*leading, LAYOFFS_COLUMN]
    ascending = [True] * len(leading) + [False]
    ordered = table.sort_values(columns, ascending=ascending, na_position="last", kind="stable")
    return ordered.reset_index(drop=True)
