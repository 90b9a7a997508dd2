"""Funds-raised layoff reports.

This module buckets funds raised into fixed ranges and totals layoffs
per range, overall and per company.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from core.constants import (
    COMPANY_COLUMN,
    FUNDING_RANGE_LABELS,
    FUNDS_RAISED_COLUMN,
    INDUSTRY_COLUMN,
)
from reports.aggregation import LAYOFFS_COLUMN, sum_layoffs

FUNDING_RANGE_COLUMN = "funding_range"
TOTAL_FUNDS_COLUMN = "total_funds_raised_millions"
_RANGE_ORDER = {label: position for position, label in enumerate(FUNDING_RANGE_LABELS)}


def funding_range_labels(funds: pd.Series) -> pd.Series:
    """Map funds raised (millions) to fixed range labels.

    Boundaries are checked in order, first match wins: ``0M`` for zero,
    ``<10M`` below 10, then inclusive upper bounds of 100, 1000, 10000 and
    100000, and ``>100B`` above. Null funds map to null.

    Args:
        funds: Funds raised in millions.

    Returns:
        Range labels aligned with the input index.
    """
    values = pd.Series(
        funds.astype("Float64").to_numpy(dtype=float, na_value=np.nan),
        index=funds.index,
    )
    conditions = [
        values == 0,
        values < 10,
        values <= 100,
        values <= 1_000,
        values <= 10_000,
        values <= 100_000,
    ]
    labels = np.select(
        conditions, list(FUNDING_RANGE_LABELS[:-1]), default=FUNDING_RANGE_LABELS[-1]
    )
    return pd.Series(labels, index=funds.index, dtype=object).where(values.notna(), None)


def layoffs_by_funding_range(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``funding_range, layoffs`` rows in bucket order.

    Records without funds raised are excluded.
    """
    ranges = funding_range_labels(frame[FUNDS_RAISED_COLUMN])
    ranged = frame.assign(**{FUNDING_RANGE_COLUMN: ranges})
    table = sum_layoffs(ranged, [FUNDING_RANGE_COLUMN])
    ordered = table.sort_values(
        FUNDING_RANGE_COLUMN, key=lambda labels: labels.map(_RANGE_ORDER), kind="stable"
    )
    return ordered.reset_index(drop=True)


def company_funding_ranges(frame: pd.DataFrame) -> pd.DataFrame:
    """Return per-company funds raised, funding range and layoffs.

    Funds and layoffs are summed over every record of the company. Records
    without an industry are excluded, and a company with no known funds
    gets a null range.

    Returns:
        ``company, total_funds_raised_millions, funding_range, layoffs`` rows,
        most funded first.
    """
    classified = frame.loc[frame[INDUSTRY_COLUMN].notna() & frame[COMPANY_COLUMN].notna()]
    grouped = classified.groupby(COMPANY_COLUMN, sort=False)
    funds = grouped[FUNDS_RAISED_COLUMN].sum(min_count=1).astype("Int64")
    layoffs = sum_layoffs(classified, [COMPANY_COLUMN]).set_index(COMPANY_COLUMN)[LAYOFFS_COLUMN]
    table = pd.DataFrame(
        {
            TOTAL_FUNDS_COLUMN: funds,
            FUNDING_RANGE_COLUMN: funding_range_labels(funds),
            LAYOFFS_COLUMN: layoffs,
        }
    )
    table.index.name = COMPANY_COLUMN
    ordered = table.reset_index().sort_values(
        TOTAL_FUNDS_COLUMN, ascending=False, na_position="last", kind="stable"
    )
    return ordered.reset_index(drop=True)
