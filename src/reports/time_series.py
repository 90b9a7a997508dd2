"""Overview and time-bucketed layoff reports.

This module totals layoffs overall, per year and per month, and builds
monthly series for one company or for every country. Records without a
date are excluded from every time bucket.
"""

from __future__ import annotations

import pandas as pd

from core.constants import COMPANY_COLUMN, COUNTRY_COLUMN, TOTAL_LAID_OFF_COLUMN
from reports.aggregation import (
    YEAR_COLUMN,
    YEAR_MONTH_COLUMN,
    sum_layoffs,
    with_date_parts,
)


def total_layoffs(frame: pd.DataFrame) -> int:
    """Return the sum of ``total_laid_off`` over the cleaned dataset."""
    return int(frame[TOTAL_LAID_OFF_COLUMN].sum(skipna=True))


def layoffs_by_year(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``year, layoffs`` rows in ascending year order."""
    table = sum_layoffs(with_date_parts(frame), [YEAR_COLUMN])
    return table.sort_values(YEAR_COLUMN).reset_index(drop=True)


def layoffs_by_month(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``year_month, layoffs`` rows in ascending month order."""
    table = sum_layoffs(with_date_parts(frame), [YEAR_MONTH_COLUMN])
    return table.sort_values(YEAR_MONTH_COLUMN).reset_index(drop=True)


def company_timeline(frame: pd.DataFrame, company: str) -> pd.DataFrame:
    """Return the monthly layoff series of one company.

    Args:
        frame: Cleaned dataset.
        company: Exact company name.

    Returns:
        ``year_month, layoffs`` rows in ascending month order.
    """
    company_rows = frame.loc[frame[COMPANY_COLUMN].eq(company).fillna(False).astype(bool)]
    table = sum_layoffs(with_date_parts(company_rows), [YEAR_MONTH_COLUMN])
    return table.sort_values(YEAR_MONTH_COLUMN).reset_index(drop=True)


def country_timeline(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``country, year_month, layoffs`` rows ordered by country then month."""
    table = sum_layoffs(
        with_date_parts(frame),
        [COUNTRY_COLUMN, YEAR_MONTH_COLUMN],
        dropna=False,
    )
    ordered = table.sort_values(
        [COUNTRY_COLUMN, YEAR_MONTH_COLUMN], na_position="last", kind="stable"
    )
    return ordered.reset_index(drop=True)
