"""Industry, company and geography layoff reports."""

from __future__ import annotations

import pandas as pd

from core.constants import (
    COMPANY_COLUMN,
    COUNTRY_COLUMN,
    DEFAULT_TOP_COMPANIES,
    INDUSTRY_COLUMN,
)
from core.errors import SiftReportError
from reports.aggregation import (
    LAYOFFS_COLUMN,
    YEAR_COLUMN,
    sort_by_layoffs,
    sum_layoffs,
    with_date_parts,
)


def layoffs_by_industry(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``industry, layoffs`` rows, largest first, without null industries."""
    return sort_by_layoffs(sum_layoffs(frame, [INDUSTRY_COLUMN]))


def layoffs_by_industry_year(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``industry, year, layoffs`` rows, latest year first.

    Inside a year, industries are ordered by layoffs descending. Records
    without an industry or a date are excluded.
    """
    table = sum_layoffs(with_date_parts(frame), [INDUSTRY_COLUMN, YEAR_COLUMN])
    ordered = table.sort_values(
        [YEAR_COLUMN, LAYOFFS_COLUMN],
        ascending=[False, False],
        na_position="last",
        kind="stable",
    )
    return ordered.reset_index(drop=True)


def top_companies(frame: pd.DataFrame, limit: int = DEFAULT_TOP_COMPANIES) -> pd.DataFrame:
    """Return the companies with the most layoffs.

    Args:
        frame: Cleaned dataset.
        limit: Maximum number of companies.

    Returns:
        ``company, layoffs`` rows, largest first.

    Raises:
        SiftReportError: If limit is below one.
    """
    if limit < 1:
        raise SiftReportError(
            f"Invalid top-companies limit {limit}: expected value >= 1. "
            "Use --top-n with a positive integer."
        )
    ranked = sort_by_layoffs(sum_layoffs(frame, [COMPANY_COLUMN]))
    return ranked.head(limit).reset_index(drop=True)


def layoffs_by_country(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``country, layoffs`` rows, largest first."""
    return sort_by_layoffs(sum_layoffs(frame, [COUNTRY_COLUMN], dropna=False))


def layoffs_by_country_industry(frame: pd.DataFrame) -> pd.DataFrame:
    """Return ``country, industry, layoffs`` rows by country, then layoffs descending."""
    table = sum_layoffs(frame, [COUNTRY_COLUMN, INDUSTRY_COLUMN], dropna=False)
    return sort_by_layoffs(table, leading=[COUNTRY_COLUMN])
