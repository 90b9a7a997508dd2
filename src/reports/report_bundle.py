"""Full report bundle over a cleaned dataset.

This module runs every reporting query and converts the resulting
tables into JSON-safe payloads for the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
import json
from typing import Mapping

import pandas as pd

from core.types import ReportOptions
from reports.funding import company_funding_ranges, layoffs_by_funding_range
from reports.outliers import find_outliers
from reports.segments import (
    layoffs_by_country,
    layoffs_by_country_industry,
    layoffs_by_industry,
    layoffs_by_industry_year,
    top_companies,
)
from reports.time_series import (
    company_timeline,
    country_timeline,
    layoffs_by_month,
    layoffs_by_year,
    total_layoffs,
)


@dataclass(frozen=True)
class ReportBundle:
    """Every report computed over one cleaned dataset.

    Attributes:
        total_layoffs: Sum of ``total_laid_off``.
        tables: Report tables keyed by report name, in display order.
    """

    total_layoffs: int
    tables: Mapping[str, pd.DataFrame]


def build_report_bundle(frame: pd.DataFrame, options: ReportOptions | None = None) -> ReportBundle:
    """Run every reporting query over a cleaned dataset.

    Args:
        frame: Cleaned dataset.
        options: Report options, defaults when omitted.

    Returns:
        Report bundle.

    Raises:
        SiftReportError: If options are invalid.
    """
    report_options = options or ReportOptions()
    tables = {
        "layoffs_by_year": layoffs_by_year(frame),
        "layoffs_by_month": layoffs_by_month(frame),
        "layoffs_by_industry": layoffs_by_industry(frame),
        "layoffs_by_industry_year": layoffs_by_industry_year(frame),
        "top_companies": top_companies(frame, report_options.top_n),
        "company_timeline": company_timeline(frame, report_options.company),
        "layoffs_by_country": layoffs_by_country(frame),
        "layoffs_by_country_industry": layoffs_by_country_industry(frame),
        "country_timeline": country_timeline(frame),
        "layoffs_by_funding_range": layoffs_by_funding_range(frame),
        "company_funding_ranges": company_funding_ranges(frame),
        "outliers": find_outliers(frame, report_options.outlier_sigma),
    }
    return ReportBundle(total_layoffs=total_layoffs(frame), tables=tables)


def bundle_to_payload(bundle: ReportBundle) -> dict[str, object]:
    """Convert a report bundle into a JSON-serializable dictionary."""
    return {
        "total_layoffs": bundle.total_layoffs,
        "reports": {name: table_to_records(table) for name, table in bundle.tables.items()},
    }


def table_to_records(table: pd.DataFrame) -> list[dict[str, object]]:
    """Convert a report table into JSON-safe row dictionaries.

    Nulls become ``None`` and dates become ISO strings.
    """
    prepared = table.copy()
    for column in prepared.columns:
        if prepared[column].dtype == object:
            prepared[column] = prepared[column].map(_isoformat_dates)
    return json.loads(prepared.to_json(orient="records"))


def _isoformat_dates(value: object) -> object:
    if isinstance(value, date):
        return value.isoformat()
    return value
