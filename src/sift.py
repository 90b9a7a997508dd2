"""Public SDK surface for Sift.

This module provides a stable import path for notebook and script users.
It re-exports the cleaning entry points, report queries and typed models.
"""

from __future__ import annotations

from core.cleaning_rules import default_cleaning_rules, load_cleaning_rules
from core.config import SiftConfig
from core.types import (
    CleaningOptions,
    CleaningResult,
    CleaningRules,
    IndustryRule,
    LayoffRecord,
    ReportOptions,
    StageSummary,
)
from ingest.input_reader import read_raw_layoffs
from ingest.pipeline import build_cleaning_options, clean_layoff_file, clean_layoffs
from reports.funding import company_funding_ranges, layoffs_by_funding_range
from reports.outliers import find_outliers, outlier_threshold
from reports.report_bundle import ReportBundle, build_report_bundle
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
from store.dataset_export import write_cleaned_dataset, write_report_tables
from store.record_rows import frame_from_records, records_from_frame

__all__ = [
    "CleaningOptions",
    "CleaningResult",
    "CleaningRules",
    "IndustryRule",
    "LayoffRecord",
    "ReportBundle",
    "ReportOptions",
    "SiftConfig",
    "StageSummary",
    "build_cleaning_options",
    "build_report_bundle",
    "clean_layoff_file",
    "clean_layoffs",
    "company_funding_ranges",
    "company_timeline",
    "country_timeline",
    "default_cleaning_rules",
    "find_outliers",
    "frame_from_records",
    "layoffs_by_country",
    "layoffs_by_country_industry",
    "layoffs_by_funding_range",
    "layoffs_by_industry",
    "layoffs_by_industry_year",
    "layoffs_by_month",
    "layoffs_by_year",
    "load_cleaning_rules",
    "outlier_threshold",
    "read_raw_layoffs",
    "records_from_frame",
    "top_companies",
    "total_layoffs",
    "write_cleaned_dataset",
    "write_report_tables",
]
