"""Core constants used across Sift modules.

This module centralizes column names, defaults, and report buckets.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

COMPANY_COLUMN = "company"
LOCATION_COLUMN = "location"
INDUSTRY_COLUMN = "industry"
TOTAL_LAID_OFF_COLUMN = "total_laid_off"
PERCENTAGE_LAID_OFF_COLUMN = "percentage_laid_off"
DATE_COLUMN = "date"
STAGE_COLUMN = "stage"
COUNTRY_COLUMN = "country"
FUNDS_RAISED_COLUMN = "funds_raised_millions"

BUSINESS_COLUMNS = (
    COMPANY_COLUMN,
    LOCATION_COLUMN,
    INDUSTRY_COLUMN,
    TOTAL_LAID_OFF_COLUMN,
    PERCENTAGE_LAID_OFF_COLUMN,
    DATE_COLUMN,
    STAGE_COLUMN,
    COUNTRY_COLUMN,
    FUNDS_RAISED_COLUMN,
)
TEXT_COLUMNS = (
    COMPANY_COLUMN,
    LOCATION_COLUMN,
    INDUSTRY_COLUMN,
    STAGE_COLUMN,
    COUNTRY_COLUMN,
)
INTEGER_COLUMNS = (TOTAL_LAID_OFF_COLUMN, FUNDS_RAISED_COLUMN)
DECIMAL_COLUMNS = (PERCENTAGE_LAID_OFF_COLUMN,)

RAW_NULL_TOKENS = ("NULL",)
DEFAULT_DATE_FORMAT = "%m/%d/%Y"
YEAR_MONTH_FORMAT = "%Y-%m"
DEFAULT_INFERENCE_KEYS = (COMPANY_COLUMN,)
DEFAULT_OUTLIER_SIGMA = 2.0
DEFAULT_TOP_COMPANIES = 10
DEFAULT_TIMELINE_COMPANY = "Amazon"
RULES_FILE_VERSION = 1
SUPPORTED_RULE_MATCHES = ("prefix", "exact")

FUNDING_RANGE_LABELS = (
    "0M",
    "<10M",
    "10M-100M",
    "100M-1B",
    "1B-10B",
    "10B-100B",
    ">100B",
)

CLEANING_STAGES = (
    "deduplicated",
    "normalized",
    "date_coerced",
    "nulls_reconciled",
    "pruned",
)
