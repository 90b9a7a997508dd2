"""Shared typed models.

This module defines immutable data models used by ingest, transform,
report, and store layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Literal

import pandas as pd

from core.constants import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_INFERENCE_KEYS,
    DEFAULT_OUTLIER_SIGMA,
    DEFAULT_TIMELINE_COMPANY,
    DEFAULT_TOP_COMPANIES,
)

RuleMatch = Literal["prefix", "exact"]


@dataclass(frozen=True)
class LayoffRecord:
    """One observed layoff event after cleaning.

    Attributes:
        company: Company name.
        location: Office or headquarters location.
        industry: Canonical industry label, inferred when missing.
        total_laid_off: Headcount reduced.
        percentage_laid_off: Fraction of the workforce reduced.
        date: Event date.
        stage: Funding or company stage.
        country: Country name.
        funds_raised_millions: Funds raised in millions.
    """

    company: str
    location: str | None
    industry: str | None
    total_laid_off: int | None
    percentage_laid_off: float | None
    date: date | None
    stage: str | None
    country: str | None
    funds_raised_millions: int | None


@dataclass(frozen=True)
class IndustryRule:
    """Canonicalization rule for one messy industry family.

    Attributes:
        pattern: Text compared case-insensitively with industry values.
        canonical: Label written to every matching value.
        match: ``prefix`` for starts-with matching, ``exact`` for equality.
    """

    pattern: str
    canonical: str
    match: RuleMatch = "prefix"


@dataclass(frozen=True)
class CleaningRules:
    """Configurable standardization rules.

    Attributes:
        industry_rules: Ordered industry rules, first match wins.
    """

    industry_rules: tuple[IndustryRule, ...] = ()


@dataclass(frozen=True)
class CleaningOptions:
    """Cleaning pipeline options.

    Attributes:
        rules: Standardization rules applied by the normalization stage.
        date_format: strptime pattern of raw date text.
        inference_keys: Columns a sibling must share to lend its industry.
    """

    rules: CleaningRules = field(default_factory=CleaningRules)
    date_format: str = DEFAULT_DATE_FORMAT
    inference_keys: tuple[str, ...] = DEFAULT_INFERENCE_KEYS


@dataclass(frozen=True)
class StageSummary:
    """Row counts observed around one cleaning stage.

    Attributes:
        stage: Stage name.
        input_rows: Rows handed to the stage.
        output_rows: Rows returned by the stage.
    """

    stage: str
    input_rows: int
    output_rows: int

    @property
    def removed_rows(self) -> int:
        """Rows dropped by the stage."""
        return self.input_rows - self.output_rows


@dataclass(frozen=True)
class CleaningResult:
    """Cleaning pipeline output.

    Attributes:
        dataset: Cleaned dataset with the nine business columns.
        stage_summaries: Ordered per-stage row counts.
    """

    dataset: pd.DataFrame
    stage_summaries: tuple[StageSummary, ...]


@dataclass(frozen=True)
class ReportOptions:
    """Report bundle options.

    Attributes:
        company: Company used for the single-company timeline.
        top_n: Row limit of the top-companies report.
        outlier_sigma: Standard deviation multiplier for outliers.
    """

    company: str = DEFAULT_TIMELINE_COMPANY
    top_n: int = DEFAULT_TOP_COMPANIES
    outlier_sigma: float = DEFAULT_OUTLIER_SIGMA
