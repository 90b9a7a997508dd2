"""Text field normalization transform.

This module trims text fields, collapses messy industry spellings into
canonical labels and removes trailing periods from country names.
"""

from __future__ import annotations

import pandas as pd

from core.constants import COUNTRY_COLUMN, INDUSTRY_COLUMN, TEXT_COLUMNS
from core.types import CleaningRules, IndustryRule


def normalize_fields(frame: pd.DataFrame, rules: CleaningRules) -> pd.DataFrame:
    """Apply every normalization step in order.

    Args:
        frame: Working dataset.
        rules: Industry canonicalization rules.

    Returns:
        Normalized dataset with the same row count.
    """
    trimmed = strip_text_fields(frame)
    canonical = canonicalize_industries(trimmed, rules)
    return strip_country_periods(canonical)


def strip_text_fields(frame: pd.DataFrame) -> pd.DataFrame:
    """Strip surrounding whitespace from company, location, industry, stage and country."""
    normalized = frame.copy()
    for column in TEXT_COLUMNS:
        normalized[column] = normalized[column].astype("string").str.strip()
    return normalized


def canonicalize_industries(frame: pd.DataFrame, rules: CleaningRules) -> pd.DataFrame:
    """Rewrite industry values matched by a rule to its canonical label.

    Matching is case-insensitive and the first matching rule wins.

    Args:
        frame: Working dataset.
        rules: Ordered industry rules.

    Returns:
        Dataset with canonical industry labels.
    """
    normalized = frame.copy()
    industry = normalized[INDUSTRY_COLUMN].astype("string")
    lowered = industry.str.lower()
    unmatched = pd.Series(True, index=industry.index)
    for rule in rules.industry_rules:
        hits = _rule_hits(lowered, rule) & unmatched
        industry = industry.mask(hits, rule.canonical)
        unmatched &= ~hits
    normalized[INDUSTRY_COLUMN] = industry
    return normalized


def strip_country_periods(frame: pd.DataFrame) -> pd.DataFrame:
    """Remove every trailing period from country names."""
    normalized = frame.copy()
    normalized[COUNTRY_COLUMN] = normalized[COUNTRY_COLUMN].astype("string").str.rstrip(".")
    return normalized


def _rule_hits(lowered: pd.Series, rule: IndustryRule) -> pd.Series:
    """Return a boolean mask of values matched by one rule."""
    pattern = rule.pattern.lower()
    if rule.match == "exact":
        hits = lowered.eq(pattern)
    else:
        hits = lowered.str.startswith(pattern)
    return hits.fillna(False).astype(bool)
