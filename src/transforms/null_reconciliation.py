"""Null reconciliation and industry inference transform.

This module flattens blank text into real nulls, then fills missing
industries from sibling records of the same company. Inference is a
heuristic: it never overwrites a known industry.
"""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from core.constants import (
    BUSINESS_COLUMNS,
    DEFAULT_INFERENCE_KEYS,
    INDUSTRY_COLUMN,
    TEXT_COLUMNS,
)
from core.errors import SiftTransformError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def reconcile_nulls(
    frame: pd.DataFrame,
    inference_keys: Sequence[str] = DEFAULT_INFERENCE_KEYS,
) -> pd.DataFrame:
    """Rewrite blanks to nulls, then infer missing industries.

    Args:
        frame: Working dataset.
        inference_keys: Columns a sibling must share to lend its industry.

    Returns:
        Reconciled dataset with the same row count.

    Raises:
        SiftTransformError: If inference keys are invalid.
    """
    return infer_missing_industries(blank_text_to_null(frame), inference_keys)


def blank_text_to_null(frame: pd.DataFrame) -> pd.DataFrame:
    """Rewrite empty or whitespace-only text fields to null."""
    reconciled = frame.copy()
    for column in TEXT_COLUMNS:
        values = reconciled[column].astype("string")
        is_blank = values.str.strip().eq("").fillna(False).astype(bool)
        reconciled[column] = values.mask(is_blank)
    return reconciled


def infer_missing_industries(
    frame: pd.DataFrame,
    inference_keys: Sequence[str] = DEFAULT_INFERENCE_KEYS,
) -> pd.DataFrame:
    """Fill null industries from sibling records.

    A sibling is any record sharing every inference key, with nulls never
    matching. The first non-null industry in row order wins when siblings
    disagree; the disagreeing groups are logged.

    Args:
        frame: Working dataset with blanks already nulled.
        inference_keys: Columns a sibling must share to lend its industry.

    Returns:
        Dataset with inferred industries.

    Raises:
        SiftTransformError: If inference keys are invalid.
    """
    keys = validate_inference_keys(inference_keys)
    reconciled = frame.copy()
    industry = reconciled[INDUSTRY_COLUMN].astype("string")
    siblings = reconciled.assign(**{INDUSTRY_COLUMN: industry}).groupby(
        keys, sort=False, dropna=True
    )[INDUSTRY_COLUMN]
    first_known = siblings.transform("first").astype("string")
    filled = industry.fillna(first_known)
    reconciled[INDUSTRY_COLUMN] = filled
    _log_ambiguous_groups(siblings.nunique(), keys)
    inferred_count = int((industry.isna() & filled.notna()).sum())
    if inferred_count:
        _LOGGER.info("industries_inferred", count=inferred_count, inference_keys=keys)
    return reconciled


def validate_inference_keys(inference_keys: Sequence[str]) -> list[str]:
    """Validate the columns used to match sibling records.

    Args:
        inference_keys: Candidate key columns.

    Returns:
        Keys as a list.

    Raises:
        SiftTransformError: If keys are empty, unknown, or include industry.
    """
    keys = list(inference_keys)
    if not keys:
        raise SiftTransformError(
            "Industry inference needs at least one key column. Use ('company',)."
        )
    unknown = [key for key in keys if key not in BUSINESS_COLUMNS]
    if unknown:
        raise SiftTransformError(
            f"Unknown industry inference keys {unknown}. "
            f"Choose from: {', '.join(BUSINESS_COLUMNS)}."
        )
    if INDUSTRY_COLUMN in keys:
        raise SiftTransformError(
            "Industry inference keys cannot include 'industry' itself."
        )
    return keys


def _log_ambiguous_groups(distinct_counts: pd.Series, keys: list[str]) -> None:
    ambiguous = distinct_counts[distinct_counts > 1]
    if ambiguous.empty:
        return
    _LOGGER.warning(
        "ambiguous_industry_inference",
        group_count=len(ambiguous),
        inference_keys=keys,
        groups=[str(group) for group in ambiguous.index.tolist()],
    )
