"""Exact record deduplication transform.

This module keeps the first record of every group of rows that agree
on all nine business fields. It is the first cleaning stage.
"""

from __future__ import annotations

import pandas as pd

from core.constants import BUSINESS_COLUMNS


def remove_duplicate_records(frame: pd.DataFrame) -> pd.DataFrame:
    """Remove records identical across all business fields.

    Records are ranked inside each tuple-equality group in row order and
    only the first is kept. Nulls compare equal to each other.

    Args:
        frame: Working dataset.

    Returns:
        Dataset with duplicates removed and a fresh index.
    """
    duplicate_mask = frame.duplicated(subset=list(BUSINESS_COLUMNS), keep="first")
    return frame.loc[~duplicate_mask].reset_index(drop=True)
