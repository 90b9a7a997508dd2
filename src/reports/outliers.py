"""Layoff magnitude outlier report.

A record is an outlier when its ``total_laid_off`` reaches the mean plus
``sigma`` population standard deviations of all known magnitudes.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from core.constants import DEFAULT_OUTLIER_SIGMA, TOTAL_LAID_OFF_COLUMN
from core.errors import SiftReportError


def outlier_threshold(frame: pd.DataFrame, sigma: float = DEFAULT_OUTLIER_SIGMA) -> float | None:
    """Return the outlier cut-off, or ``None`` when nothing can stand out.

    Args:
        frame: Cleaned dataset.
        sigma: Standard deviation multiplier.

    Returns:
        Threshold value, ``None`` for no known magnitudes or zero spread.

    Raises:
        SiftReportError: If sigma is not positive.
    """
    if sigma <= 0:
        raise SiftReportError(
            f"Invalid outlier sigma {sigma}: expected a positive number. "
            "Use --sigma with a value above zero."
        )
    magnitudes = _magnitudes(frame)
    known = magnitudes[~np.isnan(magnitudes)]
    if known.size == 0:
        return None
    spread = float(np.std(known))
    if spread == 0:
        return None
    return float(np.mean(known)) + sigma * spread


def find_outliers(frame: pd.DataFrame, sigma: float = DEFAULT_OUTLIER_SIGMA) -> pd.DataFrame:
    """Return records with unusually high layoffs, largest first.

    Raises:
        SiftReportError: If sigma is not positive.
    """
    threshold = outlier_threshold(frame, sigma)
    if threshold is None:
        return frame.iloc[0:0].reset_index(drop=True)
    is_outlier = _magnitudes(frame) >= threshold
    outliers = frame.loc[is_outlier]
    ordered = outliers.sort_values(TOTAL_LAID_OFF_COLUMN, ascending=False, kind="stable")
    return ordered.reset_index(drop=True)


def _magnitudes(frame: pd.DataFrame) -> np.ndarray:
    return frame[TOTAL_LAID_OFF_COLUMN].astype("Float64").to_numpy(dtype=float, na_value=np.nan)
