"""Row pruning transform.

This module drops records that carry no layoff magnitude or no company,
then drops rows that earlier stages made identical. It is the terminal
cleaning stage.
"""

from __future__ import annotations

import pandas as pd

from core.constants import COMPANY_COLUMN, PERCENTAGE_LAID_OFF_COLUMN, TOTAL_LAID_OFF_COLUMN
from transforms.deduplication import remove_duplicate_records


def prune_unusable_records(frame: pd.DataFrame) -> pd.DataFrame:
    """Remove unusable records and records duplicated by earlier stages.

    Normalization and industry inference can turn two distinct raw rows
    into identical ones, so exact deduplication is applied again here.

    Args:
        frame: Working dataset.

    Returns:
        Retained unique records with a fresh index.
    """
    no_magnitude = frame[TOTAL_LAID_OFF_COLUMN].isna() & frame[PERCENTAGE_LAID_OFF_COLUMN].isna()
    no_company = frame[COMPANY_COLUMN].isna()
    return remove_duplicate_records(frame.loc[~(no_magnitude | no_company)])
