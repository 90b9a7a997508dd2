"""Date text coercion transform.

This module parses raw ``month/day/year`` text into calendar dates.
Unparseable values become null instead of failing the batch.
"""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd

from core.constants import DATE_COLUMN, DEFAULT_DATE_FORMAT
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


def coerce_dates(frame: pd.DataFrame, date_format: str = DEFAULT_DATE_FORMAT) -> pd.DataFrame:
    """Replace raw date text with ``datetime.date`` values.

    Args:
        frame: Working dataset with date text.
        date_format: strptime pattern of the raw text.

    Returns:
        Dataset whose date column holds dates or ``None``.
    """
    coerced = frame.copy()
    raw_values = coerced[DATE_COLUMN].astype(object).where(coerced[DATE_COLUMN].notna(), None)
    raw_text = raw_values.map(_clean_text)
    parsed = pd.to_datetime(raw_text, format=date_format, errors="coerce")
    parsed_dates = [
        _as_date(raw_value, timestamp) for raw_value, timestamp in zip(raw_values, parsed)
    ]
    coerced[DATE_COLUMN] = pd.Series(parsed_dates, index=coerced.index, dtype=object)
    _log_unparseable_dates(raw_text, parsed, date_format)
    return coerced


def _as_date(raw_value: object, timestamp: object) -> date | None:
    """Return the parsed date, keeping values that already are dates.

    Date and datetime values only reach this stage when it is called on its
    own; the pipeline validates the raw date column as text.
    """
    if isinstance(raw_value, datetime):
        return raw_value.date()
    if isinstance(raw_value, date):
        return raw_value
    if pd.isna(timestamp):
        return None
    return timestamp.date()


def _clean_text(value: object) -> str | None:
    """Strip date text and treat blanks as missing."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def _log_unparseable_dates(raw_text: pd.Series, parsed: pd.Series, date_format: str) -> None:
    unparseable = raw_text.notna() & parsed.isna()
    count = int(unparseable.sum())
    if count == 0:
        return
    samples = raw_text[unparseable].drop_duplicates().head(5).tolist()
    _LOGGER.warning(
        "unparseable_dates",
        count=count,
        date_format=date_format,
        samples=samples,
    )
