"""Conversions between cleaned frames and typed layoff records.

This module centralizes row serialization so SDK callers can work with
``LayoffRecord`` objects instead of frame rows.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Any, Iterable

import pandas as pd

from core.constants import (
    BUSINESS_COLUMNS,
    DATE_COLUMN,
    DECIMAL_COLUMNS,
    INTEGER_COLUMNS,
    TEXT_COLUMNS,
)
from core.types import LayoffRecord


def records_from_frame(frame: pd.DataFrame) -> list[LayoffRecord]:
    """Convert a cleaned dataset into typed records.

    Args:
        frame: Cleaned dataset.

    Returns:
        Records in row order.
    """
    rows = frame.loc[:, list(BUSINESS_COLUMNS)].to_dict(orient="records")
    return [_record_from_row(row) for row in rows]


def frame_from_records(records: Iterable[LayoffRecord]) -> pd.DataFrame:
    """Build a typed dataset from records.

    Args:
        records: Layoff records.

    Returns:
        Dataset with the nine business columns and cleaned column dtypes.
    """
    frame = pd.DataFrame(
        [asdict(record) for record in records],
        columns=list(BUSINESS_COLUMNS),
    )
    for column in TEXT_COLUMNS:
        frame[column] = frame[column].astype("string")
    for column in INTEGER_COLUMNS:
        frame[column] = frame[column].astype("Int64")
    for column in DECIMAL_COLUMNS:
        frame[column] = frame[column].astype("Float64")
    frame[DATE_COLUMN] = frame[DATE_COLUMN].astype(object)
    return frame


def _record_from_row(row: dict[str, Any]) -> LayoffRecord:
    return LayoffRecord(
        company=str(row["company"]),
        location=_optional_text(row["location"]),
        industry=_optional_text(row["industry"]),
        total_laid_off=_optional_int(row["total_laid_off"]),
        percentage_laid_off=_optional_float(row["percentage_laid_off"]),
        date=row["date"] if isinstance(row["date"], date) else None,
        stage=_optional_text(row["stage"]),
        country=_optional_text(row["country"]),
        funds_raised_millions=_optional_int(row["funds_raised_millions"]),
    )


def _optional_text(value: object) -> str | None:
    return None if _is_missing(value) else str(value)


def _optional_int(value: object) -> int | None:
    return None if _is_missing(value) else int(value)


def _optional_float(value: object) -> float | None:
    return None if _is_missing(value) else float(value)


def _is_missing(value: object) -> bool:
    return value is None or bool(pd.isna(value))
