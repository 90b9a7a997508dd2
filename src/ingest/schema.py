"""Structural validation and staging for raw layoff datasets.

This module refuses datasets whose column set or value types do not
match the nine business columns, and builds the typed staging copy
that every cleaning stage works on.
"""

from __future__ import annotations

import pandas as pd

from core.constants import (
    BUSINESS_COLUMNS,
    DATE_COLUMN,
    DECIMAL_COLUMNS,
    INTEGER_COLUMNS,
    TEXT_COLUMNS,
)
from core.errors import SiftSchemaError


def normalize_column_names(frame: pd.DataFrame) -> pd.DataFrame:
    """Rename headers to lowercase without surrounding whitespace.

    Args:
        frame: Dataset with raw header names.

    Returns:
        Dataset with normalized header names.

    Raises:
        SiftSchemaError: If two headers collapse to the same name.
    """
    renamed = {column: str(column).strip().lower() for column in frame.columns}
    normalized_names = list(renamed.values())
    duplicates = sorted({name for name in normalized_names if normalized_names.count(name) > 1})
    if duplicates:
        raise SiftSchemaError(
            f"Dataset has duplicate columns after header normalization: {duplicates}. "
            "Keep exactly one column per business field."
        )
    return frame.rename(columns=renamed)


def validate_layoff_frame(frame: object) -> None:
    """Validate the column set and value types of a raw dataset.

    Args:
        frame: Candidate dataset with normalized header names.

    Raises:
        SiftSchemaError: If the dataset is structurally invalid.
    """
    if not isinstance(frame, pd.DataFrame):
        raise SiftSchemaError(
            f"Expected a pandas DataFrame of layoff records, got {type(frame).__name__}."
        )
    columns = [str(column) for column in frame.columns]
    missing = [column for column in BUSINESS_COLUMNS if column not in columns]
    unexpected = [column for column in columns if column not in BUSINESS_COLUMNS]
    if missing or unexpected:
        raise SiftSchemaError(
            f"Dataset columns do not match the layoff schema: missing={missing}, "
            f"unexpected={unexpected}. Expected exactly: {list(BUSINESS_COLUMNS)}."
        )
    for column in (*TEXT_COLUMNS, DATE_COLUMN):
        _validate_text_column(frame[column], column)


def stage_raw_frame(frame: object) -> pd.DataFrame:
    """Build a typed staging copy of a raw dataset.

    The caller's frame is never modified. Text columns become pandas
    ``string`` columns, integer columns ``Int64`` and decimal columns
    ``Float64``; blank or non-numeric text in numeric columns becomes null.
    The date column keeps its raw text for the date coercion stage.

    Args:
        frame: Raw dataset.

    Returns:
        Staging copy with business columns in canonical order.

    Raises:
        SiftSchemaError: If the dataset is structurally invalid.
    """
    if not isinstance(frame, pd.DataFrame):
        raise SiftSchemaError(
            f"Expected a pandas DataFrame of layoff records, got {type(frame).__name__}."
        )
    staged = normalize_column_names(frame.copy())
    validate_layoff_frame(staged)
    staged = staged.loc[:, list(BUSINESS_COLUMNS)].reset_index(drop=True)
    for column in (*TEXT_COLUMNS, DATE_COLUMN):
        staged[column] = staged[column].astype("string")
    for column in INTEGER_COLUMNS:
        staged[column] = _to_numeric(staged[column], column).round().astype("Int64")
    for column in DECIMAL_COLUMNS:
        staged[column] = _to_numeric(staged[column], column).astype("Float64")
    return staged


def _validate_text_column(series: pd.Series, column: str) -> None:
    if isinstance(series.dtype, pd.StringDtype):
        return
    non_text = series.dropna().map(lambda value: not isinstance(value, str))
    if non_text.any():
        sample = series.dropna()[non_text].iloc[0]
        raise SiftSchemaError(
            f"Column '{column}' must hold text values, found {type(sample).__name__} "
            f"value {sample!r}. Load the dataset with text columns as strings."
        )


def _to_numeric(series: pd.Series, column: str) -> pd.Series:
    """Coerce a loosely typed column to floats, nulling non-numeric text."""
    values = series.astype(object).where(series.notna(), None)
    if values.map(lambda value: isinstance(value, str)).any():
        values = values.map(lambda value: value.strip() if isinstance(value, str) else value)
    try:
        return pd.to_numeric(values, errors="coerce").astype("float64")
    except (TypeError, ValueError) as error:
        raise SiftSchemaError(
            f"Column '{column}' holds values that cannot be read as numbers: {error}."
        ) from error
