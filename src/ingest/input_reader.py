"""Raw layoff dataset readers.

This module loads the raw CSV export into a text-typed frame and
validates its column structure before any cleaning happens.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from core.constants import RAW_NULL_TOKENS
from core.errors import SiftIngestError
from core.logging_config import get_logger
from ingest.schema import normalize_column_names, validate_layoff_frame

_LOGGER = get_logger(__name__)


def read_raw_layoffs(source_path: str | Path) -> pd.DataFrame:
    """Load a raw layoff CSV file.

    Every cell is read as text. The literal ``NULL`` token becomes a
    missing value while empty cells stay empty strings, so blank and
    null industries remain distinguishable for reconciliation.

    Args:
        source_path: Path to a CSV file with the nine business columns.

    Returns:
        Raw dataset with normalized header names.

    Raises:
        SiftIngestError: If the file is missing or unreadable.
        SiftSchemaError: If the file does not have the expected columns.
    """
    csv_path = Path(source_path).expanduser()
    if not csv_path.is_file():
        raise SiftIngestError(
            f"Failed to read source at {csv_path}: file does not exist. "
            "Provide an existing CSV file."
        )
    frame = _read_csv(csv_path)
    frame = normalize_column_names(frame)
    validate_layoff_frame(frame)
    _LOGGER.info("raw_dataset_loaded", source_path=str(csv_path), row_count=len(frame))
    return frame


def _read_csv(csv_path: Path) -> pd.DataFrame:
    """Read CSV content as text columns.

    Args:
        csv_path: Existing CSV file path.

    Returns:
        Parsed frame.

    Raises:
        SiftIngestError: If the CSV cannot be decoded or parsed.
    """
    try:
        return pd.read_csv(
            csv_path,
            dtype=str,
            keep_default_na=False,
            na_values=list(RAW_NULL_TOKENS),
            encoding="utf-8-sig",
        )
    except pd.errors.EmptyDataError as error:
        raise SiftIngestError(
            f"Failed to read source at {csv_path}: file is empty. "
            "Export the raw dataset with a header row."
        ) from error
    except (pd.errors.ParserError, UnicodeDecodeError) as error:
        raise SiftIngestError(
            f"Failed to parse CSV at {csv_path}: {error}. Fix the file encoding or quoting."
        ) from error
    except OSError as error:
        raise SiftIngestError(
            f"Failed to read source at {csv_path}: {error}. Check file permissions."
        ) from error
