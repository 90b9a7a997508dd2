"""CSV export for cleaned datasets and report tables.

This module writes the terminal cleaned dataset and every report table
to local CSV files for downstream tools.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from core.errors import SiftStoreError
from core.logging_config import get_logger
from reports.report_bundle import ReportBundle

_LOGGER = get_logger(__name__)

TOTAL_LAYOFFS_FILE_NAME = "total_layoffs.csv"


def write_cleaned_dataset(frame: pd.DataFrame, output_path: str | Path) -> Path:
    """Write a cleaned dataset to CSV.

    Dates are written as ISO text and nulls as empty cells.

    Args:
        frame: Cleaned dataset.
        output_path: Destination CSV path.

    Returns:
        Resolved output path.

    Raises:
        SiftStoreError: If the file cannot be written.
    """
    csv_path = Path(output_path).expanduser().resolve()
    _write_csv(frame, csv_path)
    _LOGGER.info("cleaned_dataset_written", output_path=str(csv_path), row_count=len(frame))
    return csv_path


def write_report_tables(bundle: ReportBundle, output_dir: str | Path) -> list[Path]:
    """Write one CSV per report plus a total-layoffs file.

    Args:
        bundle: Computed reports.
        output_dir: Destination directory, created when missing.

    Returns:
        Written file paths in report order.

    Raises:
        SiftStoreError: If a file cannot be written.
    """
    report_dir = Path(output_dir).expanduser().resolve()
    total_path = report_dir / TOTAL_LAYOFFS_FILE_NAME
    _write_csv(pd.DataFrame({"total_layoffs": [bundle.total_layoffs]}), total_path)
    written_paths = [total_path]
    for report_name, table in bundle.tables.items():
        table_path = report_dir / f"{report_name}.csv"
        _write_csv(table, table_path)
        written_paths.append(table_path)
    _LOGGER.info("report_tables_written", output_dir=str(report_dir), file_count=len(written_paths))
    return written_paths


def _write_csv(frame: pd.DataFrame, csv_path: Path) -> None:
    """Write a frame to CSV, creating parent directories.

    Raises:
        SiftStoreError: If write fails.
    """
    try:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(csv_path, index=False)
    except OSError as error:
        raise SiftStoreError(
            f"Failed to write CSV at {csv_path}: {error}. "
            "Check write permissions and available disk space."
        ) from error
