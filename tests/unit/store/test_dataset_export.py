"""Unit tests for CSV export."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from core.errors import SiftStoreError
from reports.report_bundle import build_report_bundle
from store.dataset_export import write_cleaned_dataset, write_report_tables
from tests.frame_builders import cleaned_layoff_frame, layoff_record


def test_write_cleaned_dataset_writes_iso_dates_and_blank_nulls(tmp_path: Path) -> None:
    """Cleaned CSV should hold ISO dates and empty null cells."""
    frame = cleaned_layoff_frame(layoff_record(industry=None))
    output_path = tmp_path / "out" / "cleaned.csv"

    written_path = write_cleaned_dataset(frame, output_path)
    written = pd.read_csv(written_path, dtype=str, keep_default_na=False)

    assert written_path == output_path.resolve()
    assert written.loc[0, "date"] == "2023-01-05"
    assert written.loc[0, "industry"] == ""


def test_write_report_tables_writes_one_file_per_report(tmp_path: Path) -> None:
    """Report export should write the total plus every report table."""
    bundle = build_report_bundle(cleaned_layoff_frame(layoff_record()))

    written_paths = write_report_tables(bundle, tmp_path / "reports")

    assert len(written_paths) == len(bundle.tables) + 1
    assert all(path.exists() for path in written_paths)
    assert pd.read_csv(written_paths[0]).loc[0, "total_layoffs"] == 10


def test_write_cleaned_dataset_raises_for_unwritable_path(tmp_path: Path) -> None:
    """Export should wrap filesystem errors."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(SiftStoreError):
        write_cleaned_dataset(cleaned_layoff_frame(layoff_record()), blocker / "cleaned.csv")
