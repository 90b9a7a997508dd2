"""Unit tests for the raw dataset reader."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from core.constants import BUSINESS_COLUMNS
from core.errors import SiftIngestError, SiftSchemaError
from ingest.input_reader import read_raw_layoffs
from tests.fixture_paths import fixture_path, sample_layoffs_path


def test_read_raw_layoffs_reads_every_row_as_text() -> None:
    """Reader should load all rows with the nine business columns."""
    frame = read_raw_layoffs(sample_layoffs_path())

    assert list(frame.columns) == list(BUSINESS_COLUMNS)
    assert len(frame) == 12
    assert frame.loc[0, "total_laid_off"] == "500"


def test_read_raw_layoffs_keeps_blanks_apart_from_null_tokens() -> None:
    """Empty cells should stay empty while NULL tokens become missing."""
    frame = read_raw_layoffs(sample_layoffs_path())

    acme_blank_industry = frame.loc[3, "industry"]
    ballys_industry = frame.loc[8, "industry"]

    assert acme_blank_industry == ""
    assert pd.isna(ballys_industry)


def test_read_raw_layoffs_normalizes_header_names(tmp_path: Path) -> None:
    """Reader should accept headers differing only in case and spacing."""
    source_path = tmp_path / "layoffs.csv"
    header = ",".join(f" {column.upper()} " for column in BUSINESS_COLUMNS)
    source_path.write_text(
        f"{header}\nAcme,Austin,Tech,10,0.1,1/5/2023,Seed,United States,20\n",
        encoding="utf-8",
    )

    frame = read_raw_layoffs(source_path)

    assert list(frame.columns) == list(BUSINESS_COLUMNS)


def test_read_raw_layoffs_raises_for_missing_path(tmp_path: Path) -> None:
    """Reader should fail when source path is missing."""
    missing_path = tmp_path / "does-not-exist.csv"

    with pytest.raises(SiftIngestError):
        read_raw_layoffs(missing_path)

    assert missing_path.exists() is False


def test_read_raw_layoffs_raises_for_empty_file(tmp_path: Path) -> None:
    """Reader should fail for a file without a header row."""
    source_path = tmp_path / "empty.csv"
    source_path.write_text("", encoding="utf-8")

    with pytest.raises(SiftIngestError):
        read_raw_layoffs(source_path)


def test_read_raw_layoffs_raises_for_missing_column() -> None:
    """Reader should refuse a file without every business column."""
    with pytest.raises(SiftSchemaError):
        read_raw_layoffs(fixture_path("raw/missing_column.csv"))
