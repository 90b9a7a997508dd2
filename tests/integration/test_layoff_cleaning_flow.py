"""Integration tests for the raw-to-report workflow."""

from __future__ import annotations

from datetime import date

import pandas as pd

from core.constants import BUSINESS_COLUMNS
from core.types import ReportOptions
from ingest.pipeline import clean_layoff_file
from reports.report_bundle import build_report_bundle
from tests.fixture_paths import sample_layoffs_path


def test_sample_export_cleans_to_expected_dataset() -> None:
    """End-to-end cleaning should dedupe, normalize, infer and prune."""
    result = clean_layoff_file(sample_layoffs_path())
    dataset = result.dataset.set_index("company", drop=False)

    assert [summary.output_rows for summary in result.stage_summaries] == [11, 11, 11, 11, 10]
    assert list(result.dataset.columns) == list(BUSINESS_COLUMNS)
    assert not result.dataset.duplicated().any()
    assert "Ghost Inc" not in dataset.index
    assert dataset.loc["Acme", "industry"].tolist() == ["Tech", "Tech"]
    assert set(dataset.loc[["Coinbase", "Gemini", "BlockFi"], "industry"]) == {"Crypto Currency"}
    assert set(result.dataset["country"]) == {"Australia", "United States"}
    assert pd.isna(dataset.loc["Bally's Interactive", "industry"])
    assert dataset.loc["Glitchy", "date"] is None
    assert dataset.loc["Atlassian", "date"] == date(2023, 3, 6)


def test_sample_export_reports_match_hand_computed_totals() -> None:
    """Reports over the cleaned sample should match hand-computed values."""
    dataset = clean_layoff_file(sample_layoffs_path()).dataset

    bundle = build_report_bundle(dataset, ReportOptions(company="Amazon", top_n=3))
    tables = bundle.tables

    assert bundle.total_layoffs == 19948
    assert tables["layoffs_by_year"]["layoffs"].tolist() == [10368, 9550]
    assert tables["layoffs_by_month"]["year_month"].tolist() == [
        "2022-07",
        "2022-11",
        "2023-01",
        "2023-03",
    ]
    assert tables["layoffs_by_industry"].loc[0, "industry"] == "Retail"
    assert tables["company_timeline"]["layoffs"].tolist() == [10000, 8000]
    assert tables["layoffs_by_funding_range"]["funding_range"].tolist() == [
        "0M",
        "10M-100M",
        "100M-1B",
    ]
    assert tables["outliers"]["company"].tolist() == ["Amazon"]
    assert tables["outliers"].loc[0, "total_laid_off"] == 10000
