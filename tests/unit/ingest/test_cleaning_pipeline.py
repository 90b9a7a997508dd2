"""Unit tests for cleaning pipeline orchestration."""

from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from core.constants import CLEANING_STAGES, TEXT_COLUMNS
from core.errors import SiftSchemaError, SiftTransformError
from core.types import CleaningOptions
from ingest.pipeline import CleaningPipelineRunner, build_cleaning_options, clean_layoffs
from tests.fixture_paths import fixture_path
from tests.frame_builders import raw_layoff_frame


def test_clean_layoffs_runs_stages_in_order() -> None:
    """Every stage should report row counts in pipeline order."""
    raw_frame = raw_layoff_frame(
        {},
        {},
        {"company": "Ghost", "total_laid_off": None, "percentage_laid_off": None},
    )

    result = clean_layoffs(raw_frame)

    assert tuple(summary.stage for summary in result.stage_summaries) == CLEANING_STAGES
    assert result.stage_summaries[0].removed_rows == 1
    assert result.stage_summaries[-1].removed_rows == 1
    assert len(result.dataset) == 1


def test_clean_layoffs_fills_blank_industry_from_same_company() -> None:
    """A blank industry should be inferred from another Acme record."""
    raw_frame = raw_layoff_frame(
        {"company": "Acme", "industry": "Tech", "date": "1/5/2023"},
        {"company": "Acme", "industry": "", "date": "2/9/2023"},
    )

    result = clean_layoffs(raw_frame)

    assert result.dataset["industry"].tolist() == ["Tech", "Tech"]


def test_clean_layoffs_drops_rows_without_magnitude() -> None:
    """A record with both magnitudes null should be absent from the output."""
    raw_frame = raw_layoff_frame(
        {"company": "Ghost", "total_laid_off": None, "percentage_laid_off": None},
        {"company": "Acme"},
    )

    result = clean_layoffs(raw_frame)

    assert "Ghost" not in result.dataset["company"].tolist()


def test_clean_layoffs_keeps_records_with_malformed_dates() -> None:
    """A malformed date should become null while the record is kept."""
    raw_frame = raw_layoff_frame({"date": "not-a-date"}, {"company": "Globex", "date": "3/6/2023"})

    result = clean_layoffs(raw_frame)

    assert result.dataset["date"].tolist() == [None, date(2023, 3, 6)]


def test_clean_layoffs_enforces_text_invariants() -> None:
    """Cleaned text should be trimmed, without blanks or trailing periods."""
    raw_frame = raw_layoff_frame(
        {"company": " Acme ", "country": "United States.", "industry": " "},
        {"company": "Globex ", "location": " Austin ", "stage": " Seed", "country": "USA.."},
    )

    dataset = clean_layoffs(raw_frame).dataset

    for column in TEXT_COLUMNS:
        values = dataset[column].dropna()
        assert (values == values.str.strip()).all()
        assert not values.eq("").any()
    assert dataset["country"].tolist() == ["United States", "USA"]


def test_clean_layoffs_does_not_mutate_raw_frame() -> None:
    """The raw frame should be left untouched by cleaning."""
    raw_frame = raw_layoff_frame({"company": " Acme "}, {"company": " Acme "})
    snapshot = raw_frame.copy()

    clean_layoffs(raw_frame)

    pd.testing.assert_frame_equal(raw_frame, snapshot)


def test_clean_layoffs_refuses_structurally_invalid_input() -> None:
    """Missing columns should stop the pipeline before any stage runs."""
    raw_frame = raw_layoff_frame({}).drop(columns=["country"])

    with pytest.raises(SiftSchemaError):
        clean_layoffs(raw_frame)


def test_runner_rejects_invalid_inference_keys() -> None:
    """Invalid inference keys should fail when the runner is built."""
    with pytest.raises(SiftTransformError):
        CleaningPipelineRunner(CleaningOptions(inference_keys=("headcount",)))


def test_build_cleaning_options_reads_rules_from_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """SIFT_RULES_PATH should select the rules used by normalization."""
    monkeypatch.setenv("SIFT_RULES_PATH", str(fixture_path("rules/custom_rules.yaml")))

    options = build_cleaning_options()
    result = clean_layoffs(raw_layoff_frame({"industry": "CryptoCurrency"}), options)

    assert result.dataset.loc[0, "industry"] == "Crypto"


def test_build_cleaning_options_prefers_explicit_rules_path() -> None:
    """An explicit rules path should override configured rules."""
    options = build_cleaning_options(rules_path=fixture_path("rules/custom_rules.yaml"))

    assert len(options.rules.industry_rules) == 2


def test_clean_layoffs_removes_rows_duplicated_by_normalization() -> None:
    """Rows differing only in whitespace or industry spelling should collapse."""
    raw_frame = raw_layoff_frame(
        {"company": "Acme "},
        {"company": "Acme"},
        {"company": "Beta", "industry": "Crypto"},
        {"company": "Beta", "industry": "CryptoCurrency"},
    )

    result = clean_layoffs(raw_frame)

    assert result.dataset["company"].tolist() == ["Acme", "Beta"]
    assert not result.dataset.duplicated().any()
    assert result.stage_summaries[0].output_rows == 4
    assert result.stage_summaries[-1].output_rows == 2
