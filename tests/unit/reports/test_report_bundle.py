"""Unit tests for the report bundle."""

from __future__ import annotations

from datetime import date
import json

from core.types import ReportOptions
from reports.report_bundle import build_report_bundle, bundle_to_payload, table_to_records
from tests.frame_builders import cleaned_layoff_frame, layoff_record


def test_build_report_bundle_runs_every_report() -> None:
    """Bundle should hold every report table and the overall total."""
    frame = cleaned_layoff_frame(
        layoff_record(company="Amazon", total_laid_off=100),
        layoff_record(company="Acme", total_laid_off=None),
    )

    bundle = build_report_bundle(frame, ReportOptions(company="Amazon", top_n=1))

    assert bundle.total_layoffs == 100
    assert set(bundle.tables) == {
        "layoffs_by_year",
        "layoffs_by_month",
        "layoffs_by_industry",
        "layoffs_by_industry_year",
        "top_companies",
        "company_timeline",
        "layoffs_by_country",
        "layoffs_by_country_industry",
        "country_timeline",
        "layoffs_by_funding_range",
        "company_funding_ranges",
        "outliers",
    }
    assert len(bundle.tables["top_companies"]) == 1


def test_bundle_to_payload_is_json_serializable() -> None:
    """Payload should encode nulls and dates without custom encoders."""
    frame = cleaned_layoff_frame(
        layoff_record(total_laid_off=None, industry=None),
        layoff_record(company="Globex", date=None),
    )

    payload = bundle_to_payload(build_report_bundle(frame))

    assert json.loads(json.dumps(payload))["total_layoffs"] == 10


def test_table_to_records_converts_dates_and_nulls() -> None:
    """Record rows should carry ISO dates and None for nulls."""
    frame = cleaned_layoff_frame(layoff_record(date=date(2023, 3, 6), industry=None))

    rows = table_to_records(frame)

    assert rows[0]["date"] == "2023-03-06"
    assert rows[0]["industry"] is None
    assert rows[0]["total_laid_off"] == 10
