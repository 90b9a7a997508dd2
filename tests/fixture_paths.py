"""Shared fixture path helpers for tests."""

from __future__ import annotations

from pathlib import Path

SAMPLE_LAYOFFS_CSV = "raw/layoffs_sample.csv"


def fixture_path(relative_path: str) -> Path:
    """Resolve a fixture path relative to tests/fixtures.

    Args:
        relative_path: Path under fixtures root.

    Returns:
        Absolute fixture path.
    """
    return Path(__file__).resolve().parent / "fixtures" / relative_path


def sample_layoffs_path() -> Path:
    """Return the raw sample export used by end-to-end tests."""
    return fixture_path(SAMPLE_LAYOFFS_CSV)
