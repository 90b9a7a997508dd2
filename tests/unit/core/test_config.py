"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import SiftConfig
from core.constants import DEFAULT_DATE_FORMAT, DEFAULT_OUTLIER_SIGMA, DEFAULT_TOP_COMPANIES
from core.errors import SiftConfigError


def test_from_env_uses_defaults_without_variables() -> None:
    """Config should fall back to built-in defaults."""
    config = SiftConfig.from_env()

    assert config.rules_path is None
    assert config.date_format == DEFAULT_DATE_FORMAT
    assert config.outlier_sigma == DEFAULT_OUTLIER_SIGMA
    assert config.top_companies == DEFAULT_TOP_COMPANIES


def test_from_env_reads_rules_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve the rules path from environment."""
    monkeypatch.setenv("SIFT_RULES_PATH", "./rules/cleaning.yaml")

    config = SiftConfig.from_env()

    assert config.rules_path is not None
    assert config.rules_path.name == "cleaning.yaml" and config.rules_path.is_absolute()


def test_from_env_reads_numeric_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should parse sigma and top-company overrides."""
    monkeypatch.setenv("SIFT_OUTLIER_SIGMA", "3")
    monkeypatch.setenv("SIFT_TOP_COMPANIES", "5")

    config = SiftConfig.from_env()

    assert (config.outlier_sigma, config.top_companies) == (3.0, 5)


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("SIFT_OUTLIER_SIGMA", "wide"),
        ("SIFT_OUTLIER_SIGMA", "0"),
        ("SIFT_TOP_COMPANIES", "ten"),
        ("SIFT_TOP_COMPANIES", "0"),
        ("SIFT_DATE_FORMAT", "  "),
    ],
)
def test_from_env_raises_for_invalid_values(
    monkeypatch: pytest.MonkeyPatch,
    name: str,
    value: str,
) -> None:
    """Config should fail for unusable environment values."""
    monkeypatch.setenv(name, value)

    with pytest.raises(SiftConfigError):
        SiftConfig.from_env()
