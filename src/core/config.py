"""Runtime configuration model for Sift.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATE_FORMAT, DEFAULT_OUTLIER_SIGMA, DEFAULT_TOP_COMPANIES
from core.errors import SiftConfigError


@dataclass(frozen=True)
class SiftConfig:
    """Validated runtime configuration.

    Attributes:
        rules_path: Optional YAML file with cleaning rules.
        date_format: strptime pattern of raw date text.
        outlier_sigma: Standard deviation multiplier for outlier reports.
        top_companies: Default row limit for top-company reports.
    """

    rules_path: Path | None
    date_format: str
    outlier_sigma: float
    top_companies: int

    @classmethod
    def from_env(cls) -> "SiftConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SiftConfigError: If environment values are invalid.
        """
        rules_path_value = os.getenv("SIFT_RULES_PATH")
        date_format = os.getenv("SIFT_DATE_FORMAT", DEFAULT_DATE_FORMAT)
        outlier_sigma = _parse_outlier_sigma(
            os.getenv("SIFT_OUTLIER_SIGMA", str(DEFAULT_OUTLIER_SIGMA))
        )
        top_companies = _parse_top_companies(
            os.getenv("SIFT_TOP_COMPANIES", str(DEFAULT_TOP_COMPANIES))
        )
        if not date_format.strip():
            raise SiftConfigError(
                "Invalid SIFT_DATE_FORMAT value: expected a strptime pattern, got an empty string. "
                "Unset SIFT_DATE_FORMAT to use the default '%m/%d/%Y'."
            )
        return cls(
            rules_path=_parse_rules_path(rules_path_value),
            date_format=date_format,
            outlier_sigma=outlier_sigma,
            top_companies=top_companies,
        )


def _parse_rules_path(raw_value: str | None) -> Path | None:
    """Resolve the optional rules path value."""
    if raw_value is None or not raw_value.strip():
        return None
    return Path(raw_value).expanduser().resolve()


def _parse_outlier_sigma(raw_value: str) -> float:
    """Parse the outlier sigma environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive multiplier.

    Raises:
        SiftConfigError: If value is not a positive number.
    """
    try:
        sigma = float(raw_value)
    except ValueError as error:
        raise SiftConfigError(
            "Invalid SIFT_OUTLIER_SIGMA value: "
            f"expected number, got '{raw_value}'. "
            "Set SIFT_OUTLIER_SIGMA to a positive numeric value."
        ) from error
    if sigma <= 0:
        raise SiftConfigError(
            f"Invalid SIFT_OUTLIER_SIGMA value: expected a positive number, got {sigma}."
        )
    return sigma


def _parse_top_companies(raw_value: str) -> int:
    """Parse the top-companies environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed row limit.

    Raises:
        SiftConfigError: If value is not an integer of at least one.
    """
    try:
        limit = int(raw_value)
    except ValueError as error:
        raise SiftConfigError(
            "Invalid SIFT_TOP_COMPANIES value: "
            f"expected integer, got '{raw_value}'. "
            "Set SIFT_TOP_COMPANIES to a numeric value."
        ) from error
    if limit < 1:
        raise SiftConfigError(
            f"Invalid SIFT_TOP_COMPANIES value: expected at least 1, got {limit}."
        )
    return limit
