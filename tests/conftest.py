"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SIFT_ENV_VARS = (
    "SIFT_RULES_PATH",
    "SIFT_DATE_FORMAT",
    "SIFT_OUTLIER_SIGMA",
    "SIFT_TOP_COMPANIES",
)


def pytest_sessionstart() -> None:
    """Add src and project root to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    for import_root in (project_root / "src", project_root):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))


@pytest.fixture(autouse=True)
def _isolate_sift_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer SIFT_* variables out of test runs."""
    for name in _SIFT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
