"""Sift exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class SiftError(Exception):
    """Base exception for all Sift failures."""


class SiftConfigError(SiftError):
    """Raised for invalid runtime configuration."""


class SiftRulesError(SiftError):
    """Raised for invalid cleaning-rules files."""


class SiftIngestError(SiftError):
    """Raised for unreadable raw sources."""


class SiftSchemaError(SiftError):
    """Raised when a dataset does not have the expected column structure."""


class SiftTransformError(SiftError):
    """Raised for invalid cleaning stage arguments."""


class SiftReportError(SiftError):
    """Raised for invalid reporting query arguments."""


class SiftStoreError(SiftError):
    """Raised for dataset and report export failures."""
