"""Cleaning orchestration for raw layoff datasets.

This module stages a copy of the raw dataset and runs the ordered
cleaning stages over it, recording row counts after every stage.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Callable

import pandas as pd

from core.cleaning_rules import resolve_cleaning_rules
from core.config import SiftConfig
from core.logging_config import get_logger
from core.types import CleaningOptions, CleaningResult, StageSummary
from ingest.input_reader import read_raw_layoffs
from ingest.schema import stage_raw_frame
from transforms.date_coercion import coerce_dates
from transforms.deduplication import remove_duplicate_records
from transforms.normalization import normalize_fields
from transforms.null_reconciliation import reconcile_nulls, validate_inference_keys
from transforms.pruning import prune_unusable_records

_LOGGER = get_logger(__name__)

CleaningStage = Callable[[pd.DataFrame], pd.DataFrame]


class CleaningPipelineRunner:
    """Runner owning the working set for one cleaning pass."""

    def __init__(self, options: CleaningOptions) -> None:
        validate_inference_keys(options.inference_keys)
        self._options = options

    def run(self, raw_frame: pd.DataFrame) -> CleaningResult:
        """Clean a raw dataset and return the terminal dataset."""
        working_set = stage_raw_frame(raw_frame)
        input_count = len(working_set)
        summaries: list[StageSummary] = []
        for stage_name, stage in self._stages():
            stage_input_rows = len(working_set)
            working_set = stage(working_set)
            summary = StageSummary(
                stage=stage_name,
                input_rows=stage_input_rows,
                output_rows=len(working_set),
            )
            summaries.append(summary)
            _LOGGER.info(
                "cleaning_stage_completed",
                stage=summary.stage,
                input_rows=summary.input_rows,
                output_rows=summary.output_rows,
            )
        _LOGGER.info(
            "cleaning_completed",
            input_count=input_count,
            output_count=len(working_set),
            industry_rule_count=len(self._options.rules.industry_rules),
        )
        return CleaningResult(dataset=working_set, stage_summaries=tuple(summaries))

    def _stages(self) -> tuple[tuple[str, CleaningStage], ...]:
        return (
            ("deduplicated", remove_duplicate_records),
            ("normalized", partial(normalize_fields, rules=self._options.rules)),
            ("date_coerced", partial(coerce_dates, date_format=self._options.date_format)),
            (
                "nulls_reconciled",
                partial(reconcile_nulls, inference_keys=self._options.inference_keys),
            ),
            ("pruned", prune_unusable_records),
        )


def clean_layoffs(
    raw_frame: pd.DataFrame,
    options: CleaningOptions | None = None,
) -> CleaningResult:
    """Run the cleaning pipeline over an in-memory raw dataset.

    Args:
        raw_frame: Raw dataset with the nine business columns.
        options: Cleaning options, defaults when omitted.

    Returns:
        Cleaned dataset and per-stage row counts.

    Raises:
        SiftSchemaError: If the dataset is structurally invalid.
        SiftTransformError: If options are invalid.
    """
    runner = CleaningPipelineRunner(options or build_cleaning_options())
    return runner.run(raw_frame)


def clean_layoff_file(
    source_path: str | Path,
    options: CleaningOptions | None = None,
) -> CleaningResult:
    """Read a raw CSV file and run the cleaning pipeline over it.

    Raises:
        SiftIngestError: If the file cannot be read.
        SiftSchemaError: If the file is structurally invalid.
    """
    raw_frame = read_raw_layoffs(source_path)
    return clean_layoffs(raw_frame, options)


def build_cleaning_options(
    config: SiftConfig | None = None,
    rules_path: str | Path | None = None,
) -> CleaningOptions:
    """Build cleaning options from runtime configuration.

    Args:
        config: Runtime configuration, read from the environment when omitted.
        rules_path: Optional rules file overriding ``config.rules_path``.

    Returns:
        Cleaning options with resolved rules.

    Raises:
        SiftConfigError: If environment values are invalid.
        SiftRulesError: If the rules file is invalid.
    """
    resolved_config = config or SiftConfig.from_env()
    rules = resolve_cleaning_rules(rules_path or resolved_config.rules_path)
    return CleaningOptions(rules=rules, date_format=resolved_config.date_format)
