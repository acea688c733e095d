"""Pydantic models and dataframe schema validators.

These are the contracts for everything a run writes to disk:
- the JSON report of a single search (`CliqueReport`)
- the CSV table of a variant comparison (`VARIANT_RUNS`)
"""

from __future__ import annotations

from bronkerbosch.models.schemas import (
    VARIANT_RUNS,
    CliqueReport,
    SearchStatsModel,
    TableSchema,
)
from bronkerbosch.models.validate import validate_frame

__all__ = [
    "TableSchema",
    "validate_frame",
    "VARIANT_RUNS",
    "CliqueReport",
    "SearchStatsModel",
]
