"""Schema definitions for result tables and reports.

This module contains only:
- `TableSchema` (column-level contract for a pandas DataFrame)
- `VARIANT_RUNS` (one row per graph x search configuration)
- `SearchStatsModel` / `CliqueReport` (JSON report of a single run)
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field


class TableSchema(BaseModel):
    """A simple schema for a pandas DataFrame."""

    name: str
    required_columns: tuple[str, ...] = Field(default_factory=tuple)
    optional_columns: tuple[str, ...] = Field(default_factory=tuple)
    # pandas dtype strings, e.g. "string", "Int64", "boolean"
    dtypes: Mapping[str, str] = Field(default_factory=dict)
    non_null: tuple[str, ...] = Field(default_factory=tuple)
    # columns that together identify a row
    key: tuple[str, ...] = Field(default_factory=tuple)

    def allowed_columns(self) -> set[str]:
        return set(self.required_columns) | set(self.optional_columns)


VARIANT_RUNS = TableSchema(
    name="variant_runs",
    required_columns=(
        "graph",
        "degeneracy",
        "pivot",
        "n_vertices",
        "n_edges",
        "n_maximal",
        "n_maximum",
        "maximum_size",
        "calls",
        "pruned",
        "fingerprint",
        "agrees",
    ),
    optional_columns=("verified",),
    dtypes={
        "graph": "string",
        "degeneracy": "boolean",
        "pivot": "boolean",
        "n_vertices": "Int64",
        "n_edges": "Int64",
        "n_maximal": "Int64",
        "n_maximum": "Int64",
        "maximum_size": "Int64",
        "calls": "Int64",
        "pruned": "Int64",
        "fingerprint": "string",
        "agrees": "boolean",
        "verified": "boolean",
    },
    non_null=("graph", "degeneracy", "pivot", "fingerprint"),
    key=("graph", "degeneracy", "pivot"),
)


class SearchStatsModel(BaseModel):
    calls: int = Field(ge=0, description="Search frames entered.")
    leaves: int = Field(ge=0, description="Maximal cliques recorded.")
    pruned: int = Field(ge=0, description="Frames cut by the termination test.")


class CliqueReport(BaseModel):
    """Result of one search run, in a JSON-friendly shape (vertex names as strings)."""

    source: str = Field(default="", description="Where the graph came from (file path or label).")
    use_degeneracy_ordering: bool
    use_pivot: bool
    number_of_vertices: int = Field(ge=0)
    number_of_edges: int = Field(ge=0)
    maximal_cliques: list[list[str]] = Field(default_factory=list)
    maximum_cliques: list[list[str]] = Field(default_factory=list)
    maximum_size: int = Field(default=0, ge=0)
    stats: SearchStatsModel
