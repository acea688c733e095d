"""Validation utilities for result-table contracts."""

from __future__ import annotations

import pandas as pd

from bronkerbosch.models.schemas import TableSchema


def validate_frame(
    df: pd.DataFrame,
    schema: TableSchema,
    *,
    coerce_dtypes: bool = True,
    allow_extra_columns: bool = False,
) -> pd.DataFrame:
    """Check a dataframe against `schema` and return a coerced copy.

    Raises ValueError for missing/unexpected columns, nulls in non-null columns
    and duplicated keys; TypeError when a column cannot take its declared dtype.
    """
    missing = [c for c in schema.required_columns if c not in df.columns]
    if missing:
        raise ValueError(f"{schema.name}: missing required columns: {missing}")

    if not allow_extra_columns:
        allowed = schema.allowed_columns()
        extra = [c for c in df.columns if c not in allowed]
        if extra:
            raise ValueError(f"{schema.name}: unexpected columns: {extra}")

    out = df.copy()
    if coerce_dtypes:
        for col in (c for c in out.columns if c in schema.dtypes):
            dtype = schema.dtypes[col]
            try:
                out[col] = out[col].astype(dtype)
            except (TypeError, ValueError) as exc:
                raise TypeError(
                    f"{schema.name}: column '{col}' does not fit dtype '{dtype}': {exc}"
                ) from exc

    nulls = {c: int(out[c].isna().sum()) for c in schema.non_null if c in out.columns}
    nulls = {c: n for c, n in nulls.items() if n}
    if nulls:
        raise ValueError(f"{schema.name}: non-null columns contain NA values: {nulls}")

    if schema.key and not out.empty:
        dup = out.duplicated(subset=list(schema.key), keep=False)
        if dup.any():
            sample = out.loc[dup, list(schema.key)].head(5).to_dict(orient="records")
            raise ValueError(f"{schema.name}: duplicate rows for key {schema.key} (e.g. {sample})")

    return out
