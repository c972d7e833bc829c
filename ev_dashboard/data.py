"""
Record loading and filtering.

Records are kept as a DataFrame with the columns ``region``, ``year``,
``parameter`` and ``value`` in file order. ``year`` stays text, ``value`` is
a float where anything missing or non-numeric has been coerced to 0.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ev_dashboard import config
from ev_dashboard.errors import DataLoadError

logger = logging.getLogger(__name__)

TEXT_COLUMNS = ["region", "year", "parameter"]


def load_records(path: str | Path) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise DataLoadError(f"Data file not found: {path}")

    try:
        # Only empty fields are missing; text such as "NA" or "None" is kept as written
        df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[""])
    except pd.errors.EmptyDataError as exc:
        raise DataLoadError(f"Data file is empty: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError) as exc:
        raise DataLoadError(f"Could not parse {path}: {exc}") from exc

    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in config.REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise DataLoadError(f"{path} is missing required columns: {', '.join(missing)}")

    records = normalize_records(df)
    logger.info(f"Loaded {len(records)} records from {path}")
    return records


def normalize_records(df: pd.DataFrame) -> pd.DataFrame:
    """Keep the record columns, strip text and coerce ``value`` with a 0 default."""
    out = df[config.REQUIRED_COLUMNS].copy()
    for col in TEXT_COLUMNS:
        out[col] = out[col].fillna("").astype(str).str.strip()
    out["value"] = pd.to_numeric(out["value"], errors="coerce").fillna(0.0).astype(float)
    return out.reset_index(drop=True)


def filter_by_region(records: pd.DataFrame, region: str | None) -> pd.DataFrame:
    if region is None:
        return records
    return records[records["region"] == region]


def filter_by_year(records: pd.DataFrame, year) -> pd.DataFrame:
    if year is None:
        return records
    return records[records["year"] == str(year)]


def filter_by_parameter(records: pd.DataFrame, parameter: str) -> pd.DataFrame:
    return records[records["parameter"] == parameter]


def distinct_regions(records: pd.DataFrame) -> list[str]:
    return sorted(records["region"].unique())


def _year_sort_key(year: str):
    try:
        return (0, float(year), year)
    except ValueError:
        return (1, 0.0, year)


def distinct_years(records: pd.DataFrame) -> list[str]:
    """Unique years, numeric ones ascending first, then anything else."""
    return sorted(records["year"].unique(), key=_year_sort_key)


def first_value(group: pd.DataFrame, parameter: str) -> float:
    """Value of the first row for ``parameter`` in ``group``, 0 when absent."""
    matches = group.loc[group["parameter"] == parameter, "value"]
    if matches.empty:
        return 0.0
    return float(matches.iloc[0])


def records_to_csv(records: pd.DataFrame) -> bytes:
    return records.to_csv(index=False).encode("utf-8")
