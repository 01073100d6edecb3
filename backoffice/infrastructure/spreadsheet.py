"""Helpers for turning spreadsheet rows into plain records."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import pandas as pd

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "active", "aktif"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "inactive", "nonaktif"}


def convert_excel_to_records(path: str | Path, *, sheet_name: int | str = 0) -> list[dict[str, Any]]:
    """Read the first sheet of ``path`` into a list of row dictionaries.

    Headers are trimmed and lowercased, blank cells become ``None`` and
    fully blank rows are dropped.
    """

    dataframe = pd.read_excel(path, sheet_name=sheet_name, dtype=object, engine="openpyxl")
    dataframe.columns = [str(column).strip().lower() for column in dataframe.columns]
    dataframe = dataframe.map(_normalize_cell_value)
    dataframe = dataframe.dropna(how="all").reset_index(drop=True)
    records = dataframe.to_dict(orient="records")
    return [
        {key: _normalize_cell_value(value) for key, value in record.items()}
        for record in records
    ]


def transform_records(records: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Coerce well-known columns to their Python types.

    ``code`` and ``name`` become strings, ``active`` a boolean (missing
    values count as active).
    """

    transformed: list[dict[str, Any]] = []
    for record in records:
        item = dict(record)
        for key in ("code", "name"):
            if item.get(key) is not None:
                item[key] = str(item[key]).strip()
        item["active"] = coerce_bool(item.get("active"), default=True)
        transformed.append(item)
    return transformed


def coerce_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    candidate = str(value).strip().lower()
    if candidate in _TRUE_VALUES:
        return True
    if candidate in _FALSE_VALUES:
        return False
    msg = f"Cannot interpret {value!r} as a boolean"
    raise ValueError(msg)


def _normalize_cell_value(value: Any) -> Any:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    if value is pd.NA or value is pd.NaT:
        return None
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


__all__ = ["coerce_bool", "convert_excel_to_records", "transform_records"]
