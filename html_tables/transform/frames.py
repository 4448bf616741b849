"""Flatten parsed records into pandas DataFrames (for CSV output).

Nested header paths are joined with `sep`, e.g. {"a": {"b": "1"}} -> column "a.b".
Columns keep the left-to-right header order of the table.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pandas as pd

from .mapping import Record


def flatten_record(record: Record, sep: str = ".", prefix: str = "") -> Dict[str, Optional[str]]:
    flat: Dict[str, Optional[str]] = {}
    for key, value in record.items():
        path = f"{prefix}{sep}{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(flatten_record(value, sep=sep, prefix=path))
        else:
            flat[path] = value
    return flat


def records_to_dataframe(records: Sequence[Record], sep: str = ".") -> pd.DataFrame:
    if not records:
        return pd.DataFrame()
    return pd.DataFrame([flatten_record(r, sep=sep) for r in records])


def tables_to_dataframe(tables: Sequence[Sequence[Record]], sep: str = ".") -> pd.DataFrame:
    """Concatenate several tables; a leading `table` column holds each table's index."""
    frames: List[pd.DataFrame] = []
    for idx, records in enumerate(tables):
        df = records_to_dataframe(records, sep=sep)
        if df.empty:
            continue
        df.insert(0, "table", idx)
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["table"])
    # Outer join of columns, rows kept in table order
    return pd.concat(frames, ignore_index=True, sort=False)
