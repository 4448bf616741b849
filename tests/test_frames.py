"""Tests for flattening records into DataFrames."""

from __future__ import annotations

import pandas as pd

from html_tables.transform.frames import records_to_dataframe, tables_to_dataframe


RECORDS = [
    {"name": "Ann", "score_card": {"math": "90", "art": "80"}},
    {"name": "Bob", "score_card": {"math": "70", "art": None}},
]


def test_nested_paths_become_columns():
    df = records_to_dataframe(RECORDS)
    assert list(df.columns) == ["name", "score_card.math", "score_card.art"]
    assert df.loc[0, "score_card.art"] == "80"
    assert pd.isna(df.loc[1, "score_card.art"])


def test_custom_separator():
    df = records_to_dataframe(RECORDS, sep="/")
    assert "score_card/math" in df.columns


def test_empty_records():
    assert records_to_dataframe([]).empty


def test_tables_concat_with_index():
    df = tables_to_dataframe([RECORDS, [], [{"city": "Oslo"}]])
    assert list(df["table"]) == [0, 0, 2]
    assert list(df.columns) == ["table", "name", "score_card.math", "score_card.art", "city"]
    assert df.loc[2, "city"] == "Oslo"


def test_no_tables():
    df = tables_to_dataframe([])
    assert list(df.columns) == ["table"]
    assert df.empty


def test_group_before_plain_column_keeps_order():
    df = records_to_dataframe([{"a": {"b": "1"}, "c": "2"}])
    assert list(df.columns) == ["a.b", "c"]
