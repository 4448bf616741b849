"""Tests for the html-tables command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from html_tables.cli import main


@pytest.fixture
def html_file(tmp_path: Path, scores_html) -> Path:
    p = tmp_path / "page.html"
    p.write_text(scores_html, encoding="utf-8")
    return p


def test_all_tables_json(html_file: Path, capsys):
    assert main([str(html_file)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert len(data) == 2
    assert data[0][1] == {"name": "Bob", "score_card": {"math": "70", "art": None}}


def test_selector_json_with_options(html_file: Path, capsys):
    rc = main([str(html_file), "--selector", "#scores", "--no-lowercase-keys", "--replace-whitespace", "-"])
    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0] == {"Name": "Ann", "Score-Card": {"Math": "90", "Art": "80"}}


def test_csv_to_file(html_file: Path, tmp_path: Path):
    out = tmp_path / "out" / "scores.csv"
    rc = main([str(html_file), "--selector", "#scores", "--format", "csv", "--out", str(out)])
    assert rc == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "name,score_card.math,score_card.art"
    assert lines[1] == "Ann,90,80"
    assert lines[2] == "Bob,70,"


def test_csv_all_tables(html_file: Path, capsys):
    assert main([str(html_file), "--format", "csv"]) == 0
    header = capsys.readouterr().out.splitlines()[0]
    assert header.startswith("table,name,")


def test_missing_selector_exit_code(html_file: Path):
    assert main([str(html_file), "--selector", "#nope"]) == 1


def test_missing_file_exit_code(tmp_path: Path):
    assert main([str(tmp_path / "absent.html")]) == 1


def test_conflicting_whitespace_flags(html_file: Path):
    with pytest.raises(SystemExit) as exc:
        main([str(html_file), "--replace-whitespace", "-", "--no-replace-whitespace"])
    assert exc.value.code == 2
