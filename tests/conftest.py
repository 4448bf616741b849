from __future__ import annotations

import pytest

ENV_VARS = (
    "HTML_TABLES_TRIM_KEYS",
    "HTML_TABLES_LOWERCASE_KEYS",
    "HTML_TABLES_COLLAPSE_WHITESPACE",
    "HTML_TABLES_REPLACE_WHITESPACE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the caller's environment from leaking into config defaults."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


SCORES_HTML = """
<html><body>
<h2>Scores</h2>
<table id="scores">
  <thead>
    <tr><th rowspan="2">Name</th><th colspan="2">Score  Card</th></tr>
    <tr><th>Math</th><th>Art</th></tr>
  </thead>
  <tbody>
    <tr><td> Ann </td><td>90</td><td>80</td></tr>
    <tr><td>Bob</td><td>70</td></tr>
  </tbody>
  <tfoot>
    <tr><td>Total</td><td>160</td><td>80</td></tr>
  </tfoot>
</table>
<table class="plain">
  <tr><th>City</th><th>Pop</th></tr>
  <tr><td>Oslo</td><td>700</td><td>extra</td></tr>
</table>
</body></html>
"""


@pytest.fixture
def scores_html() -> str:
    return SCORES_HTML
