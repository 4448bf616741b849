"""Row and header-row extraction from a BeautifulSoup <table> element.

Rules
- Only the table's own rows count; rows of nested tables are skipped.
- Header rows: every row inside <thead>, or the first row when <thead> is
  missing or has no rows.
- Data rows: the rows outside <thead>/<tfoot>, whether wrapped in <tbody> or
  not (lxml does not add an implicit <tbody>). A first-row header is left out
  only when it has <th> cells of its own.
- Data cells are trimmed only; key normalization applies to headers alone.
"""
from __future__ import annotations

from typing import List, Optional
import re

from bs4.element import Tag

from ..config import ParserConfig
from ..keys import normalize_key
from .headers import HeaderSpec

_LEADING_INT = re.compile(r"\s*[+]?(\d+)")


def parse_span(value: Optional[str]) -> int:
    """Leading integer of a colspan attribute; 0 when absent or unreadable."""
    if value is None:
        return 0
    m = _LEADING_INT.match(str(value))
    if not m:
        return 0
    return int(m.group(1))


def _section(tr: Tag, table: Tag) -> Optional[str]:
    node = tr.parent
    while node is not None and node is not table:
        if node.name in ("thead", "tbody", "tfoot"):
            return node.name
        node = node.parent
    return None


def own_rows(table: Tag) -> List[Tag]:
    return [tr for tr in table.find_all("tr") if tr.find_parent("table") is table]


def _thead_rows(table: Tag, rows: List[Tag]) -> List[Tag]:
    return [tr for tr in rows if _section(tr, table) == "thead"]


def header_row_elements(table: Tag) -> List[Tag]:
    rows = own_rows(table)
    # an empty or missing <thead> falls back to the first row
    return _thead_rows(table, rows) or rows[:1]


def body_row_elements(table: Tag) -> List[Tag]:
    rows = own_rows(table)
    body = [tr for tr in rows if _section(tr, table) not in ("thead", "tfoot")]
    if not _thead_rows(table, rows) and rows and rows[0].find("th", recursive=False) is not None:
        # the first row supplied the header keys
        body = [tr for tr in body if tr is not rows[0]]
    return body


def extract_header_rows(table: Tag, config: ParserConfig) -> List[List[HeaderSpec]]:
    out: List[List[HeaderSpec]] = []
    for tr in header_row_elements(table):
        specs: List[HeaderSpec] = []
        for th in tr.find_all("th", recursive=False):
            specs.append((normalize_key(th.get_text(), config), parse_span(th.get("colspan"))))
        out.append(specs)
    return out


def extract_rows(table: Tag) -> List[List[str]]:
    rows: List[List[str]] = []
    for tr in body_row_elements(table):
        cells = tr.find_all(["td", "th"], recursive=False)
        rows.append([c.get_text().strip() for c in cells])
    return rows
