"""HTML table -> list of records.

Main entry points:
- HtmlTableParser(html, **options).parse_all_tables() -> List[List[Record]]
- HtmlTableParser(html, **options).parse_table(selector) -> List[Record]
- parse_tables(html) / parse_table(html, selector) one-shot helpers

Options are the `ParserConfig` fields (trim_keys, lowercase_keys,
collapse_whitespace, replace_whitespace); they shape header keys only.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union
import logging

from bs4 import BeautifulSoup
from bs4.element import Tag
from soupsieve import SelectorSyntaxError

from .config import ParserConfig, load_config
from .errors import TableNotFoundError
from .extract.headers import HeaderCell, build_header_tree
from .extract.rows import extract_header_rows, extract_rows
from .transform.mapping import Record, map_rows

logger = logging.getLogger(__name__)

TableTarget = Union[str, Tag]


class HtmlTableParser:
    def __init__(
        self,
        html: Union[str, bytes],
        config: Optional[ParserConfig] = None,
        **options,
    ) -> None:
        base = config if config is not None else load_config()
        self.config = base.with_options(**options) if options else base
        self.soup = BeautifulSoup(html, "lxml")

    @classmethod
    def from_file(
        cls, path: str | Path, config: Optional[ParserConfig] = None, **options
    ) -> "HtmlTableParser":
        p = Path(path).expanduser()
        html = p.read_text(encoding="utf-8", errors="ignore")
        return cls(html, config=config, **options)

    # ---------------------------
    # Per-table pipeline
    # ---------------------------
    def header_tree(self, table: Tag) -> List[HeaderCell]:
        return build_header_tree(extract_header_rows(table, self.config))

    def parse_table_element(self, table: Tag) -> List[Record]:
        tree = self.header_tree(table)
        rows = extract_rows(table)
        logger.debug(
            "Table: %d leaf column(s), %d data row(s)",
            sum(h.leaf_count() for h in tree),
            len(rows),
        )
        return map_rows(tree, rows)

    def _resolve(self, target: TableTarget) -> Tag:
        if isinstance(target, Tag):
            el: Optional[Tag] = target
            label = f"<{target.name}>"
        else:
            try:
                el = self.soup.select_one(target)
            except SelectorSyntaxError as e:
                raise TableNotFoundError(target) from e
            label = target
        if el is None:
            raise TableNotFoundError(label)
        if el.name != "table":
            el = el.find("table")
            if el is None:
                raise TableNotFoundError(label)
        return el

    # ---------------------------
    # Public API
    # ---------------------------
    def parse_table(self, target: TableTarget) -> List[Record]:
        """Parse one table given a CSS selector or an element handle.

        A non-table match resolves to the first <table> inside it. Raises
        TableNotFoundError when nothing resolves.
        """
        return self.parse_table_element(self._resolve(target))

    def parse_all_tables(self) -> List[List[Record]]:
        """Parse every <table> in document order (nested tables included)."""
        tables = self.soup.find_all("table")
        logger.debug("Found %d table(s)", len(tables))
        return [self.parse_table_element(t) for t in tables]


def parse_tables(html: Union[str, bytes], **options) -> List[List[Record]]:
    return HtmlTableParser(html, **options).parse_all_tables()


def parse_table(html: Union[str, bytes], selector: TableTarget = "table", **options) -> List[Record]:
    return HtmlTableParser(html, **options).parse_table(selector)
