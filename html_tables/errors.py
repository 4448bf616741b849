from __future__ import annotations


class HtmlTablesError(Exception):
    """Base class for errors raised by html_tables."""


class TableNotFoundError(HtmlTablesError, LookupError):
    """A selector or element handle did not resolve to a <table>."""

    def __init__(self, target: str) -> None:
        super().__init__(f"No table found for {target!r}")
        self.target = target


class ConfigError(HtmlTablesError, ValueError):
    """Invalid parser option."""
