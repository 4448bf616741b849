"""
HTML table parsing into nested records.

Layout
- config.py: per-parser key options (env-seeded via load_config)
- keys.py: header text -> key normalization
- extract/headers.py: header tree built from stacked, colspan-annotated rows
- extract/rows.py: header/body row selection and cell text
- transform/mapping.py: flat row -> nested record against the header tree
- transform/frames.py: records -> pandas DataFrame (CSV output)
- parser.py: HtmlTableParser, the public entry point
- cli.py: `html-tables FILE` command
"""
from .config import ParserConfig, load_config
from .errors import ConfigError, HtmlTablesError, TableNotFoundError
from .parser import HtmlTableParser, parse_table, parse_tables

__all__ = [
    "ConfigError",
    "HtmlTableParser",
    "HtmlTablesError",
    "ParserConfig",
    "TableNotFoundError",
    "load_config",
    "parse_table",
    "parse_tables",
]
