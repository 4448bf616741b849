"""
Table structure extraction: header tree building and row reading.
"""
from .headers import HeaderCell, build_header_tree
from .rows import extract_header_rows, extract_rows, parse_span

__all__ = [
    "HeaderCell",
    "build_header_tree",
    "extract_header_rows",
    "extract_rows",
    "parse_span",
]
