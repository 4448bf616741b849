"""Map flat data rows onto a header tree.

Leaves take values from the front of the row in depth-first, left-to-right
order; headers with children become nested dicts. Mapping is lenient:
- short rows leave the trailing leaves as None
- extra values land under unlabelled_0, unlabelled_1, ... at the top level
- a sibling name already used in the same dict gets _0, _1, ... appended
"""
from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterable, List, Optional, Sequence, Union
import logging

from ..extract.headers import HeaderCell

logger = logging.getLogger(__name__)

Value = Optional[str]
Record = Dict[str, Union[Value, "Record"]]

UNLABELLED_PREFIX = "unlabelled_"


def unique_key(name: str, record: Record) -> str:
    if name not in record:
        return name
    k = 0
    while f"{name}_{k}" in record:
        k += 1
    return f"{name}_{k}"


def _fill(cells: Sequence[HeaderCell], values: Deque[str], record: Record) -> None:
    for cell in cells:
        key = unique_key(cell.name, record)
        if cell.children:
            nested: Record = {}
            record[key] = nested
            _fill(cell.children, values, nested)
        else:
            record[key] = values.popleft() if values else None


def map_row(header_tree: Sequence[HeaderCell], row: Sequence[str]) -> Record:
    values: Deque[str] = deque(row)
    record: Record = {}
    _fill(header_tree, values, record)
    if values:
        logger.debug("Row has %d value(s) beyond the header columns", len(values))
    for i, v in enumerate(values):
        record[f"{UNLABELLED_PREFIX}{i}"] = v
    return record


def map_rows(header_tree: Sequence[HeaderCell], rows: Iterable[Sequence[str]]) -> List[Record]:
    return [map_row(header_tree, r) for r in rows]
