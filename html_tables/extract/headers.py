"""Header tree reconstruction from stacked header rows.

Header rows come in top-to-bottom, each a list of ``(name, span)`` pairs. Rows
are folded from the bottom up: a cell attaches to the first cell of the row
directly above that still has span left, and that parent's span shrinks by the
number of leaf columns the child already carries (at least 1). Cells that find
no parent stay where they are and become roots.

    [[("a", 2)], [("b", 0), ("c", 0)]]  ->  a[b, c]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Set, Tuple
import logging

logger = logging.getLogger(__name__)

HeaderSpec = Tuple[str, int]


@dataclass
class HeaderCell:
    name: str
    remaining_span: int = 0
    children: List["HeaderCell"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def leaf_count(self) -> int:
        if not self.children:
            return 1
        return sum(c.leaf_count() for c in self.children)


def build_header_tree(header_rows: Sequence[Sequence[HeaderSpec]]) -> List[HeaderCell]:
    """Return the ordered root cells for one table's header rows."""
    arena: List[HeaderCell] = []
    rows: List[List[int]] = []
    for specs in header_rows:
        idxs: List[int] = []
        for name, span in specs:
            arena.append(HeaderCell(name=name, remaining_span=max(int(span or 0), 0)))
            idxs.append(len(arena) - 1)
        rows.append(idxs)

    consumed: Set[int] = set()
    for i in range(len(rows) - 1, 0, -1):
        parents = rows[i - 1]
        for idx in rows[i]:
            header = arena[idx]
            for pidx in parents:
                parent = arena[pidx]
                if parent.remaining_span <= 0:
                    continue
                parent.remaining_span -= max(1, len(header.children))
                parent.children.append(header)
                consumed.add(idx)
                break

    roots = [arena[idx] for idxs in rows for idx in idxs if idx not in consumed]
    logger.debug(
        "Header tree: %d row(s), %d cell(s), %d root(s)", len(rows), len(arena), len(roots)
    )
    return roots
