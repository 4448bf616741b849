"""Header key normalization.

Steps run in a fixed order, each toggled by `ParserConfig`:
  trim -> lowercase -> collapse 2+ whitespace -> replace remaining whitespace

e.g. "  Total   Amount " -> "total_amount" with the defaults.
"""
from __future__ import annotations

import re

from .config import ParserConfig

_MULTI_WS = re.compile(r"\s\s+")
_WS = re.compile(r"\s")


def normalize_key(raw: str, config: ParserConfig) -> str:
    s = raw
    if config.trim_keys:
        s = s.strip()
    if config.lowercase_keys:
        s = s.lower()
    if config.collapse_whitespace:
        s = _MULTI_WS.sub(" ", s)
    replacement = config.whitespace_replacement
    if replacement is not None:
        # callable repl so backslashes in the replacement stay literal
        s = _WS.sub(lambda _m: replacement, s)
    return s
