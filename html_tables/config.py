"""Centralized configuration for header key normalization.

Each parser instance owns one `ParserConfig`; nothing here is process-wide.
`load_config()` seeds the defaults from environment variables so batch runs
can be tuned without code changes, and keyword overrides always win.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Dict, Optional, Union

from .errors import ConfigError


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ParserConfig:
    # Applied to header text in this order: trim, lowercase, collapse, replace.
    trim_keys: bool = True
    lowercase_keys: bool = True
    collapse_whitespace: bool = True  # runs of 2+ whitespace chars -> one space
    # True -> "_", a string -> that string, False/"" -> leave whitespace alone
    replace_whitespace: Union[bool, str] = True

    def __post_init__(self) -> None:
        for name in ("trim_keys", "lowercase_keys", "collapse_whitespace"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be a bool, got {getattr(self, name)!r}")
        if not isinstance(self.replace_whitespace, (bool, str)):
            raise ConfigError(
                f"replace_whitespace must be a bool or str, got {self.replace_whitespace!r}"
            )

    @property
    def whitespace_replacement(self) -> Optional[str]:
        """Literal used for remaining whitespace, or None when the step is off."""
        if self.replace_whitespace is True:
            return "_"
        if not self.replace_whitespace:
            return None
        return self.replace_whitespace

    def with_options(self, **options) -> "ParserConfig":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigError(f"Unknown parser option(s): {', '.join(unknown)}")
        return replace(self, **options)


def _env_flag(name: str) -> Optional[bool]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f"{name}={raw!r} is not a valid flag (use 0/1)")


def _env_replacement(name: str) -> Optional[Union[bool, str]]:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    # Anything else is taken literally (e.g. "-" or "__")
    return raw


def load_config(**overrides) -> ParserConfig:
    env: Dict[str, Union[bool, str]] = {}
    for field_name, var in (
        ("trim_keys", "HTML_TABLES_TRIM_KEYS"),
        ("lowercase_keys", "HTML_TABLES_LOWERCASE_KEYS"),
        ("collapse_whitespace", "HTML_TABLES_COLLAPSE_WHITESPACE"),
    ):
        flag = _env_flag(var)
        if flag is not None:
            env[field_name] = flag
    replacement = _env_replacement("HTML_TABLES_REPLACE_WHITESPACE")
    if replacement is not None:
        env["replace_whitespace"] = replacement
    return ParserConfig(**env).with_options(**overrides)
