"""Project configuration loader for tabflags.

Reads ``tabflags.toml`` from the nearest enclosing directory and exposes
its settings as simple attributes.  A missing file is not an error: every
setting has a default, since completion must keep working anywhere.

Example ``tabflags.toml``::

    [completion]
    columns = 100
    max_lines = 98
    program = "server"
    registry = "build/flags.json"

    [logging]
    level = "DEBUG"
    file = "tabflags.log"

Usage::

    from tabflags.config import load_config
    cfg = load_config()
    cfg.columns        # int
    cfg.registry       # Path | None
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_NAME = "tabflags.toml"


@dataclass
class CompletionConfig:
    """Parsed tabflags configuration with resolved paths."""

    # Directory holding tabflags.toml (None when running on defaults)
    root: Path | None = None

    # --- [completion] ---
    columns: int = 80
    max_lines: int = 98
    program: str = ""
    registry: Path | None = None

    # --- [logging] ---
    log_level: str = "WARNING"
    log_file: Path | None = None


def _resolve(root: Path, rel: str | None) -> Path | None:
    """Resolve a path relative to the config root."""
    if rel is None:
        return None
    p = Path(rel)
    if p.is_absolute():
        return p
    return root / p


def find_root(start: Path | None = None) -> Path | None:
    """Walk up from *start* (or cwd) to the directory holding tabflags.toml."""
    candidate = (start or Path.cwd()).resolve()
    while True:
        if (candidate / CONFIG_NAME).exists():
            return candidate
        if candidate == candidate.parent:
            return None
        candidate = candidate.parent


def _table(raw: dict, name: str) -> dict:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] must be a table, got {section!r}")
    return section


def _positive_int(section: dict, key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"[completion] {key} must be a positive integer, got {value!r}")
    return value


def _string(section: dict, table: str, key: str, default: str | None) -> str | None:
    value = section.get(key, default)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"[{table}] {key} must be a string, got {value!r}")
    return value


def load_config(root: Path | None = None) -> CompletionConfig:
    """Load tabflags.toml, or return defaults if there is none.

    Args:
        root: Directory to start searching from.  Defaults to the cwd.

    Raises:
        ValueError: if the file exists but holds an invalid value.
    """
    found = find_root(root)
    if found is None:
        return CompletionConfig()

    with open(found / CONFIG_NAME, "rb") as f:
        raw = tomllib.load(f)

    completion = _table(raw, "completion")
    logging_section = _table(raw, "logging")

    return CompletionConfig(
        root=found,
        columns=_positive_int(completion, "columns", 80),
        max_lines=_positive_int(completion, "max_lines", 98),
        program=_string(completion, "completion", "program", ""),
        registry=_resolve(found, _string(completion, "completion", "registry", None)),
        log_level=_string(logging_section, "logging", "level", "WARNING").upper(),
        log_file=_resolve(found, _string(logging_section, "logging", "file", None)),
    )
