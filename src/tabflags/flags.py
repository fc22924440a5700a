"""Flag descriptor primitives.

FlagDescriptor: read-only metadata for one registered command-line flag.
Snapshot:       an immutable, ordered view of every known flag.

Field names mirror the registry's own flag-info record so that snapshots
can be dumped from a running program and loaded back without translation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class FlagDescriptor:
    """Metadata for one registered flag."""

    name: str
    type: str = ""
    default_value: str = ""
    current_value: str = ""
    description: str = ""
    filename: str = ""

    @property
    def is_default(self) -> bool:
        """True when the flag still holds its declared default."""
        return self.current_value == self.default_value

    @property
    def is_string(self) -> bool:
        return self.type == "string"


Snapshot = tuple[FlagDescriptor, ...]


def take_snapshot(flags: Iterable[FlagDescriptor]) -> Snapshot:
    """Capture *flags* once as an immutable, ordered snapshot."""
    return tuple(flags)
