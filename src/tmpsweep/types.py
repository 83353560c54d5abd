"""Type definitions for tmpsweep."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TypedDict


class ResourceKind(enum.Enum):
    """Kind of filesystem entity a tracked resource refers to."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(eq=False)
class TrackedResource:
    """A temporary file or directory owned by a garbage collector.

    Identity matters here: two resources are only the same resource if they are
    the same object, even if their attributes happen to match.
    """

    path: str
    kind: ResourceKind
    mode: int
    keep: bool = False
    force_clean: bool = False
    disposed: bool = False

    @property
    def is_directory(self) -> bool:
        return self.kind is ResourceKind.DIRECTORY


class TmpOptions(TypedDict, total=False):
    """Options accepted by every naming and creation call."""

    dir: str | None  # Relative path appended to the root tmp dir
    name: str | None  # Fixed name, no prefix, postfix, pid or random part
    prefix: str | None  # Default: "tmp"
    postfix: str | None
    length: int  # Length of the random part, clamped to [6, 24], default 12
    tries: int  # Maximum number of candidates, clamped to [1, 10], default 3
    mode: int | None  # Default: 0o600 for files, 0o700 for directories
    keep: bool  # Do not remove on dispose() (exit sweep may still remove it)
    force_clean: bool  # Remove non-empty directories recursively
    tmpdir: str | None  # Override for the OS tmp dir
    template: str | None  # Deprecated: use prefix, postfix and length
    unsafe_cleanup: bool  # Deprecated: alias for force_clean
