"""Blocking calling convention."""

from __future__ import annotations

import warnings
from typing import Any

from typing_extensions import Self, Unpack

from ..core import GarbageCollector, Provisioner
from ..types import TmpOptions, TrackedResource


class SyncResult:
    """Handle to a temporary resource created through :class:`SyncInterface`.

    Can be used as a context manager, disposing of the resource on exit.
    """

    def __init__(self, resource: TrackedResource, collector: GarbageCollector):
        self._resource = resource
        self._collector = collector

    @property
    def name(self) -> str:
        return self._resource.path

    @property
    def disposed(self) -> bool:
        return self._resource.disposed

    def dispose(self) -> None:
        """Dispose of the resource. Calling this more than once has no effect."""
        self._collector.dispose_one(self._resource)

    def remove_callback(self) -> None:
        """Deprecated alias for :meth:`dispose`."""
        warnings.warn(
            "remove_callback() is deprecated, use dispose() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        self.dispose()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()

    def __fspath__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, disposed={self.disposed})"


class SyncInterface:
    """Create temporary files and directories, blocking until done."""

    def __init__(self, collector: GarbageCollector | None = None):
        self._provisioner = Provisioner(collector)

    @property
    def collector(self) -> GarbageCollector:
        return self._provisioner.collector

    @property
    def tmpdir(self) -> str:
        return self._provisioner.tmpdir

    def force_clean(self) -> None:
        """Remove all remaining resources on exit, including those configured to be kept."""
        self._provisioner.force_clean()

    def name(self, **options: Unpack[TmpOptions]) -> str:
        return self._provisioner.name(options)

    def file(self, **options: Unpack[TmpOptions]) -> SyncResult:
        return SyncResult(self._provisioner.file(options), self.collector)

    def dir(self, **options: Unpack[TmpOptions]) -> SyncResult:  # noqa: A003
        return SyncResult(self._provisioner.dir(options), self.collector)
