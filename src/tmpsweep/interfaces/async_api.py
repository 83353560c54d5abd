"""Asyncio calling convention.

The blocking core runs on the default executor of the running event loop via
:func:`asyncio.to_thread`, so large recursive deletes do not block the loop.
"""

from __future__ import annotations

import asyncio
from typing import Any

from typing_extensions import Self, Unpack

from ..core import GarbageCollector, Provisioner
from ..types import TmpOptions, TrackedResource


class AsyncResult:
    """Handle to a temporary resource created through :class:`AsyncInterface`.

    Can be used as an async context manager, disposing of the resource on exit.
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

    async def dispose(self) -> None:
        """Dispose of the resource. Calling this more than once has no effect."""
        await asyncio.to_thread(self._collector.dispose_one, self._resource)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.dispose()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, disposed={self.disposed})"


class AsyncInterface:
    """Create temporary files and directories from coroutines."""

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

    async def name(self, **options: Unpack[TmpOptions]) -> str:
        return await asyncio.to_thread(self._provisioner.name, options)

    async def file(self, **options: Unpack[TmpOptions]) -> AsyncResult:
        resource = await asyncio.to_thread(self._provisioner.file, options)
        return AsyncResult(resource, self.collector)

    async def dir(self, **options: Unpack[TmpOptions]) -> AsyncResult:  # noqa: A003
        resource = await asyncio.to_thread(self._provisioner.dir, options)
        return AsyncResult(resource, self.collector)
