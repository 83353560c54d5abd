"""Callback based calling convention.

Every call is offloaded onto a worker thread and reports back through a
callback with the signature ``callback(err, result)``. The returned
:class:`concurrent.futures.Future` completes once the callback has run.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, TypeVar

from typing_extensions import Unpack

from ..core import GarbageCollector, Provisioner
from ..types import TmpOptions, TrackedResource

logger = logging.getLogger(__name__)

T = TypeVar("T")

NamingCallback = Callable[[Exception | None, str | None], Any]
CreationCallback = Callable[[Exception | None, "CallbackResult | None"], Any]
ChainedCallback = Callable[[Exception | None], Any]

_executor: ThreadPoolExecutor | None = None
_executor_lock = threading.Lock()


def get_default_executor() -> ThreadPoolExecutor:
    """Return the executor shared by all callback interfaces."""
    global _executor
    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(thread_name_prefix="tmpsweep")
        return _executor


def _invoke(callback: Callable[..., Any], *args: Any) -> None:
    try:
        callback(*args)
    except Exception:
        logger.warning("Callback %r raised", callback, exc_info=True)
        raise


def _run_with_callback(
    executor: ThreadPoolExecutor,
    operation: Callable[[], T],
    callback: Callable[[Exception | None, T | None], Any],
) -> Future[None]:
    def task() -> None:
        try:
            result = operation()
        except Exception as e:  # noqa: BLE001
            logger.debug("Reporting error to callback: %s", e)
            _invoke(callback, e, None)
        else:
            _invoke(callback, None, result)

    return executor.submit(task)


class CallbackResult:
    """Handle to a temporary resource created through :class:`CallbackInterface`."""

    def __init__(
        self,
        resource: TrackedResource,
        collector: GarbageCollector,
        executor: ThreadPoolExecutor,
    ):
        self._resource = resource
        self._collector = collector
        self._executor = executor

    @property
    def name(self) -> str:
        return self._resource.path

    @property
    def disposed(self) -> bool:
        return self._resource.disposed

    def dispose(self, next: ChainedCallback | None = None) -> Future[None]:  # noqa: A002
        """Dispose of the resource on a worker thread, then call ``next(err)``."""

        def task() -> None:
            try:
                self._collector.dispose_one(self._resource)
            except Exception as e:  # noqa: BLE001
                if next is None:
                    raise
                _invoke(next, e)
            else:
                if next is not None:
                    _invoke(next, None)

        return self._executor.submit(task)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, disposed={self.disposed})"


class CallbackInterface:
    """Create temporary files and directories on a worker thread, reporting through callbacks."""

    def __init__(
        self,
        collector: GarbageCollector | None = None,
        executor: ThreadPoolExecutor | None = None,
    ):
        self._provisioner = Provisioner(collector)
        self._executor = executor

    @property
    def collector(self) -> GarbageCollector:
        return self._provisioner.collector

    @property
    def executor(self) -> ThreadPoolExecutor:
        return self._executor if self._executor is not None else get_default_executor()

    @property
    def tmpdir(self) -> str:
        return self._provisioner.tmpdir

    def force_clean(self) -> None:
        """Remove all remaining resources on exit, including those configured to be kept."""
        self._provisioner.force_clean()

    def name(self, callback: NamingCallback, **options: Unpack[TmpOptions]) -> Future[None]:
        return _run_with_callback(self.executor, lambda: self._provisioner.name(options), callback)

    def file(self, callback: CreationCallback, **options: Unpack[TmpOptions]) -> Future[None]:
        return _run_with_callback(
            self.executor, lambda: self._wrap(self._provisioner.file(options)), callback
        )

    def dir(self, callback: CreationCallback, **options: Unpack[TmpOptions]) -> Future[None]:  # noqa: A003
        return _run_with_callback(
            self.executor, lambda: self._wrap(self._provisioner.dir(options)), callback
        )

    def _wrap(self, resource: TrackedResource) -> CallbackResult:
        return CallbackResult(resource, self.collector, self.executor)
