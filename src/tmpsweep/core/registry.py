"""The garbage collector keeping track of all live temporary resources.

A :class:`GarbageCollector` owns every resource from the moment it was created
until it has been disposed of. On normal interpreter exit, the remaining
resources are swept in reverse registration order so that children created
inside a temporary directory go before the directory itself.
"""

from __future__ import annotations

import atexit
import itertools
import logging
import os
import threading

from ..exceptions import DuplicateResourceError, NonEmptyDirectoryError
from ..logging_utils import log_section_end, log_section_separator
from ..types import TrackedResource
from .disposal import dispose_resource

logger = logging.getLogger(__name__)


def canonical_path(path: str) -> str:
    """Return the key a path is tracked under."""
    return os.path.normcase(os.path.normpath(os.path.abspath(path)))


class GarbageCollector:
    """Process-wide registry of live temporary resources.

    The lock guards the mapping and the force clean flag only; it is never held
    while the filesystem is being modified.
    """

    def __init__(self) -> None:
        self._resources: dict[str, TrackedResource] = {}
        # Registration sequence, kept while a claimed resource is being disposed
        self._order: dict[str, int] = {}
        self._sequence = itertools.count()
        self._lock = threading.Lock()
        self._force_clean = False
        self._exit_hook_installed = False

    def __len__(self) -> int:
        with self._lock:
            return len(self._resources)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        with self._lock:
            return canonical_path(path) in self._resources

    @property
    def force_clean(self) -> bool:
        """Whether the exit sweep ignores the keep flag of individual resources."""
        with self._lock:
            return self._force_clean

    @force_clean.setter
    def force_clean(self, value: bool) -> None:
        self.set_force_clean(value)

    def set_force_clean(self, value: bool = True) -> None:
        with self._lock:
            self._force_clean = bool(value)
        logger.debug("Global force clean set to %s", bool(value))

    def tracked_paths(self) -> list[str]:
        """Return the paths of all tracked resources in registration order."""
        with self._lock:
            return [resource.path for resource in self._resources.values()]

    def register(self, resource: TrackedResource) -> TrackedResource:
        """
        Start tracking ``resource``.

        Raises:
            DuplicateResourceError: If another resource is already tracked under the same path.
        """
        key = canonical_path(resource.path)
        with self._lock:
            if key in self._resources:
                raise DuplicateResourceError(resource.path)
            self._resources[key] = resource
            self._order[key] = next(self._sequence)
        logger.debug("Registered %s %s", resource.kind.value, resource.path)
        return resource

    def unregister(self, path: str) -> TrackedResource | None:
        """Stop tracking the resource at ``path`` without touching the filesystem."""
        key = canonical_path(path)
        with self._lock:
            self._order.pop(key, None)
            return self._resources.pop(key, None)

    def _claim(self, resource: TrackedResource | str) -> TrackedResource | None:
        path = resource if isinstance(resource, str) else resource.path
        key = canonical_path(path)
        with self._lock:
            current = self._resources.get(key)
            if current is None or (not isinstance(resource, str) and current is not resource):
                return None
            del self._resources[key]
            return current

    def dispose_one(self, resource: TrackedResource | str) -> None:
        """
        Dispose of a single resource using its own keep and force clean flags.

        Resources that are no longer tracked (already disposed, or claimed by a
        running exit sweep) are ignored, which makes repeated calls no-ops. If the
        resource is a directory that is still not empty, it is tracked again at its
        original position so that the exit sweep gets another chance, and the error
        is re-raised.

        Raises:
            NonEmptyDirectoryError: If a directory without force clean has children.
            DisposalError: On any other filesystem error.
        """
        claimed = self._claim(resource)
        if claimed is None:
            return

        key = canonical_path(claimed.path)
        try:
            dispose_resource(claimed, claimed.keep)
        except NonEmptyDirectoryError:
            self._retrack(key, claimed)
            raise
        finally:
            self._forget(key)

    def _forget(self, key: str) -> None:
        with self._lock:
            if key not in self._resources:
                self._order.pop(key, None)

    def _retrack(self, key: str, resource: TrackedResource) -> None:
        with self._lock:
            if key in self._resources:
                return
            if key not in self._order:
                self._order[key] = next(self._sequence)
            self._resources[key] = resource
            self._resources = dict(
                sorted(self._resources.items(), key=lambda item: self._order[item[0]])
            )

    def dispose_all(self) -> list[TrackedResource]:
        """
        Dispose of every tracked resource in reverse registration order.

        The global force clean flag overrides the keep flag of each resource. Errors
        are logged and never raised, so one resource that cannot be removed does not
        keep the rest from being cleaned up. The mapping is cleared regardless of
        individual outcomes.

        Returns:
            list[TrackedResource]: Resources that could not be disposed of.
        """
        with self._lock:
            pending = list(reversed(self._resources.values()))
            self._resources.clear()
            self._order.clear()
            force_clean = self._force_clean

        if not pending:
            return []

        log_section_separator(logger, f"Disposing {len(pending)} temporary resource(s)")
        failed: list[TrackedResource] = []
        for resource in pending:
            try:
                dispose_resource(resource, resource.keep and not force_clean)
            except Exception as e:  # noqa: BLE001
                logger.warning("Failed to dispose %s: %s", resource.path, e)
                failed.append(resource)
        log_section_end(logger, f"Disposed {len(pending) - len(failed)} of {len(pending)} resource(s)")
        return failed

    def finalize(self) -> None:
        """Exit hook: sweep all remaining resources. Never raises."""
        try:
            self.dispose_all()
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error while sweeping temporary resources")

    def install_exit_hook(self) -> None:
        """Register :meth:`finalize` with ``atexit``, at most once per collector."""
        with self._lock:
            if self._exit_hook_installed:
                return
            self._exit_hook_installed = True
        atexit.register(self.finalize)
        logger.debug("Installed exit hook")


_default_collector: GarbageCollector | None = None
_default_lock = threading.Lock()


def get_default_collector() -> GarbageCollector:
    """Return the process-wide collector, creating it and its exit hook on first use."""
    global _default_collector
    with _default_lock:
        if _default_collector is None:
            _default_collector = GarbageCollector()
            _default_collector.install_exit_hook()
        return _default_collector
