"""Blocking core API shared by all calling conventions."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from ..exceptions import DisposalError, NameExhaustionError, TmpSweepError
from ..naming import generate_candidates
from ..options import NormalizedOptions, normalize_options
from ..temp_path_utils import normalized_os_tmpdir, resolve_base_dir
from ..types import ResourceKind, TmpOptions, TrackedResource
from .creator import create_resource
from .disposal import dispose_resource
from .registry import GarbageCollector, get_default_collector

logger = logging.getLogger(__name__)


class Provisioner:
    """Creates uniquely named temporary resources and hands them to a garbage collector.

    All calling conventions (blocking, callback and asyncio) are thin wrappers
    around an instance of this class.
    """

    def __init__(self, collector: GarbageCollector | None = None):
        self.collector = collector if collector is not None else get_default_collector()

    @property
    def tmpdir(self) -> str:
        """The normalized OS tmp dir."""
        return normalized_os_tmpdir()

    def force_clean(self) -> None:
        """Make the exit sweep remove resources even if they were configured to be kept."""
        self.collector.set_force_clean(True)

    def _candidates(self, options: NormalizedOptions) -> Iterator[str]:
        base_dir = resolve_base_dir(options.tmpdir, options.dir)
        return generate_candidates(options.name_spec(base_dir))

    def name(self, options: TmpOptions | None = None) -> str:
        """
        Return the first candidate path that does not exist yet.

        Nothing is created on disk, so the name may be taken by the time the caller
        uses it.

        Raises:
            NameExhaustionError: If every candidate already exists.
        """
        normalized = normalize_options(options)
        attempts = 0
        for path in self._candidates(normalized):
            attempts += 1
            candidate = Path(path)
            if not (candidate.is_symlink() or candidate.exists()):
                return path
        raise NameExhaustionError(attempts=attempts)

    def create(self, kind: ResourceKind, options: TmpOptions | None = None) -> TrackedResource:
        """
        Create and register a temporary file or directory.

        Raises:
            InvalidPathError: If the base directory cannot be resolved.
            InvalidNameError: If a name fragment is malformed.
            NameExhaustionError: If all candidates collided with existing entries.
            CreationError: On any other filesystem error.
            DuplicateResourceError: If the created path is somehow already tracked. If the
                cleanup after a failed registration fails too, that is logged and the
                registration error is raised.
        """
        normalized = normalize_options(options)
        mode = normalized.mode_for(kind)
        path = create_resource(kind, mode, self._candidates(normalized))

        resource = TrackedResource(
            path=path,
            kind=kind,
            mode=mode,
            keep=normalized.keep,
            force_clean=normalized.force_clean,
        )
        try:
            self.collector.register(resource)
        except TmpSweepError:
            # Never leave an untracked resource behind
            try:
                dispose_resource(resource, effective_keep=False)
            except DisposalError as e:
                logger.warning("Could not remove unregistered %s %s: %s", kind.value, path, e)
            raise

        logger.debug(
            "Provisioned %s %s (keep=%s, force_clean=%s)",
            kind.value,
            path,
            resource.keep,
            resource.force_clean,
        )
        return resource

    def file(self, options: TmpOptions | None = None) -> TrackedResource:
        return self.create(ResourceKind.FILE, options)

    def dir(self, options: TmpOptions | None = None) -> TrackedResource:  # noqa: A003
        return self.create(ResourceKind.DIRECTORY, options)

    def dispose(self, resource: TrackedResource) -> None:
        self.collector.dispose_one(resource)

