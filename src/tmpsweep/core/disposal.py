"""Removal of tracked resources from the filesystem."""

import errno
import logging
import os
import shutil

from ..exceptions import DisposalError, NonEmptyDirectoryError
from ..types import ResourceKind, TrackedResource

logger = logging.getLogger(__name__)

_NOT_EMPTY = {errno.ENOTEMPTY, errno.EEXIST}


def _remove_directory(resource: TrackedResource) -> None:
    if resource.force_clean:
        shutil.rmtree(resource.path)
        return

    try:
        os.rmdir(resource.path)
    except OSError as e:
        if e.errno in _NOT_EMPTY:
            raise NonEmptyDirectoryError(resource.path) from e
        raise


def dispose_resource(resource: TrackedResource, effective_keep: bool) -> None:
    """
    Remove a tracked resource, honouring its keep and force clean flags.

    Parameters:
        resource (TrackedResource): The resource to dispose of. Already disposed
            resources are left alone.
        effective_keep (bool): If True the entity stays on disk and the resource is
            only marked as disposed.

    Raises:
        NonEmptyDirectoryError: If a directory without force clean still has
            children. This is the only outcome that leaves the resource undisposed.
        DisposalError: On any other filesystem error. The resource is marked as
            disposed and will not be retried.
    """
    if resource.disposed:
        return

    if effective_keep:
        logger.debug("Keeping %s", resource.path)
        resource.disposed = True
        return

    try:
        if resource.kind is ResourceKind.DIRECTORY:
            _remove_directory(resource)
        else:
            os.unlink(resource.path)
    except FileNotFoundError:
        logger.debug("Already gone: %s", resource.path)
    except OSError as e:
        resource.disposed = True
        raise DisposalError(f"Could not remove {resource.path}: {e}", path=resource.path) from e
    else:
        logger.debug("Removed %s %s", resource.kind.value, resource.path)

    resource.disposed = True
