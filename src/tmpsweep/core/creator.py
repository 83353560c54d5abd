"""Exclusive creation of temporary files and directories.

This module tries candidate paths one after the other until the filesystem
accepts one, never overwriting an existing entry.
"""

import logging
import os
from collections.abc import Iterable

from ..exceptions import CreationError, NameExhaustionError
from ..types import ResourceKind

logger = logging.getLogger(__name__)

_FILE_FLAGS = os.O_RDWR | os.O_CREAT | os.O_EXCL | getattr(os, "O_NOFOLLOW", 0) | getattr(os, "O_BINARY", 0)


def _create_file(path: str, mode: int) -> None:
    fd = os.open(path, _FILE_FLAGS, mode)
    try:
        os.close(fd)
    except OSError:
        # Do not leave a half-created file behind
        os.unlink(path)
        raise


def _create_directory(path: str, mode: int) -> None:
    os.mkdir(path, mode)


def create_resource(kind: ResourceKind, mode: int, candidates: Iterable[str]) -> str:
    """
    Create a file or directory at the first free candidate path.

    Parameters:
        kind (ResourceKind): Whether to create a file or a directory.
        mode (int): Permission bits passed to the filesystem (subject to the umask).
        candidates (Iterable[str]): Absolute candidate paths, tried in order.

    Returns:
        str: The absolute path that was actually created.

    Raises:
        NameExhaustionError: If every candidate already existed.
        CreationError: On any other filesystem error; such errors are never retried.
    """
    create = _create_directory if kind is ResourceKind.DIRECTORY else _create_file
    attempts = 0

    for path in candidates:
        attempts += 1
        try:
            create(path, mode)
        except FileExistsError:
            logger.debug("Candidate already exists, trying next: %s", path)
            continue
        except OSError as e:
            raise CreationError(f"Could not create {kind.value} {path}: {e}", path=path) from e

        logger.debug("Created %s %s (attempt %d)", kind.value, path, attempts)
        return path

    raise NameExhaustionError(attempts=attempts)
