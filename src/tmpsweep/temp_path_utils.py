"""Utilities for locating the tmp root and resolving the base directory of new resources."""

import logging
import os
import tempfile
from pathlib import Path

from ._utils import is_within_directory, split_path_components
from .exceptions import InvalidPathError

logger = logging.getLogger(__name__)


def normalized_os_tmpdir() -> str:
    """Return the canonical absolute path of the OS tmp dir.

    This follows ``tempfile.gettempdir()`` and thus honours the ``TMPDIR``,
    ``TEMP`` and ``TMP`` environment variables. Symlinks are resolved so that
    paths handed out on e.g. macOS (``/var`` -> ``/private/var``) are stable keys.
    """
    return str(Path(tempfile.gettempdir()).resolve())


def _resolve_root(tmpdir: str | None) -> str:
    if tmpdir is None:
        return normalized_os_tmpdir()

    root = Path(tmpdir).resolve()
    if not root.is_dir():
        raise InvalidPathError(f"tmpdir option must be an existing directory: {tmpdir}", path=str(root))
    return str(root)


def resolve_base_dir(tmpdir: str | None = None, dir: str | None = None) -> str:  # noqa: A002
    """
    Resolve the directory new temporary resources are placed in.

    Parameters:
        tmpdir (str | None): Override for the OS tmp dir. If given, it must exist.
        dir (str | None): Path relative to the root tmp dir. Leading and trailing
            whitespace is removed and whitespace-only components are dropped.

    Returns:
        str: Absolute, normalized base directory. It is not checked for existence;
        a missing base directory surfaces as a creation error later on.

    Raises:
        InvalidPathError: If the override does not exist or ``dir`` escapes the root.
    """
    root = _resolve_root(tmpdir)

    if dir is None or not dir.strip():
        return root

    components = split_path_components(dir.strip())
    # pathlib keeps ".." components, so collapse them before the containment check
    base_dir = os.path.normpath(Path(root, *components)) if components else root

    if not is_within_directory(root, base_dir):
        raise InvalidPathError(
            f"dir option must be relative to the tmp dir {root!r}, got {dir!r}", path=base_dir
        )

    logger.debug("Resolved base dir: %s", base_dir)
    return base_dir
