"""tmpsweep - Temporary files and directories that clean up after themselves.

This package creates uniquely named temporary files and directories and makes
sure they are removed again, either when their handle is disposed of or, at
the latest, when the interpreter exits normally. Individual resources can opt
out of cleanup with ``keep=True``.

Example:
    ```python
    from tmpsweep import sync as tmp

    result = tmp.file(prefix="report", postfix=".csv")
    print(result.name)  # /tmp/report-4242-a75xkVzj43Ac.csv
    result.dispose()

    with tmp.dir(force_clean=True) as workdir:
        ...  # removed recursively on exit
    ```

    The same operations are available for callback style code through
    ``tmpsweep.callbacks`` and for asyncio through ``tmpsweep.aio``:
    ```python
    from tmpsweep import aio

    async with await aio.dir(force_clean=True) as workdir:
        ...
    ```

Error Handling:
    Every operation raises a subclass of :class:`TmpSweepError`:
    ```python
    from tmpsweep import sync as tmp, NonEmptyDirectoryError

    directory = tmp.dir()
    ...
    try:
        directory.dispose()
    except NonEmptyDirectoryError:
        # Still tracked; it will be retried on exit
        pass
    ```

Signals:
    Cleanup runs on normal interpreter exit only. To clean up on SIGTERM,
    turn the signal into a normal exit:
    ```python
    import signal, sys
    signal.signal(signal.SIGTERM, lambda *_: sys.exit(1))
    ```

Logging:
    To enable debug logging in your application:
    ```python
    import logging
    logging.getLogger('tmpsweep').setLevel(logging.DEBUG)
    ```
"""

import logging

from .api import aio, callbacks, sync
from .core import GarbageCollector, Provisioner, get_default_collector
from .exceptions import (
    CreationError,
    DisposalError,
    DuplicateResourceError,
    InvalidNameError,
    InvalidPathError,
    NameExhaustionError,
    NonEmptyDirectoryError,
    TmpSweepError,
)
from .interfaces import (
    AsyncInterface,
    AsyncResult,
    CallbackInterface,
    CallbackResult,
    SyncInterface,
    SyncResult,
)
from .legacy import (
    dir_sync,
    file_sync,
    set_graceful_cleanup,
    tmp_dir,
    tmp_file,
    tmp_name,
    tmp_name_sync,
)
from .temp_path_utils import normalized_os_tmpdir
from .types import ResourceKind, TmpOptions, TrackedResource

# Configure module-level logger
logger = logging.getLogger(__name__)
# Use NullHandler by default - consuming applications configure as needed
logger.addHandler(logging.NullHandler())

tmpdir: str = normalized_os_tmpdir()

# Get version from package metadata (single source of truth in pyproject.toml)
try:
    from importlib.metadata import version

    __version__ = version("tmpsweep")
except Exception:
    # Fallback for development environments where package isn't installed
    __version__ = "0.0.0.dev"

__all__ = [
    # Interfaces
    "sync",
    "callbacks",
    "aio",
    "tmpdir",
    "SyncInterface",
    "SyncResult",
    "CallbackInterface",
    "CallbackResult",
    "AsyncInterface",
    "AsyncResult",
    # Core
    "GarbageCollector",
    "Provisioner",
    "get_default_collector",
    "ResourceKind",
    "TmpOptions",
    "TrackedResource",
    # Errors
    "TmpSweepError",
    "InvalidPathError",
    "InvalidNameError",
    "NameExhaustionError",
    "CreationError",
    "DisposalError",
    "NonEmptyDirectoryError",
    "DuplicateResourceError",
    # Deprecated
    "set_graceful_cleanup",
    "tmp_name_sync",
    "file_sync",
    "dir_sync",
    "tmp_name",
    "tmp_file",
    "tmp_dir",
]
