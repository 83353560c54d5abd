"""Deprecated module level functions kept for callers of the old flat API.

Each function forwards to one of the interface singletons in :mod:`tmpsweep.api`
and emits a :class:`DeprecationWarning`.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from typing_extensions import Unpack

from . import api
from .interfaces import CallbackResult, SyncResult
from .interfaces.callback_api import ChainedCallback, NamingCallback
from .types import TmpOptions

DisposeCallback = Callable[[ChainedCallback | None], Any]
DirOrFileCallback = Callable[[Exception | None, str | None, DisposeCallback | None], Any]


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"{old} is deprecated, use {new} instead.",
        DeprecationWarning,
        stacklevel=3,
    )


def set_graceful_cleanup() -> None:
    _deprecated("set_graceful_cleanup()", "sync.force_clean()")
    api.sync.force_clean()


def tmp_name_sync(**options: Unpack[TmpOptions]) -> str:
    _deprecated("tmp_name_sync()", "sync.name()")
    return api.sync.name(**options)


def file_sync(**options: Unpack[TmpOptions]) -> SyncResult:
    _deprecated("file_sync()", "sync.file()")
    return api.sync.file(**options)


def dir_sync(**options: Unpack[TmpOptions]) -> SyncResult:
    _deprecated("dir_sync()", "sync.dir()")
    return api.sync.dir(**options)


def tmp_name(callback: NamingCallback, **options: Unpack[TmpOptions]) -> Future[None]:
    _deprecated("tmp_name()", "callbacks.name()")
    return api.callbacks.name(callback, **options)


def _adapt(callback: DirOrFileCallback) -> Callable[[Exception | None, CallbackResult | None], Any]:
    # The old API passed (err, name, dispose) instead of a result object
    def adapted(err: Exception | None, result: CallbackResult | None) -> Any:
        if err is not None or result is None:
            return callback(err, None, None)
        return callback(None, result.name, result.dispose)

    return adapted


def tmp_file(callback: DirOrFileCallback, **options: Unpack[TmpOptions]) -> Future[None]:
    _deprecated("tmp_file()", "callbacks.file()")
    return api.callbacks.file(_adapt(callback), **options)


def tmp_dir(callback: DirOrFileCallback, **options: Unpack[TmpOptions]) -> Future[None]:
    _deprecated("tmp_dir()", "callbacks.dir()")
    return api.callbacks.dir(_adapt(callback), **options)
