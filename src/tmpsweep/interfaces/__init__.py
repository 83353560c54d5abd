"""Calling conventions wrapping the blocking core."""

from .async_api import AsyncInterface, AsyncResult
from .callback_api import CallbackInterface, CallbackResult, get_default_executor
from .sync_api import SyncInterface, SyncResult

__all__ = [
    "AsyncInterface",
    "AsyncResult",
    "CallbackInterface",
    "CallbackResult",
    "SyncInterface",
    "SyncResult",
    "get_default_executor",
]
