"""Process-wide interface singletons.

All three share the default garbage collector, so calling ``force_clean()`` on
any of them affects the exit sweep of every resource in the process.
"""

from .core import get_default_collector
from .interfaces import AsyncInterface, CallbackInterface, SyncInterface

sync = SyncInterface(get_default_collector())
callbacks = CallbackInterface(get_default_collector())
aio = AsyncInterface(get_default_collector())
