"""Core modules for tmpsweep.

This package contains the resource tracking and disposal engine: exclusive
creation, the garbage collector and the disposal policy.
"""

from .creator import create_resource
from .disposal import dispose_resource
from .provisioner import Provisioner
from .registry import GarbageCollector, canonical_path, get_default_collector

__all__ = [
    # Creation
    "create_resource",
    "Provisioner",
    # Tracking
    "GarbageCollector",
    "canonical_path",
    "get_default_collector",
    # Disposal
    "dispose_resource",
]
