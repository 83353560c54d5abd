"""Utility modules for tmpsweep.

This package contains shared helper functions that are used throughout
the tmpsweep package.
"""

from .file_utils import (
    contains_path_separator,
    is_within_directory,
    split_path_components,
)

__all__ = [
    "contains_path_separator",
    "is_within_directory",
    "split_path_components",
]
