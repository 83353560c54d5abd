"""File utilities for tmpsweep.

This module provides small path helpers shared by the naming and path
resolution code.
"""

import os
import re
from pathlib import Path

_SEPARATORS = {"/", os.sep} | ({os.altsep} if os.altsep else set())
_SEPARATOR_PATTERN = re.compile("|".join(re.escape(sep) for sep in sorted(_SEPARATORS)))


def contains_path_separator(value: str) -> bool:
    """Return True if ``value`` contains any path separator known to this platform."""
    return any(sep in value for sep in _SEPARATORS)


def split_path_components(value: str) -> list[str]:
    """
    Split a relative path into its components, dropping whitespace-only ones.

    Parameters:
        value (str): Path as given by the caller. Leading and trailing whitespace
            is expected to have been removed already.

    Returns:
        list[str]: Non-empty components in order. Empty components produced by
        leading, trailing or doubled separators are dropped as well, so an
        absolute-looking value such as ``"/hidden"`` yields ``["hidden"]``.
    """
    return [part for part in _SEPARATOR_PATTERN.split(value) if part.strip()]


def is_within_directory(root: str, path: str) -> bool:
    """
    Check whether ``path`` equals ``root`` or lies below it.

    Both arguments must be absolute and already normalized.
    """
    return Path(path).is_relative_to(root)
