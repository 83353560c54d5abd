"""Normalization of user supplied options.

This is the only module that knows about deprecated option spellings. Everything
downstream works with :class:`NormalizedOptions` and never sees ``template`` or
``unsafe_cleanup``.
"""

import logging
import os
import warnings
from dataclasses import dataclass
from typing import Any

from ._utils import contains_path_separator
from .exceptions import InvalidNameError, InvalidPathError
from .naming import DEFAULT_LENGTH, DEFAULT_PREFIX, DEFAULT_TRIES, MIN_LENGTH, NameSpec
from .types import ResourceKind, TmpOptions

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o600
DEFAULT_DIR_MODE = 0o700

TEMPLATE_PLACEHOLDER = "XXXXXX"

_KNOWN_OPTIONS = frozenset(TmpOptions.__annotations__)


@dataclass(frozen=True)
class NormalizedOptions:
    """Canonical option set after trimming, defaulting and alias resolution."""

    tmpdir: str | None = None
    dir: str | None = None
    name: str | None = None
    prefix: str = DEFAULT_PREFIX
    postfix: str = ""
    length: int = DEFAULT_LENGTH
    tries: int = DEFAULT_TRIES
    mode: int | None = None
    keep: bool = False
    force_clean: bool = False
    decorated: bool = True

    def mode_for(self, kind: ResourceKind) -> int:
        """Return the configured mode, or the default for ``kind``."""
        if self.mode is not None:
            return self.mode
        return DEFAULT_DIR_MODE if kind is ResourceKind.DIRECTORY else DEFAULT_FILE_MODE

    def name_spec(self, base_dir: str) -> NameSpec:
        return NameSpec(
            base_dir=base_dir,
            prefix=self.prefix,
            postfix=self.postfix,
            fixed_name=self.name,
            length=self.length,
            tries=self.tries,
            decorated=self.decorated,
        )


def _string_option(options: dict[str, Any], key: str, error: type[Exception]) -> str | None:
    value = options.get(key)
    if value is None:
        return None
    if key in ("dir", "tmpdir") and isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str):
        raise error(f"{key} option must be a string, got {type(value).__name__}")
    return value


def _trimmed(options: dict[str, Any], key: str, error: type[Exception] = InvalidNameError) -> str | None:
    value = _string_option(options, key, error)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _split_template(template: str) -> tuple[str, str]:
    if contains_path_separator(template):
        raise InvalidNameError(f"template option must not contain a path separator, got {template!r}")
    occurrences = template.count(TEMPLATE_PLACEHOLDER)
    if occurrences != 1:
        raise InvalidNameError(
            f"template option must contain {TEMPLATE_PLACEHOLDER!r} exactly once, got {template!r}"
        )
    prefix, _, postfix = template.partition(TEMPLATE_PLACEHOLDER)
    return prefix, postfix


def normalize_options(options: TmpOptions | None = None) -> NormalizedOptions:
    """
    Map user options onto the canonical option set.

    Parameters:
        options (TmpOptions | None): Options as passed by the caller.

    Returns:
        NormalizedOptions: Options with whitespace rules applied, deprecated
        aliases resolved and defaults filled in. Numeric clamping happens when the
        :class:`NameSpec` is built.

    Raises:
        TypeError: If an unknown option is passed.
        InvalidNameError: If a name fragment or template is malformed.
        InvalidPathError: If ``dir`` or ``tmpdir`` is not a string.
    """
    raw: dict[str, Any] = dict(options or {})

    unknown = set(raw) - _KNOWN_OPTIONS
    if unknown:
        raise TypeError(f"Unknown option(s): {', '.join(sorted(unknown))}")

    tmpdir = _trimmed(raw, "tmpdir", InvalidPathError)
    dir_ = _trimmed(raw, "dir", InvalidPathError)
    name = _trimmed(raw, "name")
    postfix = _trimmed(raw, "postfix") or ""

    # Prefix keeps its whitespace; only a blank prefix falls back to the default
    prefix = _string_option(raw, "prefix", InvalidNameError)
    if prefix is None or not prefix.strip():
        prefix = DEFAULT_PREFIX

    length = raw.get("length", DEFAULT_LENGTH)
    tries = raw.get("tries", DEFAULT_TRIES)
    decorated = True

    template = _trimmed(raw, "template")
    if template is not None:
        warnings.warn(
            "The template option is deprecated, use prefix, postfix and length instead.",
            DeprecationWarning,
            stacklevel=3,
        )
        if name is None:
            prefix, postfix = _split_template(template)
            length = MIN_LENGTH
            decorated = False
        else:
            logger.debug("Ignoring template %r since a fixed name is set", template)

    force_clean = raw.get("force_clean")
    if "unsafe_cleanup" in raw:
        warnings.warn(
            "The unsafe_cleanup option is deprecated, use force_clean instead.",
            DeprecationWarning,
            stacklevel=3,
        )
        if force_clean is None:
            force_clean = raw["unsafe_cleanup"]

    mode = raw.get("mode")
    if mode is not None and (isinstance(mode, bool) or not isinstance(mode, int)):
        raise TypeError(f"mode option must be an integer, got {mode!r}")

    return NormalizedOptions(
        tmpdir=tmpdir,
        dir=dir_,
        name=name,
        prefix=prefix,
        postfix=postfix,
        length=length,
        tries=tries,
        mode=mode,
        keep=bool(raw.get("keep", False)),
        force_clean=bool(force_clean),
        decorated=decorated,
    )
