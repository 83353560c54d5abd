"""Generation of candidate names for temporary resources.

Nothing in this module touches the filesystem: a :class:`NameSpec` describes how
names look and :func:`generate_candidates` lazily yields absolute candidate paths
that the creator then tries one after the other.
"""

import os
import secrets
import string
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ._utils import contains_path_separator
from .exceptions import InvalidNameError

RANDOM_CHARS = string.ascii_letters + string.digits

DEFAULT_PREFIX = "tmp"
DEFAULT_LENGTH = 12
MIN_LENGTH = 6
MAX_LENGTH = 24
DEFAULT_TRIES = 3
MIN_TRIES = 1
MAX_TRIES = 10


def default_process_token() -> str:
    return str(os.getpid())


def random_segment(length: int) -> str:
    """Return ``length`` random alphanumeric characters."""
    return "".join(secrets.choice(RANDOM_CHARS) for _ in range(length))


def _clamp(option: str, value: object, lower: int, upper: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidNameError(f"{option} option must be a number, got {value!r}")
    return int(max(lower, min(upper, value)))


def _check_fragment(option: str, value: str) -> None:
    if contains_path_separator(value):
        raise InvalidNameError(f"{option} option must not contain a path separator, got {value!r}")


@dataclass
class NameSpec:
    """Describes how candidate names are built.

    Attributes:
        base_dir: Absolute directory the candidates are placed in
        prefix: Leading part of a generated name
        postfix: Trailing part of a generated name, appended verbatim
        fixed_name: If set, the only candidate is ``base_dir/fixed_name``
        length: Length of the random part, clamped to [6, 24]
        tries: Number of candidates, clamped to [1, 10]
        process_token: Per-process segment placed between prefix and random part
        decorated: If False, names are ``prefix + random + postfix`` without
            process token or dashes (used for legacy templates)
    """

    base_dir: str
    prefix: str = DEFAULT_PREFIX
    postfix: str = ""
    fixed_name: str | None = None
    length: int = DEFAULT_LENGTH
    tries: int = DEFAULT_TRIES
    process_token: str = field(default_factory=default_process_token)
    decorated: bool = True

    def __post_init__(self) -> None:
        if not Path(self.base_dir).is_absolute():
            raise InvalidNameError(f"base dir must be absolute, got {self.base_dir!r}")

        self.length = _clamp("length", self.length, MIN_LENGTH, MAX_LENGTH)
        self.tries = _clamp("tries", self.tries, MIN_TRIES, MAX_TRIES)

        if self.fixed_name is not None:
            _check_fragment("name", self.fixed_name)
            if self.fixed_name in ("", ".", ".."):
                raise InvalidNameError(f"name option must be a valid file name, got {self.fixed_name!r}")
            return

        _check_fragment("prefix", self.prefix)
        _check_fragment("postfix", self.postfix)

    @property
    def attempts(self) -> int:
        """Number of candidates :func:`generate_candidates` will yield."""
        return 1 if self.fixed_name is not None else self.tries

    def build_name(self) -> str:
        """Build a single (random) file name without the base directory."""
        if self.fixed_name is not None:
            return self.fixed_name

        random_part = random_segment(self.length)
        if not self.decorated:
            return f"{self.prefix}{random_part}{self.postfix}"
        return f"{self.prefix}-{self.process_token}-{random_part}{self.postfix}"


def generate_candidates(spec: NameSpec) -> Iterator[str]:
    """
    Lazily yield candidate absolute paths for ``spec``.

    Yields exactly ``spec.tries`` candidates, or a single one when a fixed name
    is configured since retrying the same name cannot succeed.
    """
    for _ in range(spec.attempts):
        yield str(Path(spec.base_dir, spec.build_name()))
