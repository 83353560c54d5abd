"""Exception classes for tmpsweep.

Every public operation either succeeds or raises exactly one of the
subclasses of :class:`TmpSweepError` defined here.
"""

from __future__ import annotations


class TmpSweepError(Exception):
    """Base exception for all tmpsweep errors."""

    pass


class InvalidPathError(TmpSweepError, ValueError):
    """The base directory could not be resolved or escapes its root."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message)
        self.path = path


class InvalidNameError(TmpSweepError, ValueError):
    """A name fragment or template is malformed."""

    pass


class NameExhaustionError(TmpSweepError):
    """Every generated candidate name was already taken.

    Attributes:
        attempts: Number of candidates that were tried before giving up
    """

    def __init__(self, message: str | None = None, *, attempts: int):
        super().__init__(
            message or f"Could not get a unique tmp name, max tries reached ({attempts})"
        )
        self.attempts = attempts


class CreationError(TmpSweepError):
    """The filesystem refused to create a resource for a reason other than a name collision."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message)
        self.path = path


class DisposalError(TmpSweepError):
    """A tracked resource could not be removed."""

    def __init__(self, message: str, *, path: str):
        super().__init__(message)
        self.path = path


class NonEmptyDirectoryError(DisposalError):
    """A directory without force clean still has children."""

    def __init__(self, path: str):
        super().__init__(
            f"Directory is not empty and force clean is not set: {path}", path=path
        )


class DuplicateResourceError(TmpSweepError):
    """A path is already tracked by the garbage collector."""

    def __init__(self, path: str):
        super().__init__(f"Resource is already tracked: {path}")
        self.path = path
