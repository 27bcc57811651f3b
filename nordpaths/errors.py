"""Error kinds raised by path and identity resolution."""

from __future__ import annotations


class LocatorError(Exception):
    """Base class for every resolution failure."""


class InvalidInputError(LocatorError, ValueError):
    """The caller passed an unusable identity argument."""


class NotFoundError(LocatorError, LookupError):
    """A required user, group or directory does not exist."""


class LookupFailureError(LocatorError, OSError):
    """The user/group database could not be queried."""
