"""Exceptions raised by the randomization framework."""

from __future__ import annotations

__all__ = ["RandomizeError", "OutOfRangeError"]


class RandomizeError(Exception):
    """Base class for randomization errors."""


class OutOfRangeError(RandomizeError, IndexError):
    """A traversal bound exceeds the target container.

    Traversals mutate in place, so elements visited before the failing
    index keep their new values.
    """
