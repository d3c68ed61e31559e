"""Random number generation utilities.

Randomizers own a ``numpy.random.Generator``. These helpers build one from
whatever the caller has: nothing (time-based seed), an integer seed, or an
existing generator.
"""

from __future__ import annotations

import time

import numpy as np

__all__ = ["RngLike", "time_seed", "make_rng"]

RngLike = np.random.Generator | int | None


def time_seed() -> int:
    """Return a seed derived from the current wall clock."""
    return time.time_ns() & 0xFFFFFFFFFFFFFFFF


def make_rng(rng: RngLike = None) -> np.random.Generator:
    """Build a generator.

    Args:
        rng: ``None`` for a time-seeded generator, an ``int`` seed, or a
            generator that is returned unchanged.

    Returns:
        A ``numpy.random.Generator``.

    Raises:
        TypeError: If rng is of an unsupported type.
    """
    if rng is None:
        return np.random.default_rng(time_seed())
    if isinstance(rng, np.random.Generator):
        return rng
    # bool is an int subclass but never a meaningful seed
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return np.random.default_rng(int(rng))
    raise TypeError(f"rng must be None, an int seed or a numpy Generator, got {type(rng).__name__}")
