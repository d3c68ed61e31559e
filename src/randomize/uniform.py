"""Uniform and constant randomizers.

This module provides:
- RangeRandomizer: replaces each value with a uniform sample in [low, high)
- ConstRandomizer: replaces each value with a fixed constant
"""

from __future__ import annotations

from core.rng import RngLike
from randomize.basic import BasicRandomizer

__all__ = ["RangeRandomizer", "ConstRandomizer"]


class RangeRandomizer(BasicRandomizer):
    """Uniform randomizer over a fixed range.

    Previous values are discarded.

    Attributes:
        low: Lower bound (inclusive).
        high: Upper bound (exclusive).

    Example:
        >>> r = RangeRandomizer(-1.0, 1.0, rng=42)
        >>> -1.0 <= r.randomize_scalar(0.0) < 1.0
        True
    """

    def __init__(self, low: float, high: float, *, rng: RngLike = None) -> None:
        """Initialize the randomizer.

        Args:
            low: Lower bound (inclusive).
            high: Upper bound (exclusive).
            rng: Generator, seed, or None for a time-based seed.

        Raises:
            ValueError: If high < low.
        """
        if high < low:
            raise ValueError(f"high must be >= low, got low={low}, high={high}")
        super().__init__(rng)
        self.low = float(low)
        self.high = float(high)

    def randomize_scalar(self, value: float) -> float:
        return self.next_double(self.low, self.high)


class ConstRandomizer(BasicRandomizer):
    """Sets every value to the same constant. Draws nothing from the generator."""

    def __init__(self, value: float, *, rng: RngLike = None) -> None:
        super().__init__(rng)
        self.value = float(value)

    def randomize_scalar(self, value: float) -> float:
        return self.value
