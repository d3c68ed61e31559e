"""Gaussian and distortion randomizers.

This module provides:
- GaussianRandomizer: replaces each value with a normal sample
- DistortRandomizer: perturbs each value by a bounded relative amount
"""

from __future__ import annotations

from core.rng import RngLike
from randomize.basic import BasicRandomizer

__all__ = ["GaussianRandomizer", "DistortRandomizer"]


class GaussianRandomizer(BasicRandomizer):
    """Normal-distribution randomizer.

    Previous values are discarded.

    Attributes:
        mean: Mean of the distribution.
        std: Standard deviation of the distribution.
    """

    def __init__(self, mean: float = 0.0, std: float = 1.0, *, rng: RngLike = None) -> None:
        """Initialize the randomizer.

        Args:
            mean: Mean of the distribution.
            std: Standard deviation. Must be non-negative.
            rng: Generator, seed, or None for a time-based seed.

        Raises:
            ValueError: If std < 0.
        """
        if std < 0:
            raise ValueError(f"std must be non-negative, got {std}")
        super().__init__(rng)
        self.mean = float(mean)
        self.std = float(std)

    def randomize_scalar(self, value: float) -> float:
        return float(self.rng.normal(self.mean, self.std))


class DistortRandomizer(BasicRandomizer):
    """Relative perturbation of existing values.

    Each value ``v`` becomes ``v + v * u`` with ``u`` uniform in
    ``[-factor, factor)``. Zeros stay zero.

    Attributes:
        factor: Maximum relative distortion.

    Example:
        >>> r = DistortRandomizer(0.1, rng=0)
        >>> 9.0 <= r.randomize_scalar(10.0) <= 11.0
        True
    """

    def __init__(self, factor: float, *, rng: RngLike = None) -> None:
        if factor < 0:
            raise ValueError(f"factor must be non-negative, got {factor}")
        super().__init__(rng)
        self.factor = float(factor)

    def randomize_scalar(self, value: float) -> float:
        return value + value * self.next_double(-self.factor, self.factor)
