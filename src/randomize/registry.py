"""Registry for randomizers.

This module provides a factory layer for creating randomizers by name, so
configs and callers do not need to import strategy classes directly.

Adding a new randomizer:
1. Subclass BasicRandomizer (see randomize.basic) and implement randomize_scalar
2. Register it here with register_randomizer(name, factory_fn)
3. It becomes available to configs via {"name": name}

Example:
    >>> from randomize.registry import get_randomizer
    >>> r = get_randomizer("range", {"low": -0.5, "high": 0.5}, rng=42)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from core.rng import RngLike
from randomize.basic import BasicRandomizer
from randomize.gaussian import DistortRandomizer, GaussianRandomizer
from randomize.uniform import ConstRandomizer, RangeRandomizer

__all__ = [
    "RANDOMIZERS",
    "RandomizerFactory",
    "register_randomizer",
    "get_randomizer",
]

# Factory signature: (params, rng) -> randomizer
RandomizerFactory = Callable[[dict[str, Any], RngLike], BasicRandomizer]

# Global registry
RANDOMIZERS: dict[str, RandomizerFactory] = {}


def register_randomizer(name: str, factory: RandomizerFactory) -> None:
    """Register a randomizer factory.

    Args:
        name: Unique name for the randomizer (used in configs).
        factory: Callable taking a params dict and an rng, returning a randomizer.

    Raises:
        ValueError: If name is already registered.
    """
    if name in RANDOMIZERS:
        raise ValueError(f"Randomizer '{name}' is already registered")
    RANDOMIZERS[name] = factory


def get_randomizer(
    name: str, config: dict[str, Any] | None = None, *, rng: RngLike = None
) -> BasicRandomizer:
    """Get a randomizer instance from the registry.

    Args:
        name: Registered randomizer name.
        config: Parameters passed to the factory.
        rng: Generator, seed, or None for a time-based seed.

    Returns:
        A BasicRandomizer instance.

    Raises:
        KeyError: If name is not registered.
    """
    if name not in RANDOMIZERS:
        available = ", ".join(sorted(RANDOMIZERS.keys()))
        raise KeyError(f"Unknown randomizer '{name}'. Available: {available}")
    return RANDOMIZERS[name](dict(config or {}), rng)


# =============================================================================
# Randomizer factories
# =============================================================================


def _range_factory(config: dict[str, Any], rng: RngLike) -> RangeRandomizer:
    """Factory for RangeRandomizer."""
    return RangeRandomizer(config.get("low", -1.0), config.get("high", 1.0), rng=rng)


def _const_factory(config: dict[str, Any], rng: RngLike) -> ConstRandomizer:
    """Factory for ConstRandomizer."""
    return ConstRandomizer(config.get("value", 0.0), rng=rng)


def _gaussian_factory(config: dict[str, Any], rng: RngLike) -> GaussianRandomizer:
    """Factory for GaussianRandomizer."""
    return GaussianRandomizer(config.get("mean", 0.0), config.get("std", 1.0), rng=rng)


def _distort_factory(config: dict[str, Any], rng: RngLike) -> DistortRandomizer:
    """Factory for DistortRandomizer."""
    return DistortRandomizer(config.get("factor", 0.1), rng=rng)


# =============================================================================
# Initial registrations
# =============================================================================

register_randomizer("range", _range_factory)
register_randomizer("const", _const_factory)
register_randomizer("gaussian", _gaussian_factory)
register_randomizer("distort", _distort_factory)
