"""Weight randomization module.

This package contains randomizer implementations including:
- BasicRandomizer base class (arrays, grids, matrices, models)
- Range, constant, Gaussian and distortion strategies
- Name-based registry and JSON config loading
"""

from __future__ import annotations

from randomize.basic import BasicRandomizer, classify_model
from randomize.config import RandomizerConfig, build_randomizer, load_randomizer_config
from randomize.gaussian import DistortRandomizer, GaussianRandomizer
from randomize.registry import get_randomizer, register_randomizer
from randomize.uniform import ConstRandomizer, RangeRandomizer

__all__ = [
    # Base
    "BasicRandomizer",
    "classify_model",
    # Strategies
    "RangeRandomizer",
    "ConstRandomizer",
    "GaussianRandomizer",
    "DistortRandomizer",
    # Registry
    "register_randomizer",
    "get_randomizer",
    # Config
    "RandomizerConfig",
    "build_randomizer",
    "load_randomizer_config",
]
