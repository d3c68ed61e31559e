"""Core type definitions for the randomization framework.

This module contains:
- Type aliases for parameter vectors, flat arrays and 2-D grids
- The model classification enum used by model dispatch
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from enum import Enum

import numpy as np

__all__ = [
    "ParamVector",
    "FlatArray",
    "Grid",
    "ModelKind",
]

# Type alias for parameter vectors (model weights flattened)
ParamVector = np.ndarray

# Anything indexable and assignable by position: list[float] or a 1-D array
FlatArray = MutableSequence[float] | np.ndarray

# Rows of equal length: list of lists or a 2-D array
Grid = Sequence[MutableSequence[float]] | np.ndarray


class ModelKind(Enum):
    """Capability a model exposes to ``randomize_model``.

    Attributes:
        LAYERED: Per-layer weight access (see ``LayeredNetwork``).
        ENCODABLE: Flat encode/decode round-trip (see ``EncodableModel``).
        UNSUPPORTED: Neither capability; randomization is a no-op.
    """

    LAYERED = "layered"
    ENCODABLE = "encodable"
    UNSUPPORTED = "unsupported"
