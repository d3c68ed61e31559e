"""Base randomizer.

This module provides BasicRandomizer, which derives every container traversal
from a single abstract scalar rule:
- randomize_array: flat arrays and sub-ranges
- randomize_grid: rectangular 2-D grids (lists of rows or 2-D arrays)
- randomize_matrix: objects satisfying MatrixLike
- randomize_model: layered networks and encodable models
- randomize_layer: one inter-layer weight matrix of a layered network

All traversals mutate in place and visit each element exactly once. Bounds
violations raise OutOfRangeError immediately; elements already visited keep
their new values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np

from core.errors import OutOfRangeError
from core.logging import get_logger
from core.protocols import EncodableModel, LayeredNetwork, MatrixLike
from core.rng import RngLike, make_rng
from core.types import FlatArray, Grid, ModelKind

__all__ = ["BasicRandomizer", "classify_model"]

logger = get_logger(__name__)


def _check_float_array(d: Any) -> None:
    """Raise TypeError for numpy arrays that would truncate written values."""
    if isinstance(d, np.ndarray) and not np.issubdtype(d.dtype, np.floating):
        raise TypeError(f"numpy arrays must have a floating dtype, got {d.dtype}")


def classify_model(model: Any) -> ModelKind:
    """Determine which randomization path applies to a model.

    A model exposing both capabilities is treated as layered.

    Args:
        model: Any object.

    Returns:
        The ModelKind for ``model``.
    """
    if isinstance(model, LayeredNetwork):
        return ModelKind.LAYERED
    if isinstance(model, EncodableModel):
        return ModelKind.ENCODABLE
    return ModelKind.UNSUPPORTED


class BasicRandomizer(ABC):
    """Functionality shared by all randomizers.

    Subclasses implement ``randomize_scalar``; everything else is derived
    from it. The randomizer owns one generator, used both by subclasses and
    by ``next_double``. It is not safe to share one instance between threads.

    Attributes:
        rng: The owned generator. May be replaced to change seeding.

    Example:
        >>> class Halve(BasicRandomizer):
        ...     def randomize_scalar(self, value: float) -> float:
        ...         return value / 2
        >>> d = [2.0, 4.0]
        >>> Halve(rng=0).randomize_array(d)
        >>> d
        [1.0, 2.0]
    """

    def __init__(self, rng: RngLike = None) -> None:
        """Initialize the randomizer.

        Args:
            rng: Generator to own, an integer seed, or None for a
                time-based seed.
        """
        self.rng: np.random.Generator = make_rng(rng)

    def reseed(self, seed: int) -> None:
        """Replace the owned generator with one seeded by ``seed``."""
        self.rng = make_rng(seed)

    @abstractmethod
    def randomize_scalar(self, value: float) -> float:
        """Produce a new value from an old one.

        Previous values may be used or discarded depending on the strategy.

        Args:
            value: The current value.

        Returns:
            The randomized value.
        """

    def randomize_array(self, d: FlatArray, begin: int = 0, size: int | None = None) -> None:
        """Randomize a flat array, or ``size`` elements of it starting at ``begin``.

        Args:
            d: Array to modify in place.
            begin: First index to randomize.
            size: Number of elements; defaults to the rest of the array.

        Raises:
            OutOfRangeError: If the range does not fit inside ``d``.
            TypeError: If ``d`` is a numpy array with a non-floating dtype.
        """
        _check_float_array(d)
        length = len(d)
        if size is None:
            size = length - begin
        if begin < 0 or size < 0 or begin + size > length:
            raise OutOfRangeError(
                f"range [{begin}, {begin + size}) out of bounds for length {length}"
            )
        for i in range(begin, begin + size):
            d[i] = self.randomize_scalar(float(d[i]))

    def randomize_grid(self, d: Grid) -> None:
        """Randomize a rectangular 2-D grid.

        The column count is taken from row 0.

        Args:
            d: Sequence of mutable rows, or a 2-D array.

        Raises:
            OutOfRangeError: If a row's length differs from row 0. Rows
                before it have already been randomized.
            TypeError: If ``d`` is a numpy array with a non-floating dtype.
        """
        _check_float_array(d)
        if len(d) == 0:
            return
        cols = len(d[0])
        for r, row in enumerate(d):
            if len(row) != cols:
                raise OutOfRangeError(
                    f"row {r} has {len(row)} columns, expected {cols} from row 0"
                )
            for c in range(cols):
                row[c] = self.randomize_scalar(float(row[c]))

    def randomize_matrix(self, m: MatrixLike) -> None:
        """Randomize every cell of a matrix over its declared extent.

        Args:
            m: Matrix to modify in place.
        """
        for r in range(m.rows):
            for c in range(m.cols):
                m.set(r, c, self.randomize_scalar(m.get(r, c)))

    def randomize_model(self, model: Any) -> None:
        """Randomize all weights of a model.

        Layered networks are randomized one inter-layer weight matrix at a
        time. Encodable models go through a full encode, randomize, decode
        round-trip. Anything else is left untouched.

        Args:
            model: Model to modify in place.
        """
        kind = classify_model(model)
        if kind is ModelKind.LAYERED:
            logger.debug(
                "Randomizing layered model %s (%d layers)",
                type(model).__name__,
                model.layer_count,
            )
            for layer in range(model.layer_count - 1):
                self.randomize_layer(model, layer)
        elif kind is ModelKind.ENCODABLE:
            encoded = np.zeros(model.encoded_array_length(), dtype=np.float64)
            logger.debug(
                "Randomizing encodable model %s (%d values)",
                type(model).__name__,
                encoded.shape[0],
            )
            model.encode_to_array(encoded)
            self.randomize_array(encoded)
            model.decode_from_array(encoded)
        else:
            logger.debug("Model %s is not randomizable, skipping", type(model).__name__)

    def randomize_layer(self, network: LayeredNetwork, from_layer: int) -> None:
        """Randomize the weights leaving one layer.

        Covers every neuron of ``from_layer`` (bias unit included) to every
        neuron of the next layer. Each weight is read, randomized and written
        back before the next one is read.

        Args:
            network: Network to modify in place.
            from_layer: Source layer, in ``[0, layer_count - 1)``.

        Raises:
            OutOfRangeError: If ``from_layer`` has no outgoing weights.
        """
        if not 0 <= from_layer < network.layer_count - 1:
            raise OutOfRangeError(
                f"from_layer {from_layer} has no outgoing weights "
                f"(layer_count={network.layer_count})"
            )
        from_count = network.layer_total_neuron_count(from_layer)
        to_count = network.layer_neuron_count(from_layer + 1)

        for from_neuron in range(from_count):
            for to_neuron in range(to_count):
                v = network.get_weight(from_layer, from_neuron, to_neuron)
                v = self.randomize_scalar(v)
                network.set_weight(from_layer, from_neuron, to_neuron, v)

    def next_double(self, low: float | None = None, high: float | None = None) -> float:
        """Draw a uniform sample from the owned generator.

        With no arguments the sample lies in ``[0, 1)``; otherwise in
        ``[low, high)``.

        Args:
            low: Lower bound (inclusive).
            high: Upper bound (exclusive).

        Returns:
            The sample.

        Raises:
            ValueError: If only one bound is given, or ``high < low``.
        """
        if low is None and high is None:
            return float(self.rng.random())
        if low is None or high is None:
            raise ValueError("next_double needs both low and high, or neither")
        if high < low:
            raise ValueError(f"high must be >= low, got low={low}, high={high}")
        return low + (high - low) * float(self.rng.random())
