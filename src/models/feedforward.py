"""Fully connected feed-forward network weights.

This module provides FeedForwardNetwork, which stores one weight matrix per
pair of consecutive layers. It satisfies both the LayeredNetwork and the
EncodableModel protocols; randomizers prefer the layered path.

Weight layout:
    weights[l] has shape (layer_total_neuron_count(l), layer_neuron_count(l + 1))

When bias is enabled every layer except the output carries one bias unit,
stored as the last row of its outgoing weight matrix.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from core.errors import OutOfRangeError
from core.types import ParamVector

__all__ = ["FeedForwardNetwork"]


class FeedForwardNetwork:
    """Weights of a fully connected layered network.

    Attributes:
        layer_sizes: Neuron counts per layer, input first, excluding bias units.
        bias: Whether non-output layers carry a bias unit.

    Example:
        >>> net = FeedForwardNetwork([3, 4, 2])
        >>> net.layer_total_neuron_count(0), net.layer_neuron_count(1)
        (4, 4)
        >>> net.encoded_array_length()
        26
    """

    def __init__(self, layer_sizes: Sequence[int], *, bias: bool = True) -> None:
        """Initialize a network with all weights set to zero.

        Args:
            layer_sizes: Neuron counts per layer; at least two layers.
            bias: Add a bias unit to every non-output layer.

        Raises:
            ValueError: If fewer than two layers are given or any size is not positive.
        """
        sizes = [int(n) for n in layer_sizes]
        if len(sizes) < 2:
            raise ValueError(f"Need at least 2 layers, got {len(sizes)}")
        if any(n <= 0 for n in sizes):
            raise ValueError(f"Layer sizes must be positive, got {sizes}")
        self.layer_sizes: tuple[int, ...] = tuple(sizes)
        self.bias = bias
        self._weights: list[np.ndarray] = [
            np.zeros(
                (self.layer_total_neuron_count(layer), self.layer_neuron_count(layer + 1)),
                dtype=np.float64,
            )
            for layer in range(len(sizes) - 1)
        ]

    @property
    def layer_count(self) -> int:
        return len(self.layer_sizes)

    def _check_layer(self, layer: int) -> None:
        if not 0 <= layer < self.layer_count:
            raise OutOfRangeError(f"layer {layer} out of range [0, {self.layer_count})")

    def has_bias(self, layer: int) -> bool:
        """True if ``layer`` carries a bias unit."""
        self._check_layer(layer)
        return self.bias and layer < self.layer_count - 1

    def layer_neuron_count(self, layer: int) -> int:
        self._check_layer(layer)
        return self.layer_sizes[layer]

    def layer_total_neuron_count(self, layer: int) -> int:
        return self.layer_neuron_count(layer) + (1 if self.has_bias(layer) else 0)

    def _check_weight(self, from_layer: int, from_neuron: int, to_neuron: int) -> None:
        if not 0 <= from_layer < self.layer_count - 1:
            raise OutOfRangeError(
                f"from_layer {from_layer} out of range [0, {self.layer_count - 1})"
            )
        rows, cols = self._weights[from_layer].shape
        if not (0 <= from_neuron < rows and 0 <= to_neuron < cols):
            raise OutOfRangeError(
                f"weight ({from_neuron}, {to_neuron}) out of bounds for layer "
                f"{from_layer} matrix of shape {rows}x{cols}"
            )

    def get_weight(self, from_layer: int, from_neuron: int, to_neuron: int) -> float:
        self._check_weight(from_layer, from_neuron, to_neuron)
        return float(self._weights[from_layer][from_neuron, to_neuron])

    def set_weight(
        self, from_layer: int, from_neuron: int, to_neuron: int, value: float
    ) -> None:
        self._check_weight(from_layer, from_neuron, to_neuron)
        self._weights[from_layer][from_neuron, to_neuron] = value

    def weight_matrix(self, from_layer: int) -> np.ndarray:
        """Return a copy of the weights leaving ``from_layer``."""
        self._check_weight(from_layer, 0, 0)
        return self._weights[from_layer].copy()

    def encoded_array_length(self) -> int:
        return sum(w.size for w in self._weights)

    def encode_to_array(self, encoded: ParamVector) -> None:
        """Write all weights, layer by layer in row-major order, into ``encoded``.

        Raises:
            ValueError: If encoded has the wrong length.
        """
        if len(encoded) != self.encoded_array_length():
            raise ValueError(
                f"Expected buffer of length {self.encoded_array_length()}, got {len(encoded)}"
            )
        offset = 0
        for w in self._weights:
            encoded[offset : offset + w.size] = w.ravel()
            offset += w.size

    def decode_from_array(self, encoded: ParamVector) -> None:
        """Load all weights from ``encoded`` (same layout as ``encode_to_array``).

        Raises:
            ValueError: If encoded has the wrong length.
        """
        if len(encoded) != self.encoded_array_length():
            raise ValueError(
                f"Expected buffer of length {self.encoded_array_length()}, got {len(encoded)}"
            )
        flat = np.asarray(encoded, dtype=np.float64)
        offset = 0
        for i, w in enumerate(self._weights):
            self._weights[i] = flat[offset : offset + w.size].reshape(w.shape).copy()
            offset += w.size

    def parameters_vector(self) -> ParamVector:
        """Return all weights as a flat vector."""
        encoded = np.zeros(self.encoded_array_length(), dtype=np.float64)
        self.encode_to_array(encoded)
        return encoded
