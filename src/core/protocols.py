"""Protocol definitions for the randomization framework.

This module contains Protocol classes defining the capabilities a randomizer
consumes:
- MatrixLike: row/column extent with mutable cell access
- LayeredNetwork: per-layer weights addressable by (layer, from, to)
- EncodableModel: fixed-length flatten/restore of all parameters
- Randomizer: the public randomization surface itself

Models are dispatched by capability, not by class, so any object with the
right methods participates.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.types import FlatArray, Grid, ParamVector

__all__ = [
    "MatrixLike",
    "LayeredNetwork",
    "EncodableModel",
    "Randomizer",
]


@runtime_checkable
class MatrixLike(Protocol):
    """Protocol for matrices with mutable cells.

    Contract:
    - ``rows`` and ``cols`` give the full declared extent
    - ``get``/``set`` accept any ``0 <= r < rows``, ``0 <= c < cols``
    """

    @property
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def cols(self) -> int:
        """Number of columns."""
        ...

    def get(self, row: int, col: int) -> float:
        """Return the value at (row, col)."""
        ...

    def set(self, row: int, col: int, value: float) -> None:
        """Store value at (row, col)."""
        ...


@runtime_checkable
class LayeredNetwork(Protocol):
    """Protocol for fully-connected layered networks.

    Layer ``l`` connects to layer ``l + 1`` through a weight matrix of
    ``layer_total_neuron_count(l)`` rows by ``layer_neuron_count(l + 1)``
    columns. The output layer has no outgoing weights.

    Contract:
    - ``layer_total_neuron_count(l)`` includes the bias unit if layer ``l``
      has one; ``layer_neuron_count(l)`` never does
    - weight storage is sized with the same counts
    """

    @property
    def layer_count(self) -> int:
        """Number of layers, input and output included."""
        ...

    def layer_total_neuron_count(self, layer: int) -> int:
        """Neurons in a layer, counting its bias unit."""
        ...

    def layer_neuron_count(self, layer: int) -> int:
        """Neurons in a layer, excluding any bias unit."""
        ...

    def get_weight(self, from_layer: int, from_neuron: int, to_neuron: int) -> float:
        """Weight from ``from_neuron`` of ``from_layer`` to ``to_neuron`` of the next layer."""
        ...

    def set_weight(
        self, from_layer: int, from_neuron: int, to_neuron: int, value: float
    ) -> None:
        """Set a single weight (same addressing as ``get_weight``)."""
        ...


@runtime_checkable
class EncodableModel(Protocol):
    """Protocol for models that round-trip through a flat vector.

    ``decode_from_array(encode_to_array(buf))`` must restore the model
    exactly; the encoded length never changes over a model's lifetime.
    """

    def encoded_array_length(self) -> int:
        """Length of the flat encoding."""
        ...

    def encode_to_array(self, encoded: ParamVector) -> None:
        """Write all parameters into ``encoded`` (length ``encoded_array_length()``)."""
        ...

    def decode_from_array(self, encoded: ParamVector) -> None:
        """Load all parameters from ``encoded``."""
        ...


@runtime_checkable
class Randomizer(Protocol):
    """Protocol for weight randomizers.

    Concrete strategies usually subclass ``randomize.basic.BasicRandomizer``
    and supply only ``randomize_scalar``.
    """

    def randomize_scalar(self, value: float) -> float:
        """Map one old value to a new one."""
        ...

    def randomize_array(self, d: FlatArray, begin: int = 0, size: int | None = None) -> None:
        """Randomize ``d[begin:begin + size]`` in place."""
        ...

    def randomize_grid(self, d: Grid) -> None:
        """Randomize every cell of a rectangular 2-D grid in place."""
        ...

    def randomize_matrix(self, m: MatrixLike) -> None:
        """Randomize every cell of a matrix in place."""
        ...

    def randomize_model(self, model: Any) -> None:
        """Randomize all weights of a model, if it exposes a supported capability."""
        ...
