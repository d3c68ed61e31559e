"""Simple numpy vector model.

This module provides a minimal model that stores parameters as a 1D numpy
array. It is the smallest object satisfying the EncodableModel protocol, so
randomizers reach it through the encode/randomize/decode path.
"""

from __future__ import annotations

import numpy as np

from core.types import ParamVector

__all__ = ["NumpyVectorModel"]


class NumpyVectorModel:
    """A model whose parameters are a single 1D numpy vector.

    Attributes:
        _x: Internal parameter vector (1D float64 array).

    Example:
        >>> model = NumpyVectorModel(np.zeros(3))
        >>> model.encoded_array_length()
        3
        >>> model.decode_from_array(np.ones(3))
        >>> model.parameters_vector()
        array([1., 1., 1.])
    """

    def __init__(self, x: ParamVector) -> None:
        """Initialize the model with a parameter vector.

        Args:
            x: Initial parameter vector (1D array).

        Raises:
            ValueError: If x is not 1-dimensional.
        """
        x = np.asarray(x)
        if x.ndim != 1:
            raise ValueError(f"x must be 1-dimensional, got ndim={x.ndim}")
        self._x: ParamVector = np.array(x, dtype=np.float64, copy=True)

    @property
    def dim(self) -> int:
        """Dimensionality of the parameter vector."""
        return int(self._x.shape[0])

    def parameters_vector(self) -> ParamVector:
        """Return a copy of the parameter vector."""
        return self._x.copy()

    def set_parameters_vector(self, v: ParamVector) -> None:
        """Set parameters from a vector.

        Args:
            v: New parameter vector (must match current dimensionality).

        Raises:
            ValueError: If v has wrong shape.
        """
        v = np.asarray(v)
        if v.shape != self._x.shape:
            raise ValueError(f"Shape mismatch: expected {self._x.shape}, got {v.shape}")
        self._x = np.array(v, dtype=np.float64, copy=True)

    def encoded_array_length(self) -> int:
        return self.dim

    def encode_to_array(self, encoded: ParamVector) -> None:
        """Copy the parameters into ``encoded``.

        Raises:
            ValueError: If encoded has the wrong length.
        """
        if len(encoded) != self.dim:
            raise ValueError(f"Expected buffer of length {self.dim}, got {len(encoded)}")
        encoded[:] = self._x

    def decode_from_array(self, encoded: ParamVector) -> None:
        self.set_parameters_vector(encoded)
