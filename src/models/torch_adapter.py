"""Adapter exposing PyTorch modules as encodable models.

TorchModelAdapter flattens every parameter of a torch.nn.Module into one
vector, so any randomizer can reinitialize a torch model through the
encode/randomize/decode path.
"""

from __future__ import annotations

import numpy as np

from core.types import ParamVector

try:
    import torch
    import torch.nn as nn

    TORCH_AVAILABLE = True
except ImportError:
    TORCH_AVAILABLE = False

__all__ = ["TorchModelAdapter", "TORCH_AVAILABLE"]


def _check_torch() -> None:
    """Raise ImportError if torch is not available."""
    if not TORCH_AVAILABLE:
        raise ImportError("PyTorch is required for TorchModelAdapter. Install with: pip install torch")


class TorchModelAdapter:
    """Adapter wrapping a PyTorch model as an EncodableModel.

    The parameter order is stable: module.parameters() is iterated once at
    construction and shapes/slices are cached for consistent
    flattening/unflattening.

    Attributes:
        module: The wrapped PyTorch module.
        device: Device where the model lives.
    """

    def __init__(self, module: nn.Module, device: str = "cpu") -> None:
        """Initialize the adapter.

        Args:
            module: PyTorch model to wrap.
            device: Device to use ("cpu" or "cuda").
        """
        _check_torch()
        self.module = module.to(device)
        self.device = device

        self._param_shapes: list[tuple[int, ...]] = []
        self._param_slices: list[tuple[int, int]] = []

        offset = 0
        for param in self.module.parameters():
            numel = param.numel()
            self._param_shapes.append(tuple(param.shape))
            self._param_slices.append((offset, offset + numel))
            offset += numel

        self._total_params = offset

    @property
    def dim(self) -> int:
        """Total number of parameters."""
        return self._total_params

    def encoded_array_length(self) -> int:
        return self._total_params

    def encode_to_array(self, encoded: ParamVector) -> None:
        """Write all parameters into ``encoded`` as float64.

        Raises:
            ValueError: If encoded has the wrong length.
        """
        if len(encoded) != self._total_params:
            raise ValueError(f"Expected buffer of length {self._total_params}, got {len(encoded)}")
        for param, (start, end) in zip(self.module.parameters(), self._param_slices):
            encoded[start:end] = param.detach().cpu().numpy().ravel().astype(np.float64)

    def decode_from_array(self, encoded: ParamVector) -> None:
        """Load all parameters from ``encoded``.

        Values are cast to each parameter's dtype.

        Raises:
            ValueError: If encoded has the wrong length.
        """
        if len(encoded) != self._total_params:
            raise ValueError(f"Expected buffer of length {self._total_params}, got {len(encoded)}")
        flat = np.asarray(encoded, dtype=np.float64)
        with torch.no_grad():
            for param, (start, end), shape in zip(
                self.module.parameters(), self._param_slices, self._param_shapes
            ):
                values = torch.from_numpy(flat[start:end].reshape(shape).copy())
                param.copy_(values.to(device=self.device, dtype=param.dtype))

    def parameters_vector(self) -> ParamVector:
        """Return all parameters as a flat float64 array."""
        encoded = np.zeros(self._total_params, dtype=np.float64)
        self.encode_to_array(encoded)
        return encoded
