"""PyTorch networks used with TorchModelAdapter.

This module provides:
- MLP: fully connected network built from a list of layer sizes
"""

from __future__ import annotations

from collections.abc import Sequence

try:
    import torch
    import torch.nn as nn

    TORCH_AVAILABLE = True
except ImportError:
    TORCH_AVAILABLE = False

__all__ = ["MLP", "TORCH_AVAILABLE"]


def _check_torch() -> None:
    """Raise ImportError if torch is not available."""
    if not TORCH_AVAILABLE:
        raise ImportError("PyTorch is required for torch models. Install with: pip install torch")


class MLP(nn.Module if TORCH_AVAILABLE else object):  # type: ignore[misc]
    """Fully connected network with ReLU between layers.

    Architecture for layer_sizes [n0, n1, ..., nk]:
    - Linear(n0 -> n1) + ReLU
    - ...
    - Linear(n{k-1} -> nk)

    Attributes:
        layer_sizes: Neuron counts per layer, input first.
    """

    def __init__(self, layer_sizes: Sequence[int]) -> None:
        """Initialize the MLP.

        Args:
            layer_sizes: Neuron counts per layer; at least two layers.

        Raises:
            ValueError: If fewer than two layers are given.
        """
        _check_torch()
        super().__init__()
        if len(layer_sizes) < 2:
            raise ValueError(f"Need at least 2 layers, got {len(layer_sizes)}")
        self.layer_sizes = tuple(int(n) for n in layer_sizes)
        self.linears = nn.ModuleList(
            nn.Linear(a, b) for a, b in zip(self.layer_sizes[:-1], self.layer_sizes[1:])
        )
        self.relu = nn.ReLU()

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        """Forward pass.

        Args:
            x: Input tensor of shape (batch, layer_sizes[0]).

        Returns:
            Output of shape (batch, layer_sizes[-1]).
        """
        for linear in self.linears[:-1]:
            x = self.relu(linear(x))
        return self.linears[-1](x)
