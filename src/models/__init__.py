"""Models module.

This package contains reference collaborators for randomizers.

Available models:
- Matrix: numpy-backed MatrixLike
- FeedForwardNetwork: layered weights with bias units (LayeredNetwork and EncodableModel)
- NumpyVectorModel: simple parameter vector (EncodableModel)
- TorchModelAdapter: wraps PyTorch models (EncodableModel, requires torch)
- MLP: PyTorch fully connected network (requires torch)
"""

from __future__ import annotations

from models.feedforward import FeedForwardNetwork
from models.matrix import Matrix
from models.numpy_vector import NumpyVectorModel
from models.torch_adapter import TORCH_AVAILABLE, TorchModelAdapter
from models.torch_nets import MLP

__all__ = [
    "Matrix",
    "FeedForwardNetwork",
    "NumpyVectorModel",
    "TorchModelAdapter",
    "TORCH_AVAILABLE",
    "MLP",
]
