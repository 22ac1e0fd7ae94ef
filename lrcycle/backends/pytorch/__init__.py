"""
PyTorch backend - adapter for torch.optim optimizers.
"""

from .torch_optimizer import TorchOptimizerAdapter

__all__ = ["TorchOptimizerAdapter"]
