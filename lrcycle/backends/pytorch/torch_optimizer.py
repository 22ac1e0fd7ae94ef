"""
PyTorch optimizer adapter.

Exposes a torch.optim.Optimizer through the OptimizerAdapter /
MomentumAdapter protocols so schedules can drive it.
"""

from typing import Any, Dict
import logging

import torch

logger = logging.getLogger(__name__)


class TorchOptimizerAdapter:
    """
    Adapter writing a single learning rate into every param group.

    Momentum maps to betas[0] for Adam-family optimizers and to
    "momentum" for SGD-family ones.
    """

    def __init__(self, optimizer: torch.optim.Optimizer):
        """
        Initialize adapter.

        Args:
            optimizer: PyTorch optimizer to drive

        Raises:
            TypeError: If optimizer is not a torch.optim.Optimizer
        """
        if not isinstance(optimizer, torch.optim.Optimizer):
            raise TypeError(f"{type(optimizer).__name__} is not a torch Optimizer")
        self.optimizer = optimizer

        defaults = optimizer.defaults
        if "betas" in defaults:
            self._momentum_key = "betas"
        elif "momentum" in defaults:
            self._momentum_key = "momentum"
        else:
            self._momentum_key = None

        logger.debug(
            f"Wrapped {type(optimizer).__name__} with {len(optimizer.param_groups)} "
            f"param group(s), momentum_key={self._momentum_key}"
        )

    @property
    def supports_momentum(self) -> bool:
        return self._momentum_key is not None

    def learning_rate(self) -> float:
        return float(self.optimizer.param_groups[0]["lr"])

    def set_learning_rate(self, value: float) -> None:
        for group in self.optimizer.param_groups:
            group["lr"] = value

    def momentum(self) -> float:
        group = self.optimizer.param_groups[0]
        if self._momentum_key == "betas":
            return float(group["betas"][0])
        if self._momentum_key == "momentum":
            return float(group["momentum"])
        raise TypeError(
            f"{type(self.optimizer).__name__} has neither betas nor momentum"
        )

    def set_momentum(self, value: float) -> None:
        if self._momentum_key is None:
            raise TypeError(
                f"{type(self.optimizer).__name__} has neither betas nor momentum"
            )
        for group in self.optimizer.param_groups:
            self._write_momentum(group, value)

    def _write_momentum(self, group: Dict[str, Any], value: float) -> None:
        if self._momentum_key == "betas":
            group["betas"] = (value, *group["betas"][1:])
        else:
            group["momentum"] = value
