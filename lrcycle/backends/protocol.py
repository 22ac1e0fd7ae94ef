"""
Optimizer Protocol - the only view a schedule has of an optimizer.

Schedules read nothing from the optimizer and write only the learning
rate (and, for momentum-cycling policies, the momentum). Parameter
tensors, gradient buffers and optimizer state stay out of reach.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OptimizerAdapter(Protocol):
    """
    Protocol for any optimizer a schedule can drive.

    Any object with these two methods is schedulable.
    """

    def learning_rate(self) -> float:
        """
        Get the learning rate the optimizer will use on its next update.

        Returns:
            Current learning rate
        """
        ...

    def set_learning_rate(self, value: float) -> None:
        """
        Overwrite the learning rate used on the next update.

        Args:
            value: New learning rate
        """
        ...


@runtime_checkable
class MomentumAdapter(OptimizerAdapter, Protocol):
    """Optimizer adapter that also exposes momentum (or Adam beta1)."""

    def momentum(self) -> float:
        ...

    def set_momentum(self, value: float) -> None:
        ...
