"""
Base schedule interface.

All learning rate policies inherit from Schedule, so a training loop can
hold any of them and swap policies without changing its code.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional
import logging

if TYPE_CHECKING:
    from ...backends.protocol import OptimizerAdapter

logger = logging.getLogger(__name__)


class InvalidConfigError(ValueError):
    """Raised at construction when a schedule hyperparameter is out of range."""


class Schedule(ABC):
    """
    Abstract base class for learning rate schedules.

    Subclasses implement:
    - get_lr_at_step(): LR as a pure function of the step index
    - total_steps: Terminal step for bounded policies (None if unbounded)

    The base class owns the step counter and the stepping protocol:
    step() advances the counter (saturating at total_steps), computes the
    new LR and writes it into the optimizer exactly once.

    Usage:
        schedule = OneCycleSchedule(max_lr=1e-2, total_steps=1000)
        for batch in dataloader:
            optimizer.step()
            schedule.step(optimizer)
    """

    def __init__(self):
        self._current_step = 0

    @property
    def current_step(self) -> int:
        """Number of step() calls applied so far (clamped for bounded policies)."""
        return self._current_step

    @property
    @abstractmethod
    def total_steps(self) -> Optional[int]:
        """
        Terminal step of the schedule.

        Returns:
            Positive step count, or None for unbounded policies
        """
        pass

    @abstractmethod
    def get_lr_at_step(self, step: int) -> float:
        """
        Compute learning rate for a given step.

        Args:
            step: Step index (0-indexed, clamped into the valid range)

        Returns:
            Learning rate for this step
        """
        pass

    def get_lr(self) -> float:
        """Learning rate for the current step, without advancing."""
        return self.get_lr_at_step(self._current_step)

    def step(self, optimizer: "OptimizerAdapter") -> float:
        """
        Advance one step and write the new learning rate into the optimizer.

        Args:
            optimizer: Anything exposing set_learning_rate()

        Returns:
            The learning rate that was applied
        """
        self._advance()
        lr = self.get_lr()
        optimizer.set_learning_rate(lr)
        self._after_step(optimizer)
        return lr

    def _advance(self) -> None:
        total = self.total_steps
        if total is not None and self._current_step >= total:
            return
        self._current_step += 1
        if total is not None and self._current_step == total:
            logger.debug(
                f"{type(self).__name__} reached terminal step {total}; "
                f"holding lr={self.get_lr():.6g}"
            )

    def _after_step(self, optimizer: "OptimizerAdapter") -> None:
        """Hook for policies that drive extra optimizer state."""

    def _clamp(self, step: int) -> int:
        total = self.total_steps
        step = max(0, int(step))
        if total is not None:
            step = min(step, total)
        return step

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current_step={self._current_step}, "
            f"total_steps={self.total_steps}, lr={self.get_lr():.6g})"
        )
