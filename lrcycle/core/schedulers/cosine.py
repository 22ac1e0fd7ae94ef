"""
Cosine annealing learning rate schedule, optionally with warm restarts.

Based on: https://arxiv.org/abs/1608.03983 (SGDR)
"""

import logging
import math
from typing import Optional

from .base import InvalidConfigError, Schedule

logger = logging.getLogger(__name__)


class CosineAnnealingSchedule(Schedule):
    """
    Cosine decay from base_lr to min_lr over period_steps.

    Learning rate schedule:
        lr(s) = min_lr + (base_lr - min_lr) * (1 + cos(pi * (s mod P) / P)) / 2

    Without restarts the schedule is bounded: the step counter saturates at
    period_steps and the LR holds at min_lr. With restarts the counter is
    unbounded and the LR jumps back to base_lr at every period boundary.
    """

    def __init__(
        self,
        base_lr: float,
        min_lr: float,
        period_steps: int,
        restarts: bool = False,
    ):
        """
        Initialize cosine annealing schedule.

        Args:
            base_lr: Learning rate at step 0
            min_lr: Floor reached at the end of each period
            period_steps: Steps per half-cosine cycle
            restarts: Re-warm to base_lr every period_steps

        Raises:
            InvalidConfigError: If any hyperparameter is out of range
        """
        if not base_lr > 0:
            raise InvalidConfigError(f"base_lr must be positive, got {base_lr}")
        if not 0 <= min_lr < base_lr:
            raise InvalidConfigError(
                f"min_lr must be in [0, base_lr), got min_lr={min_lr}, base_lr={base_lr}"
            )
        if isinstance(period_steps, bool) or not isinstance(period_steps, int) or period_steps <= 0:
            raise InvalidConfigError(
                f"period_steps must be a positive integer, got {period_steps!r}"
            )

        super().__init__()
        self.base_lr = float(base_lr)
        self.min_lr = float(min_lr)
        self.period_steps = period_steps
        self.restarts = restarts

        logger.info(
            f"CosineAnnealingSchedule: base_lr={self.base_lr:.6g}, "
            f"min_lr={self.min_lr:.6g}, period_steps={period_steps}, restarts={restarts}"
        )

    @property
    def total_steps(self) -> Optional[int]:
        if self.restarts:
            return None
        return self.period_steps

    @property
    def cycle_index(self) -> int:
        """Number of completed periods (always 0 or 1 without restarts)."""
        return self.current_step // self.period_steps

    def get_lr_at_step(self, step: int) -> float:
        """
        Get learning rate for a given step.

        Args:
            step: Training step (0-indexed)

        Returns:
            Learning rate for this step
        """
        step = self._clamp(step)
        if self.restarts:
            step = step % self.period_steps
        cosine = math.cos(math.pi * step / self.period_steps)
        return self.min_lr + 0.5 * (self.base_lr - self.min_lr) * (1 + cosine)
