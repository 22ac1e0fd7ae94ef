"""
One-cycle learning rate policy.

Based on: https://arxiv.org/abs/1708.07120 (Super-Convergence)

LR ramps from max_lr/div_factor up to max_lr over the first pct_start of
training, then anneals down to max_lr/(div_factor*final_div_factor).
Momentum, when cycled, moves in the opposite direction.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Union

from .annealing import AnnealStrategy, get_anneal_func
from .base import InvalidConfigError, Schedule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Phase:
    """One ramp of the cycle, covering steps (start_step, end_step]."""
    start_step: int
    end_step: int
    start_lr: float
    end_lr: float
    start_momentum: float
    end_momentum: float

    def progress(self, step: int) -> float:
        span = self.end_step - self.start_step
        if span <= 0:
            # Zero-length phase is already complete
            return 1.0
        return min(1.0, max(0.0, (step - self.start_step) / span))


def _is_step_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class OneCycleSchedule(Schedule):
    """
    One-cycle policy with optional three-phase variant and momentum cycling.

    Learning rate schedule (two-phase, default):
    1. Warmup from initial_lr to max_lr over warmup_steps
    2. Anneal from max_lr to final_lr over the remaining steps

    With three_phase=True the second phase mirrors the warmup back down to
    initial_lr, and a third phase decays from initial_lr to final_lr.
    """

    def __init__(
        self,
        max_lr: float,
        total_steps: int,
        div_factor: float = 25.0,
        final_div_factor: float = 1.0,
        pct_start: float = 0.3,
        anneal_strategy: Union[str, AnnealStrategy] = "cos",
        three_phase: bool = False,
        cycle_momentum: bool = False,
        base_momentum: float = 0.85,
        max_momentum: float = 0.95,
    ):
        """
        Initialize one-cycle schedule.

        Args:
            max_lr: Peak learning rate
            total_steps: Full cycle length in steps
            div_factor: initial_lr = max_lr / div_factor (must be > 1)
            final_div_factor: final_lr = initial_lr / final_div_factor; the default
                of 1.0 ends the cycle back at initial_lr
            pct_start: Fraction of total_steps spent warming up, in (0, 1)
            anneal_strategy: "cos" or "linear"
            three_phase: Use the symmetric warmup/cooldown plus final decay variant
            cycle_momentum: Also drive optimizer momentum inversely to LR
            base_momentum: Momentum at peak LR
            max_momentum: Momentum at initial and final LR

        Raises:
            InvalidConfigError: If any hyperparameter is out of range
        """
        if not max_lr > 0:
            raise InvalidConfigError(f"max_lr must be positive, got {max_lr}")
        if not _is_step_count(total_steps):
            raise InvalidConfigError(
                f"total_steps must be a positive integer, got {total_steps!r}"
            )
        if not div_factor > 1:
            raise InvalidConfigError(f"div_factor must be > 1, got {div_factor}")
        if not final_div_factor > 0:
            raise InvalidConfigError(
                f"final_div_factor must be positive, got {final_div_factor}"
            )
        if not 0 < pct_start < 1:
            raise InvalidConfigError(f"pct_start must be in (0, 1), got {pct_start}")
        try:
            strategy = AnnealStrategy(anneal_strategy)
        except ValueError:
            valid = [s.value for s in AnnealStrategy]
            raise InvalidConfigError(
                f"anneal_strategy must be one of {valid}, got {anneal_strategy!r}"
            ) from None
        if cycle_momentum:
            if not 0 <= base_momentum <= max_momentum <= 1:
                raise InvalidConfigError(
                    "momentum bounds must satisfy 0 <= base_momentum <= max_momentum <= 1, "
                    f"got base_momentum={base_momentum}, max_momentum={max_momentum}"
                )

        super().__init__()
        self.max_lr = float(max_lr)
        self.div_factor = float(div_factor)
        self.final_div_factor = float(final_div_factor)
        self.pct_start = float(pct_start)
        self.anneal_strategy = strategy
        self.three_phase = three_phase
        self.cycle_momentum = cycle_momentum
        self.base_momentum = float(base_momentum)
        self.max_momentum = float(max_momentum)

        self._total_steps = total_steps
        self.initial_lr = self.max_lr / self.div_factor
        self.final_lr = self.initial_lr / self.final_div_factor
        # Round half up so e.g. 0.25 * 10 gives 3 warmup steps, not 2
        self.warmup_steps = int(math.floor(self.pct_start * total_steps + 0.5))
        self.anneal_steps = total_steps - self.warmup_steps

        if three_phase and 2 * self.warmup_steps >= total_steps:
            raise InvalidConfigError(
                f"three_phase needs 2 * warmup_steps < total_steps, got "
                f"warmup_steps={self.warmup_steps}, total_steps={total_steps}"
            )

        self._anneal = get_anneal_func(strategy)
        self._phases = self._build_phases()

        logger.info(
            f"OneCycleSchedule: initial_lr={self.initial_lr:.6g}, max_lr={self.max_lr:.6g}, "
            f"final_lr={self.final_lr:.6g}, warmup_steps={self.warmup_steps}, "
            f"total_steps={total_steps}, strategy={strategy.value}, "
            f"three_phase={three_phase}"
        )

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @property
    def phases(self) -> List[Phase]:
        return list(self._phases)

    def _build_phases(self) -> List[Phase]:
        w = self.warmup_steps
        if self.three_phase:
            return [
                Phase(0, w, self.initial_lr, self.max_lr,
                      self.max_momentum, self.base_momentum),
                Phase(w, 2 * w, self.max_lr, self.initial_lr,
                      self.base_momentum, self.max_momentum),
                Phase(2 * w, self._total_steps, self.initial_lr, self.final_lr,
                      self.max_momentum, self.max_momentum),
            ]
        return [
            Phase(0, w, self.initial_lr, self.max_lr,
                  self.max_momentum, self.base_momentum),
            Phase(w, self._total_steps, self.max_lr, self.final_lr,
                  self.base_momentum, self.max_momentum),
        ]

    def _phase_for(self, step: int) -> Phase:
        for phase in self._phases:
            if step <= phase.end_step:
                return phase
        return self._phases[-1]

    def get_lr_at_step(self, step: int) -> float:
        """
        Get learning rate for a given step.

        Args:
            step: Training step (0-indexed); clamped to [0, total_steps]

        Returns:
            Learning rate for this step
        """
        step = self._clamp(step)
        phase = self._phase_for(step)
        return self._anneal(phase.start_lr, phase.end_lr, phase.progress(step))

    def get_momentum_at_step(self, step: int) -> Optional[float]:
        """Momentum for a given step, or None when momentum is not cycled."""
        if not self.cycle_momentum:
            return None
        step = self._clamp(step)
        phase = self._phase_for(step)
        return self._anneal(
            phase.start_momentum, phase.end_momentum, phase.progress(step)
        )

    def get_momentum(self) -> Optional[float]:
        """
        Get momentum for the current step.

        Returns:
            Momentum, or None when cycle_momentum is disabled
        """
        return self.get_momentum_at_step(self.current_step)

    def _after_step(self, optimizer) -> None:
        if not self.cycle_momentum:
            return
        set_momentum = getattr(optimizer, "set_momentum", None)
        if set_momentum is None:
            raise TypeError(
                f"{type(optimizer).__name__} has no set_momentum(); "
                "disable cycle_momentum or use a momentum-capable adapter"
            )
        set_momentum(self.get_momentum())
