"""
Interpolation curves shared by the schedules.

Both map pct in [0, 1] onto [start, end].
"""

import math
from enum import Enum
from typing import Callable


class AnnealStrategy(Enum):
    """Shape of the ramp between two learning rates."""
    COS = "cos"  # Half-cosine, zero slope at both ends
    LINEAR = "linear"


def annealing_cos(start: float, end: float, pct: float) -> float:
    """Cosine anneal from start to end as pct goes from 0.0 to 1.0."""
    cos_out = math.cos(math.pi * pct) + 1.0
    return end + (start - end) / 2.0 * cos_out


def annealing_linear(start: float, end: float, pct: float) -> float:
    """Linear anneal from start to end as pct goes from 0.0 to 1.0."""
    return start + (end - start) * pct


def get_anneal_func(strategy: AnnealStrategy) -> Callable[[float, float, float], float]:
    """
    Look up the interpolation function for a strategy.

    Args:
        strategy: Ramp shape

    Returns:
        Function of (start, end, pct)
    """
    if strategy is AnnealStrategy.COS:
        return annealing_cos
    return annealing_linear
