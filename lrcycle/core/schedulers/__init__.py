"""
Learning rate schedules.

Implements:
- One-cycle policy (warmup, anneal, optional three-phase decay)
- Cosine annealing, optionally with warm restarts
"""

from .annealing import AnnealStrategy, annealing_cos, annealing_linear
from .base import InvalidConfigError, Schedule
from .cosine import CosineAnnealingSchedule
from .one_cycle import OneCycleSchedule, Phase

__all__ = [
    "AnnealStrategy",
    "annealing_cos",
    "annealing_linear",
    "InvalidConfigError",
    "Schedule",
    "CosineAnnealingSchedule",
    "OneCycleSchedule",
    "Phase",
]
