"""
lrcycle: learning rate schedules for gradient-based training.

A schedule computes the learning rate for each step and writes it into
any optimizer that exposes learning_rate() / set_learning_rate().
"""

__version__ = "0.1.0"

from lrcycle.core.schedulers import (
    CosineAnnealingSchedule,
    InvalidConfigError,
    OneCycleSchedule,
    Schedule,
)
from lrcycle.core.config import ScheduleConfig, load_schedule_config
from lrcycle.backends import OptimizerAdapter, MomentumAdapter, create_schedule

__all__ = [
    "CosineAnnealingSchedule",
    "InvalidConfigError",
    "OneCycleSchedule",
    "Schedule",
    "ScheduleConfig",
    "load_schedule_config",
    "OptimizerAdapter",
    "MomentumAdapter",
    "create_schedule",
]
