"""
Backends Package - optimizer adapters and the schedule factory.

Provides the boundary between schedules and concrete optimizers:
- OptimizerAdapter / MomentumAdapter protocols
- PyTorch adapter (lrcycle.backends.pytorch, imported on demand)
- Registry for building schedules by policy name

Usage:
    from lrcycle.backends import create_schedule
    from lrcycle.backends.pytorch import TorchOptimizerAdapter

    optimizer = TorchOptimizerAdapter(torch.optim.AdamW(model.parameters()))
    schedule = create_schedule("one_cycle", max_lr=1e-2, total_steps=1000)
    for batch in dataloader:
        ...
        optimizer.optimizer.step()
        schedule.step(optimizer)
"""

from .protocol import OptimizerAdapter, MomentumAdapter
from .factory import (
    ScheduleRegistry,
    create_schedule,
    register_schedule,
)

__all__ = [
    # Optimizer boundary
    "OptimizerAdapter",
    "MomentumAdapter",
    # Factory
    "ScheduleRegistry",
    "create_schedule",
    "register_schedule",
]
