"""
Unit tests for the schedule contract and cosine annealing.
"""

import math

import numpy as np
import pytest

from lrcycle.core.schedulers import (
    CosineAnnealingSchedule,
    InvalidConfigError,
    OneCycleSchedule,
    Schedule,
    annealing_cos,
    annealing_linear,
)
from lrcycle.backends import OptimizerAdapter


def test_annealing_cos_endpoints():
    """Cosine anneal hits both endpoints and the midpoint."""
    assert annealing_cos(1.0, 0.0, 0.0) == pytest.approx(1.0)
    assert annealing_cos(1.0, 0.0, 0.5) == pytest.approx(0.5)
    assert annealing_cos(1.0, 0.0, 1.0) == 0.0


def test_annealing_linear_midpoint():
    """Linear anneal interpolates proportionally."""
    assert annealing_linear(0.0, 2.0, 0.25) == pytest.approx(0.5)
    assert annealing_linear(2.0, 0.0, 1.0) == 0.0


def test_cosine_scenario_sequence():
    """LR sequence over one period of four steps."""
    scheduler = CosineAnnealingSchedule(base_lr=0.1, min_lr=0.0, period_steps=4)

    lrs = [scheduler.get_lr_at_step(s) for s in range(5)]

    assert np.allclose(lrs, [0.1, 0.0854, 0.05, 0.0146, 0.0], atol=1e-4)


def test_cosine_endpoints_and_midpoint():
    """Test base_lr at 0, min_lr at period end, mean halfway."""
    scheduler = CosineAnnealingSchedule(base_lr=1e-3, min_lr=1e-5, period_steps=100)

    assert scheduler.get_lr_at_step(0) == pytest.approx(1e-3)
    assert scheduler.get_lr_at_step(100) == pytest.approx(1e-5)
    assert scheduler.get_lr_at_step(50) == pytest.approx((1e-3 + 1e-5) / 2)


def test_cosine_is_non_increasing_within_period():
    """LR never rises inside a period."""
    scheduler = CosineAnnealingSchedule(base_lr=0.5, min_lr=0.01, period_steps=37)

    lrs = np.array([scheduler.get_lr_at_step(s) for s in range(38)])

    assert np.all(np.diff(lrs) <= 1e-15)


def test_cosine_step_writes_lr(optimizer):
    """Test that step() advances the counter and writes the LR once."""
    scheduler = CosineAnnealingSchedule(base_lr=0.1, min_lr=0.0, period_steps=4)

    lr = scheduler.step(optimizer)

    assert scheduler.current_step == 1
    assert lr == pytest.approx(0.0854, abs=1e-4)
    assert optimizer.lr_writes == [lr]
    assert optimizer.learning_rate() == lr


def test_cosine_saturates_without_restarts(optimizer):
    """Stepping past the period holds min_lr."""
    scheduler = CosineAnnealingSchedule(base_lr=0.1, min_lr=0.001, period_steps=4)

    for _ in range(10):
        scheduler.step(optimizer)

    assert scheduler.current_step == 4
    assert scheduler.get_lr() == pytest.approx(0.001)
    assert optimizer.lr_writes[-6:] == [scheduler.get_lr()] * 6
    assert scheduler.get_lr_at_step(1000) == pytest.approx(0.001)


def test_cosine_restarts_rewarm_at_period_boundary(optimizer):
    """With restarts the LR jumps back to base_lr every period."""
    scheduler = CosineAnnealingSchedule(
        base_lr=0.1, min_lr=0.0, period_steps=4, restarts=True
    )

    lrs = [scheduler.step(optimizer) for _ in range(9)]

    assert scheduler.total_steps is None
    assert scheduler.current_step == 9
    assert scheduler.cycle_index == 2
    assert lrs[3] == pytest.approx(0.1)  # step 4
    assert lrs[4] == pytest.approx(lrs[0])
    assert lrs[7] == pytest.approx(0.1)  # step 8


@pytest.mark.parametrize(
    "kwargs",
    [
        {"base_lr": 0.1, "min_lr": 0.0, "period_steps": 0},
        {"base_lr": 0.1, "min_lr": 0.0, "period_steps": -3},
        {"base_lr": 0.1, "min_lr": 0.0, "period_steps": 2.5},
        {"base_lr": 0.0, "min_lr": 0.0, "period_steps": 10},
        {"base_lr": 0.1, "min_lr": -0.1, "period_steps": 10},
        {"base_lr": 0.1, "min_lr": 0.1, "period_steps": 10},
    ],
)
def test_cosine_rejects_invalid_config(kwargs):
    """Bad hyperparameters fail at construction."""
    with pytest.raises(InvalidConfigError):
        CosineAnnealingSchedule(**kwargs)


def test_invalid_config_is_value_error():
    """Callers catching ValueError still see config errors."""
    with pytest.raises(ValueError):
        CosineAnnealingSchedule(base_lr=0.1, min_lr=0.0, period_steps=0)


@pytest.mark.parametrize(
    "scheduler",
    [
        OneCycleSchedule(max_lr=1e-2, total_steps=10),
        CosineAnnealingSchedule(base_lr=0.1, min_lr=0.0, period_steps=10),
    ],
)
def test_get_lr_is_idempotent(scheduler, optimizer):
    """Repeated get_lr() without step() returns the same value."""
    scheduler.step(optimizer)

    first = scheduler.get_lr()

    assert all(scheduler.get_lr() == first for _ in range(5))
    assert scheduler.current_step == 1


def test_schedules_share_contract(optimizer):
    """Training loop code can hold either policy through Schedule."""
    schedules = [
        OneCycleSchedule(max_lr=1e-2, total_steps=20),
        CosineAnnealingSchedule(base_lr=1e-2, min_lr=0.0, period_steps=20),
    ]

    for schedule in schedules:
        assert isinstance(schedule, Schedule)
        for _ in range(25):
            lr = schedule.step(optimizer)
            assert math.isfinite(lr)
        assert schedule.current_step == 20


def test_recording_optimizer_satisfies_protocol(optimizer, lr_only_optimizer):
    """Duck-typed adapters satisfy the optimizer protocol."""
    assert isinstance(optimizer, OptimizerAdapter)
    assert isinstance(lr_only_optimizer, OptimizerAdapter)


def test_independent_instances_do_not_share_state(optimizer):
    """Each schedule owns its counter."""
    a = CosineAnnealingSchedule(base_lr=0.1, min_lr=0.0, period_steps=4)
    b = CosineAnnealingSchedule(base_lr=0.1, min_lr=0.0, period_steps=4)

    a.step(optimizer)
    a.step(optimizer)

    assert a.current_step == 2
    assert b.current_step == 0
    assert b.get_lr() == pytest.approx(0.1)
