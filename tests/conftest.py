"""
Pytest configuration for lrcycle tests.
"""

import pytest


class RecordingOptimizer:
    """Minimal optimizer adapter that records every write."""

    def __init__(self, lr: float = 1e-4, momentum: float = 0.9):
        self._lr = lr
        self._momentum = momentum
        self.lr_writes = []
        self.momentum_writes = []

    def learning_rate(self) -> float:
        return self._lr

    def set_learning_rate(self, value: float) -> None:
        self._lr = value
        self.lr_writes.append(value)

    def momentum(self) -> float:
        return self._momentum

    def set_momentum(self, value: float) -> None:
        self._momentum = value
        self.momentum_writes.append(value)


class LROnlyOptimizer:
    """Adapter without momentum support."""

    def __init__(self, lr: float = 1e-4):
        self._lr = lr

    def learning_rate(self) -> float:
        return self._lr

    def set_learning_rate(self, value: float) -> None:
        self._lr = value


@pytest.fixture
def optimizer():
    """Recording optimizer adapter."""
    return RecordingOptimizer()


@pytest.fixture
def lr_only_optimizer():
    """Optimizer adapter that only exposes the learning rate."""
    return LROnlyOptimizer()


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Run slow tests"
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests by default unless --run-slow is passed."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)
