"""
Schedule configuration.

A schedule is described by a policy name plus the keyword arguments of
that policy's constructor, typically read from a YAML file:

    policy: one_cycle
    max_lr: 0.01
    total_steps: 1000
    pct_start: 0.25
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union
import logging

import yaml

from ..schedulers.base import InvalidConfigError

logger = logging.getLogger(__name__)


@dataclass
class ScheduleConfig:
    """Policy name and constructor parameters for a schedule."""

    policy: str
    params: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        """
        Validate that the policy is known.

        Parameter ranges are checked by the schedule constructor itself.

        Raises:
            ValueError: If the policy is not registered
        """
        # Import here to avoid circular dependency
        from ...backends.factory import ScheduleRegistry

        if not ScheduleRegistry.is_registered(self.policy):
            available = ScheduleRegistry.list_schedules()
            raise ValueError(
                f"Unknown schedule policy: {self.policy}. "
                f"Registered policies: {available}"
            )


def load_schedule_config(config_path: Union[str, Path]) -> ScheduleConfig:
    """
    Load schedule configuration from YAML file.

    Parameters may sit at the top level next to `policy`, or under a
    nested `params` mapping.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ScheduleConfig

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidConfigError: If the file has no policy or malformed params
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict) or "policy" not in data:
        raise InvalidConfigError(f"Schedule config {config_path} must define 'policy'")

    data = dict(data)
    policy = str(data.pop("policy"))
    params = data.pop("params", {})
    if not isinstance(params, dict):
        raise InvalidConfigError(
            f"'params' in {config_path} must be a mapping, got {type(params).__name__}"
        )
    params = {**data, **params}

    config = ScheduleConfig(policy=policy, params=params)
    config.validate()
    logger.info(f"Loaded {policy} schedule config from {path}")
    return config
