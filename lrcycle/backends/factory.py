"""
Schedule Factory - Registry and factory for schedule creation.

Provides a centralized registry of schedule policies and factory methods
for building schedule instances from configuration.
"""

from typing import Any, Dict, List, Type
import logging

from ..core.config import ScheduleConfig
from ..core.schedulers import (
    CosineAnnealingSchedule,
    InvalidConfigError,
    OneCycleSchedule,
    Schedule,
)

logger = logging.getLogger(__name__)


class ScheduleRegistry:
    """
    Registry for available schedule policies.

    Policies register themselves under a name and can then be built from
    a ScheduleConfig, so a training loop can switch policies by config.
    """

    _schedules: Dict[str, Type[Schedule]] = {}

    @classmethod
    def register(cls, name: str, schedule_class: Type[Schedule]) -> None:
        """
        Register a schedule implementation.

        Args:
            name: Policy name (e.g., "one_cycle", "cosine")
            schedule_class: Class implementing Schedule
        """
        name = name.lower()
        if name in cls._schedules:
            logger.warning(
                f"Schedule '{name}' already registered. Overwriting with {schedule_class}"
            )

        cls._schedules[name] = schedule_class
        logger.debug(f"Registered schedule: {name} -> {schedule_class.__name__}")

    @classmethod
    def create(cls, config: ScheduleConfig) -> Schedule:
        """
        Create a schedule instance from configuration.

        Args:
            config: Schedule configuration

        Returns:
            Initialized schedule

        Raises:
            ValueError: If policy not found in registry
            InvalidConfigError: If the parameters do not fit the policy
        """
        policy = config.policy.lower()

        if policy not in cls._schedules:
            available = ", ".join(cls._schedules.keys())
            raise ValueError(
                f"Unknown schedule policy: {policy}. "
                f"Available policies: {available}"
            )

        schedule_class = cls._schedules[policy]
        logger.info(f"Creating {policy} schedule with params: {config.params}")

        try:
            return schedule_class(**config.params)
        except TypeError as e:
            raise InvalidConfigError(f"Bad parameters for '{policy}': {e}") from e

    @classmethod
    def list_schedules(cls) -> List[str]:
        """
        List all registered policies.

        Returns:
            List of policy names
        """
        return list(cls._schedules.keys())

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name.lower() in cls._schedules

    @classmethod
    def unregister(cls, name: str) -> None:
        """
        Unregister a policy (mainly for testing).

        Args:
            name: Policy name to unregister
        """
        name = name.lower()
        if name in cls._schedules:
            del cls._schedules[name]
            logger.debug(f"Unregistered schedule: {name}")


def create_schedule(policy: str, **params: Any) -> Schedule:
    """
    Convenience function to build a schedule by policy name.

    Args:
        policy: Policy name ("one_cycle" or "cosine")
        **params: Constructor arguments for the policy

    Returns:
        Initialized schedule

    Example:
        >>> schedule = create_schedule("one_cycle", max_lr=1e-2, total_steps=1000)
        >>> schedule = create_schedule("cosine", base_lr=0.1, min_lr=0.0, period_steps=500)
    """
    return ScheduleRegistry.create(ScheduleConfig(policy=policy, params=params))


def register_schedule(name: str):
    """
    Decorator for registering schedule classes.

    Args:
        name: Policy name to register

    Example:
        @register_schedule("constant")
        class ConstantSchedule(Schedule):
            ...
    """

    def decorator(cls):
        ScheduleRegistry.register(name, cls)
        return cls

    return decorator


ScheduleRegistry.register("one_cycle", OneCycleSchedule)
ScheduleRegistry.register("cosine", CosineAnnealingSchedule)
