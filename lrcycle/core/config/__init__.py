"""
Configuration management.

Dataclass configs, loadable from YAML.
"""

from .schedule import ScheduleConfig, load_schedule_config

__all__ = ["ScheduleConfig", "load_schedule_config"]
