"""
Round-Robin Scheduler - repeat-free weekly pairings for rosters and divisions.
"""

__version__ = "0.1.0"

from .config import Division, SchedulerConfig, load_config, save_config
from .errors import (
    DuplicateRosterError,
    InvalidRosterError,
    RosterLimitError,
    SchedulingError,
    UnevenDivisionsError,
)
from .models import BYE, Bye, Matchup, Schedule, Week
from .matchups import pairs, available_matchup_sets
from .engine import (
    build_schedule,
    schedule_for_divisions,
    smoosh_byes,
    valid_schedules,
    validate_schedule,
)
from .logging_config import setup_logging

__all__ = [
    "BYE",
    "Bye",
    "Division",
    "DuplicateRosterError",
    "InvalidRosterError",
    "Matchup",
    "RosterLimitError",
    "Schedule",
    "SchedulerConfig",
    "SchedulingError",
    "UnevenDivisionsError",
    "Week",
    "available_matchup_sets",
    "build_schedule",
    "load_config",
    "pairs",
    "save_config",
    "schedule_for_divisions",
    "setup_logging",
    "smoosh_byes",
    "valid_schedules",
    "validate_schedule",
]
