from .exceptions import SchedulerError, InputError
from .catalog import load_course, load_catalog
from .schemas import Preference, GenerationOptions
from .engine import (
    build_bundles,
    iter_candidate_schedules,
    enumerate_schedules,
    count_schedules,
    calculate_schedule_metrics,
    rank_schedules,
    generate_schedules,
)
from .utils.conflict import conflicts, schedule_has_conflict, detect_conflicts

__version__ = "1.0.0"

__all__ = [
    'SchedulerError', 'InputError',
    'load_course', 'load_catalog',
    'Preference', 'GenerationOptions',
    'build_bundles', 'iter_candidate_schedules', 'enumerate_schedules', 'count_schedules',
    'calculate_schedule_metrics', 'rank_schedules', 'generate_schedules',
    'conflicts', 'schedule_has_conflict', 'detect_conflicts',
]
