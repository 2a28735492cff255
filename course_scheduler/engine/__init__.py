from .enumerator import build_bundles, iter_candidate_schedules, enumerate_schedules, count_schedules
from .metrics import calculate_schedule_metrics
from .ranking import rank_schedules
from .generator import generate_schedules

__all__ = [
    'build_bundles', 'iter_candidate_schedules', 'enumerate_schedules', 'count_schedules',
    'calculate_schedule_metrics', 'rank_schedules', 'generate_schedules',
]
