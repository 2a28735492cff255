import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from course_scheduler.engine.metrics import calculate_schedule_metrics
from course_scheduler.models.schedule import CandidateSchedule, GeneratedSchedule, ScheduleMetrics
from course_scheduler.schemas.generation import Preference

logger = logging.getLogger("course_scheduler.ranking")

SortKey = Callable[[ScheduleMetrics], Tuple]

# Each key sorts ascending, so "max" directions are negated.
RANKING_KEYS: Dict[Preference, SortKey] = {
    Preference.SHORT_BREAKS: lambda m: (m.total_gap_minutes, m.max_gap_minutes),
    Preference.LONG_BREAKS: lambda m: (-m.long_break_count, -m.total_long_break_minutes),
    Preference.CONSISTENT_START: lambda m: (m.start_variance,),
    Preference.START_LATE: lambda m: (-m.earliest_start,),
    Preference.END_EARLY: lambda m: (m.latest_end,),
    Preference.DAYS_OFF: lambda m: (-m.free_days, m.total_gap_minutes),
}


def ranking_key(preference: Any) -> SortKey:
    return RANKING_KEYS[Preference.coerce(preference)]


def attach_metrics(candidates: Iterable[CandidateSchedule]) -> List[GeneratedSchedule]:
    return [
        c if isinstance(c, GeneratedSchedule) else GeneratedSchedule(schedule=c, metrics=calculate_schedule_metrics(c))
        for c in candidates
    ]


def rank_schedules(
    candidates: Iterable[CandidateSchedule],
    preference: Any = None,
    max_results: Optional[int] = None,
) -> List[GeneratedSchedule]:
    """
    Order schedules for a preference, best first.

    Candidates without metrics get them computed here. Schedules that tie on
    every key of the preference keep enumeration discovery order. The whole set
    must be ranked in one pass; ranking partial batches separately would break
    the tie order.
    """
    if max_results is not None and max_results < 0:
        raise ValueError(f"max_results must be >= 0, got {max_results}")

    pref = Preference.coerce(preference)
    key = RANKING_KEYS[pref]
    scored = attach_metrics(candidates)

    ranked = sorted(scored, key=lambda g: key(g.metrics) + (g.discovery_index,))
    logger.debug("Ranked %d schedule(s) by %s", len(ranked), pref.value)

    if max_results is not None:
        ranked = ranked[:max_results]
    return ranked
