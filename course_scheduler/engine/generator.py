import logging
import time
from typing import Any, Iterable, List, Optional

from course_scheduler.engine.enumerator import StopCheck, iter_candidate_schedules
from course_scheduler.engine.ranking import attach_metrics, rank_schedules
from course_scheduler.models.course import Course
from course_scheduler.models.schedule import GeneratedSchedule
from course_scheduler.schemas.generation import GenerationOptions

logger = logging.getLogger("course_scheduler.generator")


def generate_schedules(
    courses: Iterable[Course],
    options: Optional[GenerationOptions] = None,
    *,
    preference: Any = None,
    max_results: Optional[int] = None,
    should_stop: Optional[StopCheck] = None,
) -> List[GeneratedSchedule]:
    """
    Enumerate, measure and rank schedules for the given courses.

    Args:
        courses: loaded Course models, one bundle is chosen from each
        options: full GenerationOptions; preference / max_results override it when given
        preference: preference tag or Preference; unknown tags rank as shortBreaks
        max_results: final truncation of the ranked list
        should_stop: optional deadline check consulted between enumeration branches

    Returns:
        Ranked GeneratedSchedule list. Empty (never an exception) when there are no
        courses, some course has no legal bundle, or every combination clashes.
    """
    opts = options or GenerationOptions()
    overrides = {}
    if preference is not None:
        overrides["preference"] = preference
    if max_results is not None:
        overrides["max_results"] = max_results
    if overrides:
        opts = GenerationOptions(**{**opts.model_dump(), **overrides})

    courses = list(courses)
    if not courses:
        return []

    start = time.time()
    candidates = list(
        iter_candidate_schedules(
            courses,
            opts.enumeration_limit,
            exclude_full_sections=opts.exclude_full_sections,
            should_stop=should_stop,
        )
    )
    scored = attach_metrics(candidates)
    ranked = rank_schedules(scored, opts.preference, opts.max_results)

    ms = int((time.time() - start) * 1000)
    logger.info(
        "Generated %d schedule(s) for %d course(s), returning %d by %s (%dms)",
        len(candidates), len(courses), len(ranked), opts.preference.value, ms,
    )
    return ranked
