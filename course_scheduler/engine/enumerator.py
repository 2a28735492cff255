"""
Section Combination Enumerator.

Builds the legal bundles of each course and walks their product depth-first,
pruning a branch as soon as a bundle clashes with what is already placed.

Discovery order is part of the contract: courses are visited in input order and
bundles in section declaration order, never re-sorted. The ranker falls back on
this order to break ties, so the first schedule found wins.
"""

import itertools
import logging
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple

from course_scheduler.models.course import Course, Section, SectionType
from course_scheduler.models.course_time import TimeSlot
from course_scheduler.models.schedule import Bundle, CandidateSchedule, CourseSelection
from course_scheduler.utils.conflict import has_conflict_with, schedule_has_conflict
from course_scheduler.utils.selection import has_available_seats

logger = logging.getLogger("course_scheduler.enumerator")

StopCheck = Callable[[], bool]


def _dependent_types(course: Course) -> List[SectionType]:
    """Dependent section types in order of first appearance."""
    seen: List[SectionType] = []
    for s in course.dependents():
        if s.section_type not in seen:
            seen.append(s.section_type)
    return seen


def _dependent_options(
    course: Course,
    primary: Section,
    section_type: SectionType,
    exclude_full_sections: bool = False,
) -> Optional[List[Section]]:
    """
    Sections of one dependent type that may go with this lecture.

    None when the type is not offered with this lecture at all. Tied sections win
    over universal ones, but only among those still open when full sections are
    excluded; an empty list means the type is required and every option is full.
    """
    tied = [
        s for s in course.dependents()
        if s.section_type == section_type and s.parent_id == primary.section_id
    ]
    universal = [
        s for s in course.dependents()
        if s.section_type == section_type and s.parent_id is None
    ]
    if not tied and not universal:
        return None
    if exclude_full_sections:
        tied = [s for s in tied if has_available_seats(s)]
        universal = [s for s in universal if has_available_seats(s)]
    return tied or universal


def build_bundles(course: Course, exclude_full_sections: bool = False) -> List[Bundle]:
    """
    All legal bundles of one course, in declaration order:
    lecture order first, then the cartesian product of its dependent options
    by type (types in order of first appearance).
    """
    bundles: List[Bundle] = []
    types = _dependent_types(course)

    for primary in course.primaries():
        if exclude_full_sections and not has_available_seats(primary):
            continue

        option_lists: List[List[Section]] = []
        missing = None
        for section_type in types:
            options = _dependent_options(course, primary, section_type, exclude_full_sections)
            if options is None:
                # this type is only offered with other lectures
                continue
            if not options:
                missing = section_type
                break
            option_lists.append(options)

        if missing is not None:
            logger.debug(
                "%s %s skipped: every %s section is full",
                course.course_code, primary.section_id, missing.value,
            )
            continue

        for combo in itertools.product(*option_lists):
            bundle = Bundle(primary=primary, dependents=tuple(combo))
            if schedule_has_conflict(bundle.time_slots):
                logger.debug("%s bundle %s overlaps itself", course.course_code, bundle.label)
                continue
            bundles.append(bundle)

    return bundles


def _prepare(
    courses: Sequence[Course],
    exclude_full_sections: bool,
) -> Optional[List[List[Tuple[Bundle, List[TimeSlot]]]]]:
    """Per course: (bundle, slots) pairs. None when some course has nothing to offer."""
    prepared = []
    for course in courses:
        bundles = build_bundles(course, exclude_full_sections)
        if not bundles:
            logger.info("Course %s has no legal section bundle; no schedule is possible", course.course_code)
            return None
        prepared.append([(b, b.time_slots) for b in bundles])
    return prepared


def iter_candidate_schedules(
    courses: Iterable[Course],
    max_results: Optional[int] = None,
    *,
    exclude_full_sections: bool = False,
    should_stop: Optional[StopCheck] = None,
) -> Iterator[CandidateSchedule]:
    """
    Yield conflict-free schedules (one bundle per course) in depth-first discovery order.

    Args:
        courses: courses to place, in the order they should be branched on
        max_results: stop after this many schedules (hard cutoff, not a sample)
        exclude_full_sections: drop sections with no seats left before enumerating
        should_stop: optional callable checked between branches; returning True ends the walk

    Each call starts from scratch; nothing is shared between iterators.
    """
    courses = list(courses)
    if not courses:
        return
    if max_results is not None and max_results <= 0:
        return

    prepared = _prepare(courses, exclude_full_sections)
    if prepared is None:
        return

    found = 0
    stopped = False

    def backtrack(index: int, chosen: List[CourseSelection], committed: List[TimeSlot]) -> Iterator[CandidateSchedule]:
        nonlocal found, stopped

        if index == len(courses):
            discovered = found
            found += 1
            yield CandidateSchedule(selections=tuple(chosen), discovery_index=discovered)
            return

        for bundle, slots in prepared[index]:
            if max_results is not None and found >= max_results:
                return
            if stopped:
                return
            if should_stop is not None and should_stop():
                stopped = True
                logger.info("Enumeration stopped by caller after %d schedule(s)", found)
                return

            if has_conflict_with(slots, committed):
                continue

            chosen.append(CourseSelection(course=courses[index], bundle=bundle))
            committed.extend(slots)

            yield from backtrack(index + 1, chosen, committed)

            chosen.pop()
            if slots:
                del committed[-len(slots):]

    yield from backtrack(0, [], [])


def enumerate_schedules(
    courses: Iterable[Course],
    max_results: Optional[int] = None,
    *,
    exclude_full_sections: bool = False,
    should_stop: Optional[StopCheck] = None,
) -> List[CandidateSchedule]:
    return list(
        iter_candidate_schedules(
            courses,
            max_results,
            exclude_full_sections=exclude_full_sections,
            should_stop=should_stop,
        )
    )


def count_schedules(
    courses: Iterable[Course],
    max_count: Optional[int] = None,
    *,
    exclude_full_sections: bool = False,
) -> int:
    """Number of reachable conflict-free combinations, without building them."""
    courses = list(courses)
    if not courses:
        return 0
    prepared = _prepare(courses, exclude_full_sections)
    if prepared is None:
        return 0

    count = 0

    def backtrack(index: int, committed: List[TimeSlot]) -> None:
        nonlocal count
        if max_count is not None and count >= max_count:
            return
        if index == len(prepared):
            count += 1
            return
        for _bundle, slots in prepared[index]:
            if has_conflict_with(slots, committed):
                continue
            committed.extend(slots)
            backtrack(index + 1, committed)
            if slots:
                del committed[-len(slots):]
            if max_count is not None and count >= max_count:
                return

    backtrack(0, [])
    return count
