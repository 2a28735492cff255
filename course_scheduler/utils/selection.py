from typing import List, Optional, Sequence

from course_scheduler.models.course import Course, Section
from course_scheduler.models.course_time import Weekday
from course_scheduler.models.schedule import SelectedSection


def has_available_seats(section: Section) -> bool:
    if section.quota is None:
        return True
    return section.enrolled < section.quota


def calculate_total_credits(selections: Sequence[SelectedSection]) -> int:
    # a course counts once no matter how many of its sections are selected
    seen = set()
    total = 0
    for sel in selections:
        if sel.course_code in seen:
            continue
        seen.add(sel.course_code)
        total += sel.course.credits or 0
    return total


def count_unique_courses(selections: Sequence[SelectedSection]) -> int:
    return len({sel.course_code for sel in selections})


def get_schedule_days(selections: Sequence[SelectedSection]) -> List[Weekday]:
    days = {slot.day for sel in selections for slot in sel.section.time_slots}
    return sorted(days, key=lambda d: d.index)


def get_active_primary_id(selections: Sequence[SelectedSection], course: Course) -> Optional[str]:
    """
    The lecture currently in effect for a course: the selected lecture itself,
    or else the parent of any selected tutorial/lab when that lecture exists.
    """
    for sel in selections:
        if sel.course_code == course.course_code and sel.section.is_primary:
            return sel.section.section_id

    index = course.primary_index()
    for sel in selections:
        if (
            sel.course_code == course.course_code
            and sel.section.is_dependent
            and sel.section.parent_id
        ):
            return sel.section.parent_id if sel.section.parent_id in index else None
    return None


def remove_dependents_for_primary(
    selections: Sequence[SelectedSection],
    course_code: str,
    primary_id: str,
) -> List[SelectedSection]:
    """Keep only the sections of course_code that belong with primary_id (used when switching lectures)."""
    out = []
    for sel in selections:
        if sel.course_code != course_code:
            out.append(sel)
            continue
        section = sel.section
        if section.is_primary:
            if section.section_id == primary_id:
                out.append(sel)
        elif section.parent_id is None or section.parent_id == primary_id:
            out.append(sel)
    return out


def remove_primary_and_dependents(
    selections: Sequence[SelectedSection],
    course_code: str,
    primary_id: str,
) -> List[SelectedSection]:
    out = []
    for sel in selections:
        if sel.course_code != course_code:
            out.append(sel)
            continue
        section = sel.section
        if section.is_primary:
            if section.section_id != primary_id:
                out.append(sel)
        elif section.parent_id is not None and section.parent_id != primary_id:
            out.append(sel)
    return out
