from typing import Dict, Iterable, List, Union

from course_scheduler.models.course_time import WEEKDAY_COUNT, TimeSlot, Weekday
from course_scheduler.models.schedule import (
    CandidateSchedule,
    CourseSelection,
    GeneratedSchedule,
    ScheduleMetrics,
    SelectedSection,
)
from course_scheduler.utils.timeslots import minutes_to_hours

LONG_BREAK_MINUTES = 60

ScheduleLike = Union[
    CandidateSchedule,
    GeneratedSchedule,
    Iterable[Union[CourseSelection, SelectedSection, TimeSlot]],
]


def _collect_slots(schedule: ScheduleLike) -> List[TimeSlot]:
    if isinstance(schedule, (CandidateSchedule, GeneratedSchedule)):
        return list(schedule.time_slots)

    slots: List[TimeSlot] = []
    for item in schedule:
        if isinstance(item, TimeSlot):
            slots.append(item)
        elif isinstance(item, CourseSelection):
            slots.extend(item.time_slots)
        elif isinstance(item, SelectedSection):
            slots.extend(item.section.time_slots)
        else:
            raise TypeError(f"cannot read time slots from {type(item).__name__}")
    return slots


def group_by_day(slots: Iterable[TimeSlot]) -> Dict[Weekday, List[TimeSlot]]:
    """Slots per weekday, each day sorted by start time."""
    grouped: Dict[Weekday, List[TimeSlot]] = {}
    for slot in slots:
        grouped.setdefault(slot.day, []).append(slot)
    for day_slots in grouped.values():
        day_slots.sort(key=lambda s: (s.start, s.end))
    return dict(sorted(grouped.items(), key=lambda kv: kv[0].index))


def calculate_schedule_metrics(schedule: ScheduleLike) -> ScheduleMetrics:
    """
    Aggregate measures used for ranking.

    Averages are taken over every individual slot (not per day) and reported as
    fractional hours. Gaps are measured between consecutive classes of the same
    day; a day with one class has none. An empty schedule gives all zeros.
    Overlaps are assumed to have been excluded already.
    """
    slots = _collect_slots(schedule)
    if not slots:
        return ScheduleMetrics()

    by_day = group_by_day(slots)

    max_gap_by_day: Dict[Weekday, int] = {}
    total_gap = 0
    max_gap = 0
    gap_count = 0
    long_breaks = 0
    long_break_minutes = 0
    campus_span = 0
    first_starts: List[int] = []

    for day, day_slots in by_day.items():
        first_starts.append(day_slots[0].start)
        campus_span += max(s.end for s in day_slots) - day_slots[0].start

        if len(day_slots) < 2:
            continue

        day_max = 0
        for prev, nxt in zip(day_slots, day_slots[1:]):
            gap = nxt.start - prev.end
            total_gap += gap
            day_max = max(day_max, gap)
            if gap > 0:
                gap_count += 1
            if gap >= LONG_BREAK_MINUTES:
                long_breaks += 1
                long_break_minutes += gap
        max_gap_by_day[day] = day_max
        max_gap = max(max_gap, day_max)

    days_used = len(by_day)
    mean_first = sum(first_starts) / days_used
    start_variance = sum((s - mean_first) ** 2 for s in first_starts) / days_used

    return ScheduleMetrics(
        days_used=days_used,
        free_days=WEEKDAY_COUNT - days_used,
        earliest_start=min(s.start for s in slots),
        latest_end=max(s.end for s in slots),
        avg_start_time=minutes_to_hours(sum(s.start for s in slots) / len(slots)),
        avg_end_time=minutes_to_hours(sum(s.end for s in slots) / len(slots)),
        max_gap_by_day=max_gap_by_day,
        max_gap_minutes=max_gap,
        total_gap_minutes=total_gap,
        gap_count=gap_count,
        long_break_count=long_breaks,
        total_long_break_minutes=long_break_minutes,
        start_spread_minutes=max(first_starts) - min(first_starts),
        start_variance=start_variance,
        total_campus_span=campus_span,
    )
