"""
Transient values produced during one generation call: bundles, candidate
schedules and their metrics. They are never persisted and never mutated.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from course_scheduler.models.course import Course, Section
from course_scheduler.models.course_time import TimeSlot, Weekday
from course_scheduler.utils.timeslots import minutes_to_time


@dataclass(frozen=True)
class Bundle:
    """A lecture plus the dependent sections it must be taken with."""
    primary: Section
    dependents: Tuple[Section, ...] = ()

    @property
    def sections(self) -> Tuple[Section, ...]:
        return (self.primary,) + self.dependents

    @property
    def time_slots(self) -> List[TimeSlot]:
        return [slot for s in self.sections for slot in s.time_slots]

    @property
    def label(self) -> str:
        return "+".join(s.section_id for s in self.sections)


@dataclass(frozen=True)
class SelectedSection:
    """One (course, section) pair, the unit the manual editor works with."""
    course: Course
    section: Section

    @property
    def course_code(self) -> str:
        return self.course.course_code


@dataclass(frozen=True)
class CourseSelection:
    course: Course
    bundle: Bundle

    @property
    def course_code(self) -> str:
        return self.course.course_code

    @property
    def time_slots(self) -> List[TimeSlot]:
        return self.bundle.time_slots

    def selected_sections(self) -> List[SelectedSection]:
        return [SelectedSection(self.course, s) for s in self.bundle.sections]


@dataclass(frozen=True)
class CandidateSchedule:
    selections: Tuple[CourseSelection, ...]
    discovery_index: int = 0  # position in depth-first discovery order

    @property
    def time_slots(self) -> List[TimeSlot]:
        return [slot for sel in self.selections for slot in sel.time_slots]

    def selected_sections(self) -> List[SelectedSection]:
        return [item for sel in self.selections for item in sel.selected_sections()]

    def signature(self) -> Tuple[str, ...]:
        return tuple(f"{sel.course_code}-{sel.bundle.label}" for sel in self.selections)


@dataclass(frozen=True)
class ScheduleMetrics:
    days_used: int = 0
    free_days: int = 0
    earliest_start: int = 0
    latest_end: int = 0
    avg_start_time: float = 0.0  # fractional hour of day, 9.5 = 09:30
    avg_end_time: float = 0.0
    max_gap_by_day: Dict[Weekday, int] = field(default_factory=dict)
    max_gap_minutes: int = 0
    total_gap_minutes: int = 0
    gap_count: int = 0
    long_break_count: int = 0
    total_long_break_minutes: int = 0
    start_spread_minutes: int = 0
    start_variance: float = 0.0
    total_campus_span: int = 0

    def to_dict(self) -> dict:
        return {
            "days_used": self.days_used,
            "free_days": self.free_days,
            "earliest_start": minutes_to_time(self.earliest_start),
            "latest_end": minutes_to_time(self.latest_end),
            "avg_start_time": round(self.avg_start_time, 2),
            "avg_end_time": round(self.avg_end_time, 2),
            "max_gap_by_day": {day.value: gap for day, gap in self.max_gap_by_day.items()},
            "max_gap_minutes": self.max_gap_minutes,
            "total_gap_minutes": self.total_gap_minutes,
            "gap_count": self.gap_count,
            "long_break_count": self.long_break_count,
            "total_long_break_minutes": self.total_long_break_minutes,
            "start_spread_minutes": self.start_spread_minutes,
            "start_variance": round(self.start_variance, 2),
            "total_campus_span": self.total_campus_span,
        }


@dataclass(frozen=True)
class GeneratedSchedule:
    """A ranked candidate with its metrics attached."""
    schedule: CandidateSchedule
    metrics: ScheduleMetrics

    @property
    def selections(self) -> Tuple[CourseSelection, ...]:
        return self.schedule.selections

    @property
    def discovery_index(self) -> int:
        return self.schedule.discovery_index

    @property
    def time_slots(self) -> List[TimeSlot]:
        return self.schedule.time_slots

    def selected_sections(self) -> List[SelectedSection]:
        return self.schedule.selected_sections()

    def to_dict(self) -> dict:
        return {
            "courses": [
                {
                    "course_code": sel.course_code,
                    "course_name": sel.course.course_name,
                    "sections": [
                        {
                            "section_id": s.section_id,
                            "section_type": s.section_type.value,
                            "time_slots": [str(slot) for slot in s.time_slots],
                        }
                        for s in sel.bundle.sections
                    ],
                }
                for sel in self.selections
            ],
            "discovery_index": self.discovery_index,
            "metrics": self.metrics.to_dict(),
        }
