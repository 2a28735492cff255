from .course_time import Weekday, TimeSlot, WEEKDAY_COUNT
from .course import SectionType, Section, Course
from .schedule import (
    Bundle,
    SelectedSection,
    CourseSelection,
    CandidateSchedule,
    ScheduleMetrics,
    GeneratedSchedule,
)

__all__ = [
    'Weekday', 'TimeSlot', 'WEEKDAY_COUNT',
    'SectionType', 'Section', 'Course',
    'Bundle', 'SelectedSection', 'CourseSelection', 'CandidateSchedule',
    'ScheduleMetrics', 'GeneratedSchedule',
]
