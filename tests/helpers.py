"""Small builders for test catalogs."""

from course_scheduler.models import Course, Section, SectionType, TimeSlot
from course_scheduler.models.schedule import Bundle, CandidateSchedule, CourseSelection


def slot(day, start, end, location=None):
    return TimeSlot(day=day, start=start, end=end, location=location)


def lecture(section_id, *slots, quota=None, enrolled=0):
    return Section(
        section_id=section_id,
        section_type=SectionType.LECTURE,
        time_slots=slots,
        quota=quota,
        enrolled=enrolled,
    )


def dependent(section_id, *slots, parent=None, kind=SectionType.TUTORIAL, quota=None, enrolled=0):
    return Section(
        section_id=section_id,
        section_type=kind,
        time_slots=slots,
        parent_id=parent,
        quota=quota,
        enrolled=enrolled,
    )


def course(code, *sections, credits=3, name=""):
    return Course(course_code=code, course_name=name, credits=credits, term="2025-26-T1", sections=sections)


def candidate(*slots, index=0, code="X1000"):
    """A one-course candidate schedule holding the given slots in a single lecture."""
    sec = lecture("A", *slots)
    c = course(code, sec)
    return CandidateSchedule(
        selections=(CourseSelection(course=c, bundle=Bundle(primary=sec)),),
        discovery_index=index,
    )
