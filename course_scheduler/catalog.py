"""
Catalog boundary: turns raw course mappings (as handed over by the catalog
provider, camelCase or snake_case keys) into frozen Course models.

Structural problems that would make generation meaningless are raised as
InputError here, once, so the engine can trust its input. Softer issues are
only logged.
"""

import logging
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError

from course_scheduler.exceptions import InputError
from course_scheduler.models.course import Course

logger = logging.getLogger("course_scheduler.catalog")


def _format_errors(course_ref: str, exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return f"invalid course {course_ref}: " + "; ".join(parts)


def _warn_soft_issues(course: Course) -> None:
    if not course.sections:
        logger.warning("Course %s has no sections", course.course_code)
        return
    if not course.primaries():
        logger.warning("Course %s has no lecture sections", course.course_code)
    for s in course.sections:
        if not s.time_slots:
            logger.warning(
                "Course %s, section %s (%s) has no time slots",
                course.course_code, s.section_id, s.section_type.value,
            )


def load_course(data: Union[Course, Mapping[str, Any]]) -> Course:
    if isinstance(data, Course):
        _warn_soft_issues(data)
        return data

    ref = repr(data.get("courseCode") or data.get("course_code") or "?") if isinstance(data, Mapping) else "?"
    try:
        course = Course.model_validate(data)
    except ValidationError as e:
        raise InputError(_format_errors(ref, e), errors=e.errors()) from e

    _warn_soft_issues(course)
    return course


def load_catalog(items: Iterable[Union[Course, Mapping[str, Any]]]) -> List[Course]:
    courses = [load_course(item) for item in items]
    logger.info("Loaded %d course(s) into catalog", len(courses))
    return courses
