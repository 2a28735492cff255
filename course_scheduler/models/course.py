from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from course_scheduler.models.course_time import TimeSlot


class SectionType(str, Enum):
    LECTURE = "Lecture"
    TUTORIAL = "Tutorial"
    LAB = "Lab"
    SEMINAR = "Seminar"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        return None


class Section(BaseModel):
    """
    One offering of a course. Lectures are primary sections; tutorials, labs and
    seminars are dependents. A dependent may name its lecture through parent_id;
    without one it pairs with any lecture (a universal section).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    section_id: str = Field(alias="sectionId")
    section_type: SectionType = Field(default=SectionType.LECTURE, alias="sectionType")
    time_slots: Tuple[TimeSlot, ...] = Field(default=(), alias="timeSlots")
    parent_id: Optional[str] = Field(default=None, alias="parentLecture")

    quota: Optional[int] = None  # None = no seat limit
    enrolled: int = 0
    instructor: Optional[str] = None
    language: Optional[str] = None

    @field_validator("section_type", mode="before")
    @classmethod
    def _parse_type(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, SectionType):
            return SectionType(v)
        return v

    @field_validator("instructor", mode="before")
    @classmethod
    def _instructor_name(cls, v: Any) -> Any:
        # {"name": "Dr. Chan", "email": ...}
        if isinstance(v, dict):
            return v.get("name")
        return v

    @property
    def is_primary(self) -> bool:
        return self.section_type == SectionType.LECTURE

    @property
    def is_dependent(self) -> bool:
        return not self.is_primary

    @property
    def seats_remaining(self) -> Optional[int]:
        if self.quota is None:
            return None
        return max(0, self.quota - self.enrolled)


class Course(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    course_code: str = Field(alias="courseCode")
    course_name: str = Field(default="", alias="courseName")
    credits: int = 0
    term: Optional[str] = None
    sections: Tuple[Section, ...] = ()

    @model_validator(mode="after")
    def _resolve_parents(self):
        primary_ids = [s.section_id for s in self.sections if s.is_primary]
        dupes = sorted({sid for sid in primary_ids if primary_ids.count(sid) > 1})
        if dupes:
            raise ValueError(f"{self.course_code}: duplicate lecture section ids {dupes}")

        known = set(primary_ids)
        for s in self.sections:
            if s.is_dependent and s.parent_id is not None and s.parent_id not in known:
                raise ValueError(
                    f"{self.course_code}: section {s.section_id} ({s.section_type.value}) "
                    f"references non-existent parent lecture {s.parent_id!r}"
                )
        return self

    def primaries(self) -> List[Section]:
        return [s for s in self.sections if s.is_primary]

    def dependents(self) -> List[Section]:
        return [s for s in self.sections if s.is_dependent]

    def primary_index(self) -> Dict[str, Section]:
        """parent_id -> lecture section, used to resolve dependent back-references."""
        return {s.section_id: s for s in self.sections if s.is_primary}

    def parent_of(self, section: Section) -> Optional[Section]:
        if section.parent_id is None:
            return None
        return self.primary_index().get(section.parent_id)

    def __str__(self) -> str:
        return self.course_code
