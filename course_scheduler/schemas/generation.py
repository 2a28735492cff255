import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from course_scheduler.config import settings

logger = logging.getLogger("course_scheduler.schemas")


class Preference(str, Enum):
    SHORT_BREAKS = "shortBreaks"
    LONG_BREAKS = "longBreaks"
    CONSISTENT_START = "consistentStart"
    START_LATE = "startLate"
    END_EARLY = "endEarly"
    DAYS_OFF = "daysOff"

    @classmethod
    def coerce(cls, value: Any) -> "Preference":
        """
        Map a preference tag onto a member. None and unrecognised tags fall back
        to SHORT_BREAKS; this never raises.
        """
        if isinstance(value, cls):
            return value
        if value is None or value == "":
            return cls.SHORT_BREAKS
        if isinstance(value, str):
            for member in cls:
                if value == member.value or value.upper() == member.name:
                    return member
        logger.warning("Unknown preference %r, defaulting to %s", value, cls.SHORT_BREAKS.value)
        return cls.SHORT_BREAKS


def _default_preference() -> Preference:
    return Preference.coerce(settings.DEFAULT_PREFERENCE)


class GenerationOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    preference: Preference = Field(default_factory=_default_preference)
    # final truncation of the ranked list; None keeps everything
    max_results: Optional[int] = Field(
        default_factory=lambda: settings.DEFAULT_MAX_RESULTS, alias="maxResults", ge=0
    )
    # hard cutoff during enumeration, in discovery order
    enumeration_limit: Optional[int] = Field(
        default_factory=lambda: settings.DEFAULT_ENUMERATION_LIMIT, alias="enumerationLimit", ge=0
    )
    exclude_full_sections: bool = Field(default=False, alias="excludeFullSections")

    @field_validator("preference", mode="before")
    @classmethod
    def _coerce_preference(cls, v: Any) -> Preference:
        return Preference.coerce(v)
