from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from course_scheduler.utils.timeslots import (
    MINUTES_PER_DAY,
    minutes_to_time,
    split_slot_string,
    time_to_minutes,
)


class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def index(self) -> int:
        """0 for Monday .. 6 for Sunday."""
        return _WEEKDAY_ORDER.index(self)

    @property
    def short(self) -> str:
        return self.value[:3]

    @classmethod
    def parse(cls, value: Any) -> "Weekday":
        """
        Accepts a Weekday, "Monday", "mon", "MON" or an ISO weekday number 1..7.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            if 1 <= value <= 7:
                return _WEEKDAY_ORDER[value - 1]
            raise ValueError(f"weekday number must be 1..7, got {value}")
        if isinstance(value, str):
            key = value.strip().lower()
            if key.isdigit():
                return cls.parse(int(key))
            for day in _WEEKDAY_ORDER:
                if key == day.value.lower() or key == day.short.lower():
                    return day
        raise ValueError(f"unknown weekday: {value!r}")


_WEEKDAY_ORDER = list(Weekday)

WEEKDAY_COUNT = len(_WEEKDAY_ORDER)


class TimeSlot(BaseModel):
    """Weekly meeting time, half-open [start, end) in minutes since midnight."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    day: Weekday
    start: int = Field(alias="startTime")
    end: int = Field(alias="endTime")
    location: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _from_slot_string(cls, data: Any) -> Any:
        # "Mon 09:00-10:15"
        if isinstance(data, str):
            day, start, end = split_slot_string(data)
            return {"day": day, "start": start, "end": end}
        return data

    @field_validator("day", mode="before")
    @classmethod
    def _parse_day(cls, v: Any) -> Weekday:
        return Weekday.parse(v)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _parse_clock(cls, v: Any) -> Any:
        if isinstance(v, str):
            return time_to_minutes(v)
        return v

    @model_validator(mode="after")
    def _check_interval(self):
        if self.start < 0 or self.end > MINUTES_PER_DAY:
            raise ValueError(f"time slot {self} falls outside the day")
        if self.start >= self.end:
            raise ValueError(
                f"time slot start must be before end: {minutes_to_time(self.start)} >= {minutes_to_time(self.end)}"
            )
        return self

    @property
    def duration(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.day.short} {minutes_to_time(self.start)}-{minutes_to_time(self.end)}"
