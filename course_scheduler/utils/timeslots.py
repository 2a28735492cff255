import re
from typing import Tuple

MINUTES_PER_DAY = 24 * 60

_CLOCK_PAT = re.compile(r"^(\d{1,2}):(\d{2})$")
_SLOT_PAT = re.compile(r"^\s*([A-Za-z]+|\d)\s+(\d{1,2}:\d{2})\s*-\s*(\d{1,2}:\d{2})\s*$")


def time_to_minutes(time: str) -> int:
    """
    "09:30" -> 570
    """
    m = _CLOCK_PAT.match((time or "").strip())
    if not m:
        raise ValueError(f"invalid clock time: {time!r}, expected HH:MM")
    hours, minutes = int(m.group(1)), int(m.group(2))
    if minutes >= 60 or hours > 24 or (hours == 24 and minutes != 0):
        raise ValueError(f"invalid clock time: {time!r}")
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """
    570 -> "09:30"
    """
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def format_time(minutes: int) -> str:
    """24h minutes -> "9:30AM" style."""
    hours, mins = divmod(int(minutes), 60)
    period = "PM" if hours % 24 >= 12 else "AM"
    display = hours % 12 or 12
    return f"{display}:{mins:02d}{period}"


def minutes_to_hours(minutes: float) -> float:
    """570 -> 9.5"""
    return minutes / 60


def split_slot_string(text: str) -> Tuple[str, str, str]:
    """
    "Mon 09:00-10:15" -> ("Mon", "09:00", "10:15")
    The day part is returned as written; the caller resolves it.
    """
    m = _SLOT_PAT.match(text or "")
    if not m:
        raise ValueError(f"invalid time slot: {text!r}, expected e.g. 'Mon 09:00-10:15'")
    return m.group(1), m.group(2), m.group(3)
