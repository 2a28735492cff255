from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from course_scheduler.models.course import Section
from course_scheduler.models.course_time import TimeSlot
from course_scheduler.models.schedule import SelectedSection


def conflicts(a: TimeSlot, b: TimeSlot) -> bool:
    """
    Two slots clash when:
    1. they fall on the same weekday
    2. their half-open intervals overlap (touching end/start is fine)
    """
    return a.day == b.day and a.start < b.end and b.start < a.end


def has_conflict_with(new_slots: Iterable[TimeSlot], committed: Sequence[TimeSlot]) -> bool:
    """
    new_slots: slots of the bundle being tried
    committed: slots already placed in the partial schedule
    Stops at the first clash.
    """
    for n in new_slots:
        for e in committed:
            if conflicts(n, e):
                return True
    return False


def schedule_has_conflict(slots: Sequence[TimeSlot]) -> bool:
    for i in range(len(slots)):
        for j in range(i + 1, len(slots)):
            if conflicts(slots[i], slots[j]):
                return True
    return False


def sections_conflict(section1: Section, section2: Section) -> bool:
    return has_conflict_with(section1.time_slots, section2.time_slots)


@dataclass(frozen=True)
class Conflict:
    first: SelectedSection
    second: SelectedSection
    slot_pairs: Tuple[Tuple[TimeSlot, TimeSlot], ...] = field(default_factory=tuple)

    def describe(self) -> str:
        a, b = self.first, self.second
        return (
            f"{a.course_code} {a.section.section_id} clashes with "
            f"{b.course_code} {b.section.section_id} ({len(self.slot_pairs)} slot(s))"
        )


def detect_conflicts(selections: Sequence[SelectedSection]) -> List[Conflict]:
    """Every pair of sections from different courses that share clock time."""
    out = []
    for i in range(len(selections)):
        for j in range(i + 1, len(selections)):
            first, second = selections[i], selections[j]
            if first.course_code == second.course_code:
                continue

            pairs = tuple(
                (s1, s2)
                for s1 in first.section.time_slots
                for s2 in second.section.time_slots
                if conflicts(s1, s2)
            )
            if pairs:
                out.append(Conflict(first=first, second=second, slot_pairs=pairs))
    return out


def detect_new_course_conflicts(
    new_selection: SelectedSection,
    existing: Sequence[SelectedSection],
) -> List[str]:
    """Course codes the new section would clash with, each listed once, in selection order."""
    clashing: List[str] = []
    for e in existing:
        if e.course_code in clashing:
            continue
        if sections_conflict(new_selection.section, e.section):
            clashing.append(e.course_code)
    return clashing
