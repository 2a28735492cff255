from __future__ import annotations
from typing import List, Dict, Any, Sequence
from io import BytesIO
from datetime import datetime

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.styles import Font, Alignment
from openpyxl.worksheet.worksheet import Worksheet

from course_scheduler.models.course_time import Weekday
from course_scheduler.models.schedule import GeneratedSchedule
from course_scheduler.utils.timeslots import minutes_to_time

HEADERS = ["Course", "Course Name", "Section", "Type", "Day", "Start", "End", "Location"]
# per-weekday sheets drop the Day column
DAY_HEADERS = [h for h in HEADERS if h != "Day"]

MAX_COLUMN_WIDTH = 60


def schedule_rows(schedule: GeneratedSchedule) -> List[Dict[str, Any]]:
    """
    One row per meeting, ordered by weekday then start time.
    """
    keyed = []
    for sel in schedule.selections:
        for section in sel.bundle.sections:
            for slot in section.time_slots:
                keyed.append(((slot.day.index, slot.start), {
                    "Course": sel.course_code,
                    "Course Name": sel.course.course_name,
                    "Section": section.section_id,
                    "Type": section.section_type.value,
                    "Day": slot.day.value,
                    "Start": minutes_to_time(slot.start),
                    "End": minutes_to_time(slot.end),
                    "Location": slot.location or "",
                }))
    keyed.sort(key=lambda kv: kv[0])
    return [row for _order, row in keyed]


def write_rows(ws: Worksheet, headers: Sequence[str], rows: Sequence[Dict[str, Any]]) -> None:
    """Bold centered header row, one line per dict, columns sized to their longest value."""
    ws.append(list(headers))
    header_font = Font(bold=True)
    for cell in ws[1]:
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")

    widths = [len(str(h)) for h in headers]
    for r in rows:
        values = [r.get(h) for h in headers]
        ws.append(values)
        for i, v in enumerate(values):
            if v is not None:
                widths[i] = max(widths[i], len(str(v)))

    for col_idx, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(col_idx)].width = min(width + 2, MAX_COLUMN_WIDTH)


def schedule_to_xlsx_bytes(schedule: GeneratedSchedule, sheet_name: str = "Schedule") -> bytes:
    """
    First sheet lists every meeting; then one sheet per weekday that has classes,
    in weekday order.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name[:31]

    rows = schedule_rows(schedule)
    if not rows:
        ws.append(["No classes"])
    else:
        write_rows(ws, HEADERS, rows)
        for day in Weekday:
            day_rows = [r for r in rows if r["Day"] == day.value]
            if day_rows:
                write_rows(wb.create_sheet(title=day.value), DAY_HEADERS, day_rows)

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def make_filename(prefix: str = "schedule") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{ts}.xlsx"
