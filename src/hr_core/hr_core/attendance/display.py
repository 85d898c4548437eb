from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

from ..core.enums import AttendanceStatus, TimesheetStatus
from .model import AttendanceDayRecord


@dataclass(frozen=True)
class StatusDisplay:
    label: str
    tone: str


@dataclass(frozen=True)
class DayDisplay:
    primary: Optional[StatusDisplay]
    secondary: Optional[StatusDisplay] = None

    @property
    def has_dual_status(self) -> bool:
        return self.secondary is not None


_ATTENDANCE_DISPLAY: Mapping[AttendanceStatus, StatusDisplay] = {
    AttendanceStatus.PRESENT: StatusDisplay("Present", "success"),
    AttendanceStatus.ABSENT: StatusDisplay("Absent", "danger"),
    AttendanceStatus.VACATION: StatusDisplay("Vacation", "info"),
    AttendanceStatus.LOA: StatusDisplay("Leave of Absence", "accent"),
    AttendanceStatus.HOLIDAY: StatusDisplay("Public Holiday", "info"),
    AttendanceStatus.CLOSED: StatusDisplay("Office Closed", "info"),
    AttendanceStatus.OFF_SCHEDULE: StatusDisplay("Off Schedule", "muted"),
    AttendanceStatus.NOT_EMPLOYED: StatusDisplay("Not Employed", "muted"),
    AttendanceStatus.SUSPENDED: StatusDisplay("Suspended", "warning"),
}

_TIMESHEET_DISPLAY: Mapping[TimesheetStatus, StatusDisplay] = {
    TimesheetStatus.PENDING: StatusDisplay("Pending Review", "warning"),
    TimesheetStatus.APPROVED: StatusDisplay("Approved", "success"),
    TimesheetStatus.REQUIRES_MODIFICATION: StatusDisplay("Needs Changes", "danger"),
    TimesheetStatus.REJECTED: StatusDisplay("Rejected", "danger"),
}

# Every status must have display metadata.
for _enum, _table in ((AttendanceStatus, _ATTENDANCE_DISPLAY), (TimesheetStatus, _TIMESHEET_DISPLAY)):
    _missing = set(_enum) - set(_table)
    if _missing:
        raise RuntimeError(f"No display metadata for {sorted(m.value for m in _missing)}")


def attendance_status_display(status: AttendanceStatus) -> StatusDisplay:
    return _ATTENDANCE_DISPLAY[status]


def timesheet_status_display(status: TimesheetStatus) -> StatusDisplay:
    return _TIMESHEET_DISPLAY[status]


def _day_display(record: AttendanceDayRecord) -> StatusDisplay:
    display = attendance_status_display(record.status)
    if record.status == AttendanceStatus.HOLIDAY and record.holiday is not None and record.holiday.name:
        return StatusDisplay(record.holiday.name, display.tone)
    return display


def describe_day(record: AttendanceDayRecord, *, today: date) -> DayDisplay:
    """Labels for one listing row.

    A timesheet wins as the primary label; on a non-work day the day status
    is shown next to it. Expected days from today on without a timesheet show
    nothing yet.
    """
    if record.timesheet is not None:
        primary = timesheet_status_display(record.timesheet.status)
        if not record.is_expected_work_day:
            return DayDisplay(primary=primary, secondary=_day_display(record))
        return DayDisplay(primary=primary)

    if record.status == AttendanceStatus.PRESENT and record.is_expected_work_day and record.work_date >= today:
        return DayDisplay(primary=None)
    return DayDisplay(primary=_day_display(record))
