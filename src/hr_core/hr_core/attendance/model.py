from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..schedules.model import Schedule
from ..timeoff.model import ClosingDay, LeaveOfAbsence, PublicHoliday, Vacation
from ..timesheets.model import Timesheet


@dataclass(frozen=True)
class AttendanceContext:
    """Point-in-time records a day resolution reads from."""

    vacations: Sequence[Vacation] = ()
    leaves: Sequence[LeaveOfAbsence] = ()
    holidays: Sequence[PublicHoliday] = ()
    closing_days: Sequence[ClosingDay] = ()
    schedules: Sequence[Schedule] = ()


@dataclass(frozen=True)
class DayResolution:
    status: AttendanceStatus
    is_expected_work_day: bool
    holiday: Optional[PublicHoliday] = None


@dataclass(frozen=True)
class AttendanceDayRecord:
    """Read-model for one row of the attendance listing."""

    user_id: str
    user_name: str
    work_date: date
    timesheet: Optional[Timesheet]
    status: AttendanceStatus
    is_expected_work_day: bool
    hours: Optional[float] = None
    breaks: Optional[float] = None
    holiday: Optional[PublicHoliday] = None


@dataclass(frozen=True)
class AttendanceSummary:
    total_days: int
    expected_work_days: int
    present_days: int
    absent_days: int
    attendance_rate: float
    status_counts: Dict[AttendanceStatus, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ClockAvailability:
    """What the clock-in widget needs to know about today."""

    work_date: date
    resolution: DayResolution
    timesheet: Optional[Timesheet]
    can_work: bool
    should_show_clock: bool
