from __future__ import annotations

from datetime import date

from src.hr_core.hr_core.attendance.display import (
    attendance_status_display,
    describe_day,
    timesheet_status_display,
)
from src.hr_core.hr_core.attendance.model import AttendanceDayRecord
from src.hr_core.hr_core.core.enums import AttendanceStatus, TimesheetStatus
from src.hr_core.hr_core.database import fixtures
from src.hr_core.hr_core.timeoff.model import PublicHoliday

TODAY = date(2025, 9, 10)
HOLIDAY = PublicHoliday("ph-001", date(2025, 9, 25), "Fiesta mayor")


def _record(status, work_date=date(2025, 9, 3), *, expected=True, timesheet=None, holiday=None):
    return AttendanceDayRecord(
        user_id="user-001",
        user_name="John Doe",
        work_date=work_date,
        timesheet=timesheet,
        status=status,
        is_expected_work_day=expected,
        holiday=holiday,
    )


def test_every_status_has_display_metadata():
    for status in AttendanceStatus:
        display = attendance_status_display(status)
        assert display.label and display.tone
    for status in TimesheetStatus:
        display = timesheet_status_display(status)
        assert display.label and display.tone


def test_timesheet_label_wins_on_a_work_day():
    ts = fixtures.TIMESHEETS[0]
    display = describe_day(_record(AttendanceStatus.PRESENT, ts.work_date, timesheet=ts), today=TODAY)

    assert display.primary == timesheet_status_display(TimesheetStatus.APPROVED)
    assert not display.has_dual_status


def test_timesheet_on_a_day_off_shows_both_statuses():
    ts = fixtures.TIMESHEETS[0]
    record = _record(AttendanceStatus.HOLIDAY, ts.work_date, expected=False, timesheet=ts, holiday=HOLIDAY)

    display = describe_day(record, today=TODAY)

    assert display.has_dual_status
    assert display.primary.label == "Approved"
    assert display.secondary.label == "Fiesta mayor"


def test_holiday_name_replaces_generic_label():
    display = describe_day(_record(AttendanceStatus.HOLIDAY, HOLIDAY.holiday_date, expected=False, holiday=HOLIDAY), today=TODAY)
    assert display.primary.label == "Fiesta mayor"
    assert display.primary.tone == attendance_status_display(AttendanceStatus.HOLIDAY).tone


def test_upcoming_work_day_shows_nothing_yet():
    display = describe_day(_record(AttendanceStatus.PRESENT, date(2025, 9, 12)), today=TODAY)
    assert display.primary is None


def test_missed_day_is_absent():
    display = describe_day(_record(AttendanceStatus.ABSENT), today=TODAY)
    assert display.primary.label == "Absent"
