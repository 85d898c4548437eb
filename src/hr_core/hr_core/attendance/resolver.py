"""Single authoritative attendance status for one user on one day.

Rules are checked in a fixed order and the first match wins:

1. not employed (pending start or terminated)
2. suspended
3. approved leave of absence
4. no schedule day for that weekday (or no schedule at all)
5. public holiday
6. office closing day
7. approved vacation
8. expected work day: present with a timesheet or when not yet past,
   absent otherwise
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, day_of_week, is_date_in_range, normalize_date, today_local
from ..core.enums import AttendanceStatus, EmploymentStatus, RequestStatus
from ..schedules.model import Schedule
from ..timeoff.model import PublicHoliday
from ..timesheets.model import Timesheet
from ..users.employment import status_on_date
from ..users.model import User
from .model import AttendanceContext, DayResolution


def _off(status: AttendanceStatus, holiday: Optional[PublicHoliday] = None) -> DayResolution:
    return DayResolution(status=status, is_expected_work_day=False, holiday=holiday)


def find_schedule(user: User, context: AttendanceContext) -> Optional[Schedule]:
    if user.assigned_schedule_id is None:
        return None
    for schedule in context.schedules:
        if schedule.schedule_id == user.assigned_schedule_id:
            return schedule
    return None


def find_holiday(day: date, context: AttendanceContext) -> Optional[PublicHoliday]:
    for holiday in context.holidays:
        if normalize_date(holiday.holiday_date) == day:
            return holiday
    return None


def has_approved_leave(user: User, day: date, context: AttendanceContext) -> bool:
    return any(
        lv.user_id == user.user_id
        and lv.status == RequestStatus.APPROVED
        and is_date_in_range(day, lv.start_date, lv.end_date)
        for lv in context.leaves
    )


def has_approved_vacation(user: User, day: date, context: AttendanceContext) -> bool:
    return any(
        v.user_id == user.user_id
        and v.status == RequestStatus.APPROVED
        and is_date_in_range(day, v.start_date, v.end_date)
        for v in context.vacations
    )


def is_closing_day(day: date, context: AttendanceContext) -> bool:
    return any(is_date_in_range(day, c.start_date, c.end_date) for c in context.closing_days)


def resolve_day(
    user: User,
    on: DateLike,
    timesheet: Optional[Timesheet],
    context: AttendanceContext,
    *,
    today: Optional[DateLike] = None,
) -> DayResolution:
    day = normalize_date(on)

    employment = status_on_date(user, day)
    if employment in (EmploymentStatus.PENDING_START, EmploymentStatus.TERMINATED):
        return _off(AttendanceStatus.NOT_EMPLOYED)
    if employment == EmploymentStatus.SUSPENDED:
        return _off(AttendanceStatus.SUSPENDED)

    if has_approved_leave(user, day, context):
        return _off(AttendanceStatus.LOA)

    schedule = find_schedule(user, context)
    if schedule is None or schedule.day_for(day_of_week(day)) is None:
        return _off(AttendanceStatus.OFF_SCHEDULE)

    holiday = find_holiday(day, context)
    if holiday is not None:
        return _off(AttendanceStatus.HOLIDAY, holiday)

    if is_closing_day(day, context):
        return _off(AttendanceStatus.CLOSED)

    if has_approved_vacation(user, day, context):
        return _off(AttendanceStatus.VACATION)

    current = normalize_date(today) if today is not None else today_local()
    if timesheet is not None or day >= current:
        return DayResolution(status=AttendanceStatus.PRESENT, is_expected_work_day=True)
    return DayResolution(status=AttendanceStatus.ABSENT, is_expected_work_day=True)
