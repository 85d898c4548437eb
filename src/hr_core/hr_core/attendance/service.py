from __future__ import annotations

import logging
from collections import Counter
from datetime import date, datetime
from typing import List, Optional, Sequence

from ..common.datetime_utils import iter_days, now_local, today_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..schedules.repository import ScheduleRepository
from ..timeoff.repository import ClosingDayRepository, HolidayRepository, LeaveRepository, VacationRepository
from ..timesheets.repository import TimesheetRepository
from ..users.employment import is_employed_on_date
from ..users.model import User
from ..users.repository import UserRepository
from .model import AttendanceContext, AttendanceDayRecord, AttendanceSummary, ClockAvailability
from .resolver import has_approved_leave, has_approved_vacation, is_closing_day, resolve_day

logger = logging.getLogger(__name__)


def _hours(minutes: int) -> Optional[float]:
    if not minutes:
        return None
    return round(minutes / 60, 1)


class AttendanceService:
    """Use case: attendance listing and today's clock-in state for a user."""

    def __init__(
        self,
        users: UserRepository,
        timesheets: TimesheetRepository,
        vacations: VacationRepository,
        leaves: LeaveRepository,
        holidays: HolidayRepository,
        closing_days: ClosingDayRepository,
        schedules: ScheduleRepository,
        *,
        max_range_days: int = 366,
    ):
        self._users = users
        self._timesheets = timesheets
        self._vacations = vacations
        self._leaves = leaves
        self._holidays = holidays
        self._closing_days = closing_days
        self._schedules = schedules
        self._max_range_days = int(max_range_days)

    def build_context(self, *, user_id: Optional[str] = None) -> AttendanceContext:
        return AttendanceContext(
            vacations=tuple(self._vacations.list(user_id=user_id)),
            leaves=tuple(self._leaves.list(user_id=user_id)),
            holidays=tuple(self._holidays.list()),
            closing_days=tuple(self._closing_days.list()),
            schedules=tuple(self._schedules.list()),
        )

    def _require_user(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def build_records(
        self,
        user_id: str,
        start: date,
        end: date,
        *,
        today: Optional[date] = None,
    ) -> List[AttendanceDayRecord]:
        if end < start:
            raise ValidationError("End date must be on or after start date")
        if (end - start).days + 1 > self._max_range_days:
            raise ValidationError(f"Date range is limited to {self._max_range_days} days")

        user = self._require_user(user_id)
        today = today or today_local()
        context = self.build_context(user_id=user.user_id)
        by_date = {t.work_date: t for t in self._timesheets.list(user_id=user.user_id, start=start, end=end)}

        records: List[AttendanceDayRecord] = []
        for day in iter_days(start, end):
            timesheet = by_date.get(day)
            resolution = resolve_day(user, day, timesheet, context, today=today)
            records.append(
                AttendanceDayRecord(
                    user_id=user.user_id,
                    user_name=user.full_name,
                    work_date=day,
                    timesheet=timesheet,
                    status=resolution.status,
                    is_expected_work_day=resolution.is_expected_work_day,
                    hours=_hours(timesheet.total_minutes) if timesheet else None,
                    breaks=_hours(timesheet.break_minutes) if timesheet else None,
                    holiday=resolution.holiday,
                )
            )

        logger.debug("Built %d attendance records for user %s (%s..%s)", len(records), user.user_id, start, end)
        return records

    @staticmethod
    def summarize(records: Sequence[AttendanceDayRecord]) -> AttendanceSummary:
        counts = Counter(r.status for r in records)
        expected = sum(1 for r in records if r.is_expected_work_day)
        present = counts.get(AttendanceStatus.PRESENT, 0)
        absent = counts.get(AttendanceStatus.ABSENT, 0)
        return AttendanceSummary(
            total_days=len(records),
            expected_work_days=expected,
            present_days=present,
            absent_days=absent,
            attendance_rate=round(present / expected, 4) if expected else 0.0,
            status_counts={status: counts.get(status, 0) for status in AttendanceStatus},
        )

    def clock_availability(self, user_id: str, *, now: Optional[datetime] = None) -> ClockAvailability:
        now = now or now_local()
        today = now.date()

        user = self._require_user(user_id)
        context = self.build_context(user_id=user.user_id)
        timesheet = self._timesheets.get_for_user_and_date(user.user_id, today)
        resolution = resolve_day(user, today, timesheet, context, today=today)

        # Holidays and off-schedule days still allow clocking in.
        can_work = (
            is_employed_on_date(user, today)
            and not has_approved_leave(user, today, context)
            and not is_closing_day(today, context)
            and not has_approved_vacation(user, today, context)
        )
        show_clock = can_work or (timesheet is not None and is_employed_on_date(user, timesheet.work_date))

        return ClockAvailability(
            work_date=today,
            resolution=resolution,
            timesheet=timesheet,
            can_work=can_work,
            should_show_clock=show_clock,
        )
