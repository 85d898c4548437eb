from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .permissions.memory_permission_repository import (
    InMemoryModuleRepository,
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
)
from .permissions.resolver import PermissionResolver
from .schedules.memory_schedule_repository import InMemoryScheduleRepository
from .timeoff.memory_timeoff_repository import (
    InMemoryClosingDayRepository,
    InMemoryHolidayRepository,
    InMemoryLeaveRepository,
    InMemoryVacationRepository,
)
from .timesheets.memory_timesheet_repository import InMemoryTimesheetRepository
from .timesheets.permissions import TimesheetActionResolver
from .timesheets.service import TimesheetService
from .users.memory_user_repository import InMemoryUserRepository


@dataclass(frozen=True)
class Container:
    permissions_repo: InMemoryPermissionRepository
    roles_repo: InMemoryRoleRepository
    modules_repo: InMemoryModuleRepository
    users_repo: InMemoryUserRepository
    schedules_repo: InMemoryScheduleRepository
    vacations_repo: InMemoryVacationRepository
    leaves_repo: InMemoryLeaveRepository
    holidays_repo: InMemoryHolidayRepository
    closing_days_repo: InMemoryClosingDayRepository
    timesheets_repo: InMemoryTimesheetRepository

    permission_resolver: PermissionResolver
    timesheet_actions: TimesheetActionResolver
    attendance_service: AttendanceService
    timesheet_service: TimesheetService


def build_container(*, max_report_days: int = 366) -> Container:
    permissions_repo = InMemoryPermissionRepository()
    roles_repo = InMemoryRoleRepository()
    modules_repo = InMemoryModuleRepository()
    users_repo = InMemoryUserRepository()
    schedules_repo = InMemoryScheduleRepository()
    vacations_repo = InMemoryVacationRepository()
    leaves_repo = InMemoryLeaveRepository()
    holidays_repo = InMemoryHolidayRepository()
    closing_days_repo = InMemoryClosingDayRepository()
    timesheets_repo = InMemoryTimesheetRepository()

    permission_resolver = PermissionResolver(permissions_repo, roles_repo)
    timesheet_actions = TimesheetActionResolver(permission_resolver)
    attendance_service = AttendanceService(
        users_repo,
        timesheets_repo,
        vacations_repo,
        leaves_repo,
        holidays_repo,
        closing_days_repo,
        schedules_repo,
        max_range_days=max_report_days,
    )
    timesheet_service = TimesheetService(timesheets_repo, users_repo, timesheet_actions)

    return Container(
        permissions_repo=permissions_repo,
        roles_repo=roles_repo,
        modules_repo=modules_repo,
        users_repo=users_repo,
        schedules_repo=schedules_repo,
        vacations_repo=vacations_repo,
        leaves_repo=leaves_repo,
        holidays_repo=holidays_repo,
        closing_days_repo=closing_days_repo,
        timesheets_repo=timesheets_repo,
        permission_resolver=permission_resolver,
        timesheet_actions=timesheet_actions,
        attendance_service=attendance_service,
        timesheet_service=timesheet_service,
    )
