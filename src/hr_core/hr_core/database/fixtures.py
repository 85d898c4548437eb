"""Demo reference data.

Immutable tuples only; ``bootstrap.load_fixtures`` copies them into the
repositories, which are the only place records are replaced.
"""

from __future__ import annotations

from datetime import date, datetime, time

from ..core.enums import EmploymentStatus, LeaveType, RequestStatus, TimesheetStatus
from ..permissions.model import Grant, ModuleDefinition, PermissionDefinition, RoleDefinition
from ..schedules.model import Schedule, ScheduleDay
from ..timeoff.model import ClosingDay, LeaveOfAbsence, PublicHoliday, Vacation
from ..timesheets.model import Break, Timesheet
from ..users.model import EmploymentHistoryEvent, User

_TIMESHEET_ACTIONS = (
    "create",
    "read",
    "update",
    "update_approved",
    "delete",
    "delete_approved",
    "approve",
    "request_changes",
    "message",
)

MODULES = (
    ModuleDefinition(id="settings", section_ids=("app", "company")),
    ModuleDefinition(id="hr", section_ids=("users", "attendance", "schedules", "vacations", "leave")),
    ModuleDefinition(id="files", section_ids=("downloads",)),
)

PERMISSIONS = (
    PermissionDefinition(
        id="super-user",
        module_id="settings",
        section_id="app",
        actions=("true",),
        name="Super User",
        description="Full system access",
    ),
    PermissionDefinition(
        id="settings-manage",
        module_id="settings",
        section_id="company",
        actions=("read", "update"),
        name="Company Settings",
    ),
    PermissionDefinition(
        id="hr-users-manage",
        module_id="hr",
        section_id="users",
        actions=("create", "read", "update", "delete"),
        name="User Management",
    ),
    PermissionDefinition(
        id="hr-attendance-manage-owns",
        module_id="hr",
        section_id="attendance",
        actions=_TIMESHEET_ACTIONS,
        name="Own Attendance",
        description="Create/view/update/delete own timesheets",
    ),
    PermissionDefinition(
        id="hr-attendance-manage-others",
        module_id="hr",
        section_id="attendance",
        actions=_TIMESHEET_ACTIONS,
        name="Others Attendance",
        description="Create/view/update/delete other employees' timesheets",
    ),
    PermissionDefinition(
        id="hr-attendance-clock",
        module_id="hr",
        section_id="attendance",
        actions=("true",),
        name="Clock In/Out",
    ),
    PermissionDefinition(
        id="hr-schedules-manage",
        module_id="hr",
        section_id="schedules",
        actions=("create", "read", "update", "delete"),
        name="Schedule Management",
    ),
    PermissionDefinition(
        id="files-downloads-download",
        module_id="files",
        section_id="downloads",
        actions=("pdf", "docx", "csv", "xlsx"),
        name="Download Files",
    ),
)

ROLES = (
    RoleDefinition(
        id="role-001",
        name="HR Manager",
        grants=(
            Grant("hr-users-manage", frozenset({"create", "read", "update", "delete"})),
            Grant(
                "hr-attendance-manage-others",
                frozenset({"create", "read", "update", "delete", "approve", "request_changes", "message"}),
            ),
            Grant("hr-schedules-manage", frozenset({"create", "read", "update", "delete"})),
        ),
    ),
    RoleDefinition(
        id="role-002",
        name="Developer",
        grants=(
            Grant("hr-attendance-manage-owns", frozenset({"create", "read", "update", "delete"})),
            Grant("hr-attendance-clock", frozenset({"true"})),
        ),
    ),
    RoleDefinition(
        id="role-003",
        name="Admin",
        grants=(
            Grant("hr-users-manage", frozenset({"create", "read", "update", "delete"})),
            Grant(
                "hr-attendance-manage-others",
                frozenset(
                    {
                        "create",
                        "read",
                        "update",
                        "update_approved",
                        "delete",
                        "delete_approved",
                        "approve",
                        "request_changes",
                        "message",
                    }
                ),
            ),
            Grant("hr-schedules-manage", frozenset({"create", "read", "update", "delete"})),
            Grant("settings-manage", frozenset({"read", "update"})),
        ),
    ),
    RoleDefinition(
        id="role-004",
        name="Team Lead",
        grants=(
            Grant("hr-attendance-manage-others", frozenset({"read", "approve", "request_changes", "message"})),
            Grant("hr-schedules-manage", frozenset({"read"})),
        ),
    ),
    RoleDefinition(
        id="role-005",
        name="Employee",
        grants=(
            Grant("hr-attendance-manage-owns", frozenset({"create", "read"})),
            Grant("hr-attendance-clock", frozenset({"true"})),
        ),
    ),
)

_STANDARD_DAYS = tuple(
    ScheduleDay(day_of_week=d, start_time=time(9, 0), end_time=time(17, 0), labouring_minutes=480, allowed_break_minutes=60)
    for d in (1, 2, 3, 4, 5)
)
_FLEX_DAYS = tuple(
    ScheduleDay(day_of_week=d, start_time=time(8, 0), end_time=time(16, 0), labouring_minutes=480, allowed_break_minutes=60)
    for d in (1, 2, 3, 4, 5)
)

SCHEDULES = (
    Schedule(
        schedule_id="schedule-001",
        name="Standard Office Hours",
        days=_STANDARD_DAYS,
        description="Monday to Friday, 09:00 to 17:00",
    ),
    Schedule(
        schedule_id="schedule-002",
        name="Flexible Hours",
        days=_FLEX_DAYS,
        description="Monday to Friday, 08:00 to 16:00",
    ),
    Schedule(
        schedule_id="schedule-003",
        name="Part Time",
        days=(
            ScheduleDay(day_of_week=2, start_time=time(9, 0), end_time=time(13, 0), labouring_minutes=240),
            ScheduleDay(day_of_week=4, start_time=time(9, 0), end_time=time(13, 0), labouring_minutes=240),
        ),
        description="Tuesday and Thursday mornings",
    ),
)

USERS = (
    User(
        user_id="user-001",
        username="john.doe",
        first_name="John",
        last_name="Doe",
        employment_history=(
            EmploymentHistoryEvent(EmploymentStatus.ACTIVE, date(2023, 1, 15), "Started as Frontend Developer"),
        ),
        role_ids=("role-001", "role-002"),
        assigned_schedule_id="schedule-001",
    ),
    User(
        user_id="user-002",
        username="jane.smith",
        first_name="Jane",
        last_name="Smith",
        employment_history=(
            EmploymentHistoryEvent(EmploymentStatus.ACTIVE, date(2023, 6, 1), "Promoted to Senior Frontend Developer"),
        ),
        role_ids=("role-002",),
        assigned_schedule_id="schedule-001",
    ),
    User(
        user_id="user-003",
        username="mike.wilson",
        first_name="Mike",
        last_name="Wilson",
        employment_history=(
            EmploymentHistoryEvent(EmploymentStatus.ACTIVE, date(2023, 1, 1)),
            EmploymentHistoryEvent(EmploymentStatus.PROBATION, date(2024, 1, 10), "Started probation period"),
            EmploymentHistoryEvent(EmploymentStatus.ACTIVE, date(2025, 5, 30)),
        ),
        role_ids=("role-005",),
        grants=(Grant("files-downloads-download", frozenset({"pdf", "csv"})),),
        assigned_schedule_id="schedule-002",
    ),
    User(
        user_id="user-004",
        username="admin",
        first_name="Ada",
        last_name="Admin",
        employment_history=(EmploymentHistoryEvent(EmploymentStatus.ACTIVE, date(2022, 3, 20)),),
        role_ids=("role-003",),
        grants=(Grant("super-user", frozenset({"true"})),),
        assigned_schedule_id="schedule-001",
    ),
    User(
        user_id="user-005",
        username="sam.lead",
        first_name="Sam",
        last_name="Lead",
        employment_history=(EmploymentHistoryEvent(EmploymentStatus.ACTIVE, date(2022, 9, 1)),),
        role_ids=("role-004", "role-002"),
        assigned_schedule_id="schedule-003",
    ),
    User(
        user_id="user-006",
        username="tom.former",
        first_name="Tom",
        last_name="Former",
        employment_history=(
            EmploymentHistoryEvent(EmploymentStatus.ACTIVE, date(2022, 1, 10)),
            EmploymentHistoryEvent(EmploymentStatus.SUSPENDED, date(2024, 11, 4)),
            EmploymentHistoryEvent(EmploymentStatus.TERMINATED, date(2025, 2, 1)),
        ),
        role_ids=("role-005",),
        assigned_schedule_id="schedule-001",
    ),
)

PUBLIC_HOLIDAYS = (
    PublicHoliday("ph-001", date(2025, 9, 25), "Fiesta mayor"),
    PublicHoliday("ph-002", date(2024, 7, 4), "Independence Day"),
    PublicHoliday("ph-003", date(2025, 12, 25), "Christmas Day"),
)

CLOSING_DAYS = (
    ClosingDay("cd-001", date(2025, 12, 22), date(2025, 12, 31), "Christmas Closing"),
    ClosingDay("cd-002", date(2024, 8, 15), date(2024, 8, 16), "Company retreat days"),
)

VACATIONS = (
    Vacation("vac-001", "user-001", date(2024, 2, 15), date(2024, 2, 20), RequestStatus.PENDING, days=4),
    Vacation("vac-002", "user-002", date(2025, 9, 8), date(2025, 9, 19), RequestStatus.APPROVED, days=10),
    Vacation("vac-003", "user-003", date(2025, 10, 6), date(2025, 10, 10), RequestStatus.REJECTED, days=5),
)

LEAVES = (
    LeaveOfAbsence("loa-001", "user-002", LeaveType.MEDICAL, date(2025, 10, 1), date(2025, 10, 14), RequestStatus.APPROVED),
    LeaveOfAbsence("loa-002", "user-003", LeaveType.SABBATICAL, date(2026, 1, 5), None, RequestStatus.PENDING),
)

TIMESHEETS = (
    Timesheet(
        timesheet_id="ts-001",
        user_id="user-001",
        work_date=date(2025, 9, 1),
        status=TimesheetStatus.APPROVED,
        start_time=datetime(2025, 9, 1, 9, 0),
        end_time=datetime(2025, 9, 1, 17, 30),
        breaks=(Break(datetime(2025, 9, 1, 12, 0), datetime(2025, 9, 1, 13, 0), 60),),
        total_minutes=450,
        regular_minutes=450,
        break_minutes=60,
        reviewed_by="user-004",
        reviewed_at=datetime(2025, 9, 2, 10, 0),
    ),
    Timesheet(
        timesheet_id="ts-002",
        user_id="user-001",
        work_date=date(2025, 9, 2),
        status=TimesheetStatus.PENDING,
        start_time=datetime(2025, 9, 2, 8, 45),
        end_time=datetime(2025, 9, 2, 18, 15),
        breaks=(Break(datetime(2025, 9, 2, 12, 30), datetime(2025, 9, 2, 13, 30), 60),),
        total_minutes=510,
        regular_minutes=480,
        overtime_minutes=30,
        break_minutes=60,
    ),
    Timesheet(
        timesheet_id="ts-003",
        user_id="user-002",
        work_date=date(2025, 9, 2),
        status=TimesheetStatus.REQUIRES_MODIFICATION,
        start_time=datetime(2025, 9, 2, 9, 0),
        end_time=datetime(2025, 9, 2, 17, 0),
        breaks=(Break(datetime(2025, 9, 2, 12, 0), datetime(2025, 9, 2, 12, 45), 45),),
        total_minutes=435,
        regular_minutes=435,
        break_minutes=45,
        reviewed_by="user-001",
        reviewed_at=datetime(2025, 9, 3, 9, 30),
    ),
    Timesheet(
        timesheet_id="ts-004",
        user_id="user-003",
        work_date=date(2025, 9, 3),
        status=TimesheetStatus.PENDING,
        start_time=datetime(2025, 9, 3, 8, 0),
        end_time=datetime(2025, 9, 3, 16, 30),
        breaks=(Break(datetime(2025, 9, 3, 12, 0), datetime(2025, 9, 3, 12, 30), 30),),
        total_minutes=480,
        regular_minutes=480,
        break_minutes=30,
    ),
)
