from __future__ import annotations

from enum import Enum


class EmploymentStatus(str, Enum):
    """Employment state carried by employment history events."""

    PENDING_START = "pending_start"
    ACTIVE = "active"
    PROBATION = "probation"
    SUSPENDED = "suspended"
    TERMINATED = "terminated"


class RequestStatus(str, Enum):
    """Approval state of vacation and leave-of-absence requests."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class LeaveType(str, Enum):
    MEDICAL = "medical"
    FAMILY_EMERGENCY = "family_emergency"
    MILITARY_SERVICE = "military_service"
    EDUCATIONAL = "educational"
    SABBATICAL = "sabbatical"
    OTHER = "other"


class TimesheetStatus(str, Enum):
    """Review state of a submitted timesheet."""

    PENDING = "pending"
    APPROVED = "approved"
    REQUIRES_MODIFICATION = "requires_modification"
    REJECTED = "rejected"


class AttendanceStatus(str, Enum):
    """Resolved status of one employee on one calendar day."""

    PRESENT = "present"
    ABSENT = "absent"
    VACATION = "vacation"
    LOA = "loa"
    HOLIDAY = "holiday"
    CLOSED = "closed"
    OFF_SCHEDULE = "off_schedule"
    NOT_EMPLOYED = "not_employed"
    SUSPENDED = "suspended"
