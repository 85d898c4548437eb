from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class Vacation:
    vacation_id: str
    user_id: str
    start_date: date
    end_date: Optional[date]
    status: RequestStatus
    days: int = 0


@dataclass(frozen=True)
class LeaveOfAbsence:
    """Leave of absence; no ``end_date`` means it is still ongoing."""

    leave_id: str
    user_id: str
    leave_type: LeaveType
    start_date: date
    end_date: Optional[date]
    status: RequestStatus


@dataclass(frozen=True)
class PublicHoliday:
    holiday_id: str
    holiday_date: date
    name: Optional[str] = None


@dataclass(frozen=True)
class ClosingDay:
    """Office-wide closure, both ends inclusive."""

    closing_id: str
    start_date: date
    end_date: date
    description: Optional[str] = None
