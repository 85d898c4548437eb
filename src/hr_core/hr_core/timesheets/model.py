from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from ..core.enums import TimesheetStatus


@dataclass(frozen=True)
class Break:
    start_time: datetime
    end_time: datetime
    total_minutes: int


@dataclass(frozen=True)
class Message:
    user_id: str
    text: str
    sent_at: datetime
    is_answered: bool = False


@dataclass(frozen=True)
class Timesheet:
    """Domain entity: one user's worked time for one day."""

    timesheet_id: str
    user_id: str
    work_date: date
    status: TimesheetStatus
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    breaks: Tuple[Break, ...] = ()
    total_minutes: int = 0
    regular_minutes: int = 0
    overtime_minutes: int = 0
    break_minutes: int = 0
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    messages: Tuple[Message, ...] = ()
