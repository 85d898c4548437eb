from __future__ import annotations

from datetime import date
from typing import Any, Optional, Protocol, Sequence

from .model import Timesheet


class TimesheetRepository(Protocol):
    """Timesheet store; (user_id, work_date) is a unique key."""

    def get(self, timesheet_id: str) -> Optional[Timesheet]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[Timesheet]:
        raise NotImplementedError

    def list(
        self,
        *,
        user_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Timesheet]:
        raise NotImplementedError

    def add(self, timesheet: Timesheet) -> Timesheet:
        raise NotImplementedError

    def update(self, timesheet_id: str, **changes: Any) -> Timesheet:
        """Replace fields of a timesheet and return the new snapshot."""

        raise NotImplementedError
