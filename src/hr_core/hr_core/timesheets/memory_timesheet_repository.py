from __future__ import annotations

import threading
from datetime import date
from typing import Any, Dict, Optional, Sequence, Tuple

from ..core.exceptions import NotFoundError, ValidationError
from ..database.memory_base import InMemoryTable
from .model import Timesheet
from .repository import TimesheetRepository


class InMemoryTimesheetRepository(TimesheetRepository):
    def __init__(self) -> None:
        self._table: InMemoryTable[Timesheet] = InMemoryTable(lambda t: t.timesheet_id, name="timesheet")
        self._by_user_date: Dict[Tuple[str, date], str] = {}
        self._lock = threading.Lock()

    def get(self, timesheet_id: str) -> Optional[Timesheet]:
        return self._table.get(timesheet_id)

    def get_for_user_and_date(self, user_id: str, work_date: date) -> Optional[Timesheet]:
        timesheet_id = self._by_user_date.get((user_id, work_date))
        if timesheet_id is None:
            return None
        return self._table.get(timesheet_id)

    def list(
        self,
        *,
        user_id: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Timesheet]:
        def _match(t: Timesheet) -> bool:
            if user_id is not None and t.user_id != user_id:
                return False
            if start is not None and t.work_date < start:
                return False
            if end is not None and t.work_date > end:
                return False
            return True

        return tuple(sorted(self._table.list(_match), key=lambda t: (t.work_date, t.user_id)))

    def add(self, timesheet: Timesheet) -> Timesheet:
        key = (timesheet.user_id, timesheet.work_date)
        with self._lock:
            if key in self._by_user_date:
                raise ValidationError(
                    f"User {timesheet.user_id} already has a timesheet for {timesheet.work_date.isoformat()}"
                )
            self._table.add(timesheet)
            self._by_user_date[key] = timesheet.timesheet_id
        return timesheet

    def update(self, timesheet_id: str, **changes: Any) -> Timesheet:
        if "user_id" in changes or "work_date" in changes:
            raise ValidationError("Timesheet owner and date cannot change")
        if self._table.get(timesheet_id) is None:
            raise NotFoundError(f"Timesheet {timesheet_id} not found")
        return self._table.update(timesheet_id, **changes)
