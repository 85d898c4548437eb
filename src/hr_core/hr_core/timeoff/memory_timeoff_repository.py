from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import ClosingDay, LeaveOfAbsence, PublicHoliday, Vacation
from .repository import ClosingDayRepository, HolidayRepository, LeaveRepository, VacationRepository


class InMemoryVacationRepository(VacationRepository):
    def __init__(self) -> None:
        self._table: InMemoryTable[Vacation] = InMemoryTable(lambda v: v.vacation_id, name="vacation")

    def get(self, vacation_id: str) -> Optional[Vacation]:
        return self._table.get(vacation_id)

    def list(self, *, user_id: Optional[str] = None) -> Sequence[Vacation]:
        if user_id is None:
            return self._table.list()
        return self._table.list(lambda v: v.user_id == user_id)

    def add(self, vacation: Vacation) -> Vacation:
        return self._table.add(vacation)

    def update(self, vacation_id: str, **changes: Any) -> Vacation:
        return self._table.update(vacation_id, **changes)


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self) -> None:
        self._table: InMemoryTable[LeaveOfAbsence] = InMemoryTable(lambda lv: lv.leave_id, name="leave")

    def get(self, leave_id: str) -> Optional[LeaveOfAbsence]:
        return self._table.get(leave_id)

    def list(self, *, user_id: Optional[str] = None) -> Sequence[LeaveOfAbsence]:
        if user_id is None:
            return self._table.list()
        return self._table.list(lambda lv: lv.user_id == user_id)

    def add(self, leave: LeaveOfAbsence) -> LeaveOfAbsence:
        return self._table.add(leave)

    def update(self, leave_id: str, **changes: Any) -> LeaveOfAbsence:
        return self._table.update(leave_id, **changes)


class InMemoryHolidayRepository(HolidayRepository):
    def __init__(self) -> None:
        self._table: InMemoryTable[PublicHoliday] = InMemoryTable(lambda h: h.holiday_id, name="holiday")

    def list(self) -> Sequence[PublicHoliday]:
        return tuple(sorted(self._table.list(), key=lambda h: h.holiday_date))

    def add(self, holiday: PublicHoliday) -> PublicHoliday:
        return self._table.add(holiday)


class InMemoryClosingDayRepository(ClosingDayRepository):
    def __init__(self) -> None:
        self._table: InMemoryTable[ClosingDay] = InMemoryTable(lambda c: c.closing_id, name="closing day")

    def list(self) -> Sequence[ClosingDay]:
        return tuple(sorted(self._table.list(), key=lambda c: c.start_date))

    def add(self, closing: ClosingDay) -> ClosingDay:
        return self._table.add(closing)
