from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import ClosingDay, LeaveOfAbsence, PublicHoliday, Vacation


class VacationRepository(Protocol):
    def get(self, vacation_id: str) -> Optional[Vacation]:
        raise NotImplementedError

    def list(self, *, user_id: Optional[str] = None) -> Sequence[Vacation]:
        raise NotImplementedError

    def update(self, vacation_id: str, **changes: Any) -> Vacation:
        raise NotImplementedError


class LeaveRepository(Protocol):
    def get(self, leave_id: str) -> Optional[LeaveOfAbsence]:
        raise NotImplementedError

    def list(self, *, user_id: Optional[str] = None) -> Sequence[LeaveOfAbsence]:
        raise NotImplementedError

    def update(self, leave_id: str, **changes: Any) -> LeaveOfAbsence:
        raise NotImplementedError


class HolidayRepository(Protocol):
    def list(self) -> Sequence[PublicHoliday]:
        raise NotImplementedError


class ClosingDayRepository(Protocol):
    def list(self) -> Sequence[ClosingDay]:
        raise NotImplementedError
