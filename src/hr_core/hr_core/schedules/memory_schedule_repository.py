from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.memory_base import InMemoryTable
from .model import Schedule
from .repository import ScheduleRepository


class InMemoryScheduleRepository(ScheduleRepository):
    def __init__(self) -> None:
        self._table: InMemoryTable[Schedule] = InMemoryTable(lambda s: s.schedule_id, name="schedule")

    def get(self, schedule_id: str) -> Optional[Schedule]:
        return self._table.get(schedule_id)

    def list(self) -> Sequence[Schedule]:
        return self._table.list()

    def add(self, schedule: Schedule) -> Schedule:
        return self._table.add(schedule)

    def update(self, schedule_id: str, **changes: Any) -> Schedule:
        return self._table.update(schedule_id, **changes)
