from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Schedule


class ScheduleRepository(Protocol):
    def get(self, schedule_id: str) -> Optional[Schedule]:
        raise NotImplementedError

    def list(self) -> Sequence[Schedule]:
        raise NotImplementedError

    def add(self, schedule: Schedule) -> Schedule:
        raise NotImplementedError

    def update(self, schedule_id: str, **changes: Any) -> Schedule:
        """Replace fields of a schedule and return the new snapshot."""

        raise NotImplementedError
