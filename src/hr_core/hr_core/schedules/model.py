from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional, Tuple


@dataclass(frozen=True)
class ScheduleDay:
    """One work day of a weekly template; ``day_of_week`` is 0 = Sunday."""

    day_of_week: int
    start_time: time
    end_time: time
    labouring_minutes: int
    allowed_break_minutes: int = 0


@dataclass(frozen=True)
class Schedule:
    schedule_id: str
    name: str
    days: Tuple[ScheduleDay, ...] = ()
    description: Optional[str] = None

    def day_for(self, day_of_week: int) -> Optional[ScheduleDay]:
        for d in self.days:
            if d.day_of_week == day_of_week:
                return d
        return None
