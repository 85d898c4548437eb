from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

from ..core.enums import EmploymentStatus
from ..permissions.model import Grant


@dataclass(frozen=True)
class EmploymentHistoryEvent:
    """A status change that takes effect on ``effective_date``."""

    status: EmploymentStatus
    effective_date: date
    notes: Optional[str] = None


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object; role ids point into the role catalog and
    ``grants`` are the individual grants added on top of the roles.
    """

    user_id: str
    username: str
    first_name: str
    last_name: str
    employment_history: Tuple[EmploymentHistoryEvent, ...]
    role_ids: Tuple[str, ...] = ()
    grants: Tuple[Grant, ...] = field(default_factory=tuple)
    assigned_schedule_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
