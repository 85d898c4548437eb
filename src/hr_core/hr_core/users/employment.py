"""Employment state of a user on a given day.

The history is read as a sequence of status changes: the latest event whose
effective date is on or before the query day wins. A user with no such event
has not started yet.
"""

from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import DateLike, normalize_date
from ..core.enums import EmploymentStatus
from .model import User

_NOT_EMPLOYED = frozenset(
    {EmploymentStatus.PENDING_START, EmploymentStatus.TERMINATED, EmploymentStatus.SUSPENDED}
)


def status_on_date(user: Optional[User], on: DateLike) -> EmploymentStatus:
    if user is None:
        return EmploymentStatus.PENDING_START

    day = normalize_date(on)
    history = sorted(
        user.employment_history,
        key=lambda e: normalize_date(e.effective_date),
        reverse=True,
    )
    for event in history:
        if normalize_date(event.effective_date) <= day:
            return event.status
    return EmploymentStatus.PENDING_START


def is_employed_on_date(user: Optional[User], on: DateLike) -> bool:
    return status_on_date(user, on) not in _NOT_EMPLOYED
