from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Tuple

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.enums import TimesheetStatus
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.employment import is_employed_on_date
from ..users.model import User
from ..users.repository import UserRepository
from .model import Message, Timesheet
from .permissions import TimesheetActionResolver, TimesheetActions
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class TimesheetService:
    """Use case: review workflow of submitted timesheets.

    Every transition asks the action resolver first and writes a new snapshot
    through the repository.
    """

    def __init__(
        self,
        timesheets: TimesheetRepository,
        users: UserRepository,
        actions: TimesheetActionResolver,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._timesheets = timesheets
        self._users = users
        self._actions = actions
        self._clock = clock or now_local

    def _load(self, timesheet_id: str, acting_user_id: str) -> Tuple[Timesheet, User, TimesheetActions]:
        timesheet = self._timesheets.get(timesheet_id)
        if timesheet is None:
            raise NotFoundError(f"Timesheet {timesheet_id} not found")

        acting = self._users.get(acting_user_id)
        if acting is None:
            raise NotFoundError(f"User {acting_user_id} not found")

        target = self._users.get(timesheet.user_id)
        employed = is_employed_on_date(target, timesheet.work_date)
        return timesheet, acting, self._actions.actions_for(timesheet, target, acting, employed)

    def actions_for_timesheet(self, timesheet_id: str, acting_user_id: str) -> TimesheetActions:
        return self._load(timesheet_id, acting_user_id)[2]

    def _review(
        self,
        timesheet: Timesheet,
        reviewer: User,
        status: TimesheetStatus,
        comment: Optional[str],
    ) -> Timesheet:
        now = self._clock()
        messages = timesheet.messages
        if comment:
            messages = messages + (Message(user_id=reviewer.user_id, text=comment, sent_at=now),)

        updated = self._timesheets.update(
            timesheet.timesheet_id,
            status=status,
            reviewed_by=reviewer.user_id,
            reviewed_at=now,
            messages=messages,
        )
        logger.info(
            "Timesheet %s %s -> %s by %s",
            timesheet.timesheet_id,
            timesheet.status.value,
            status.value,
            reviewer.user_id,
        )
        return updated

    def approve(self, timesheet_id: str, reviewer_id: str, comment: Optional[str] = None) -> Timesheet:
        timesheet, reviewer, actions = self._load(timesheet_id, reviewer_id)
        if not actions.can_approve:
            raise AuthorizationError("You are not allowed to approve this timesheet")
        return self._review(timesheet, reviewer, TimesheetStatus.APPROVED, optional_text(comment))

    def reject(self, timesheet_id: str, reviewer_id: str, comment: Optional[str] = None) -> Timesheet:
        """Send the timesheet back to its owner, who may fix and resubmit it."""
        timesheet, reviewer, actions = self._load(timesheet_id, reviewer_id)
        if not actions.can_approve:
            raise AuthorizationError("You are not allowed to reject this timesheet")
        return self._review(timesheet, reviewer, TimesheetStatus.REQUIRES_MODIFICATION, optional_text(comment))

    def request_changes(self, timesheet_id: str, reviewer_id: str, comment: str) -> Timesheet:
        comment = require_non_empty(comment, "Comment")
        timesheet, reviewer, actions = self._load(timesheet_id, reviewer_id)
        if not actions.can_request_changes:
            raise AuthorizationError("You are not allowed to request changes on this timesheet")
        return self._review(timesheet, reviewer, TimesheetStatus.REQUIRES_MODIFICATION, comment)

    def resubmit(self, timesheet_id: str, user_id: str) -> Timesheet:
        timesheet, _, actions = self._load(timesheet_id, user_id)
        if not actions.can_resubmit:
            raise AuthorizationError("Timesheet cannot be resubmitted")

        updated = self._timesheets.update(
            timesheet_id,
            status=TimesheetStatus.PENDING,
            reviewed_by=None,
            reviewed_at=None,
        )
        logger.info("Timesheet %s resubmitted by %s", timesheet_id, user_id)
        return updated
