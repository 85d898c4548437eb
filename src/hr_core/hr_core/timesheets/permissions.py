from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import OTHERS_TIMESHEETS_PERMISSION, OWN_TIMESHEETS_PERMISSION
from ..core.enums import TimesheetStatus
from ..permissions.resolver import PermissionResolver
from ..users.model import User
from .model import Timesheet

_PENDING = frozenset({TimesheetStatus.PENDING, TimesheetStatus.REQUIRES_MODIFICATION})


@dataclass(frozen=True)
class TimesheetActions:
    can_read: bool = False
    can_create: bool = False
    can_edit: bool = False
    can_delete: bool = False
    can_approve: bool = False
    can_request_changes: bool = False
    can_request_from_others: bool = False
    can_resubmit: bool = False


NO_ACTIONS = TimesheetActions()


class TimesheetActionResolver:
    """Projects the acting user's permissions onto one timesheet.

    Own timesheets are gated by the "owns" permission, everyone else's by the
    "others" permission. A timesheet that does not exist yet has no owner, so
    the "others" permission governs it. Nothing beyond read, create and
    request-from-others is allowed while the timesheet does not exist or its
    owner is not employed.
    """

    def __init__(self, permissions: PermissionResolver):
        self._permissions = permissions

    def actions_for(
        self,
        timesheet: Optional[Timesheet],
        target_user: Optional[User],
        acting_user: Optional[User],
        is_target_employed: bool = True,
    ) -> TimesheetActions:
        if target_user is None or acting_user is None:
            return NO_ACTIONS

        is_own = timesheet is not None and timesheet.user_id == acting_user.user_id
        namespace = OWN_TIMESHEETS_PERMISSION if is_own else OTHERS_TIMESHEETS_PERMISSION

        def allowed(action: str) -> bool:
            return self._permissions.has_permission(acting_user, namespace, action)

        can_read = allowed("read")
        can_create = is_target_employed and allowed("create")
        can_request_from_others = (
            is_target_employed
            and not is_own
            and self._permissions.has_permission(acting_user, OTHERS_TIMESHEETS_PERMISSION, "request_changes")
        )

        if timesheet is None or not is_target_employed:
            return TimesheetActions(
                can_read=can_read,
                can_create=can_create,
                can_request_from_others=can_request_from_others,
            )

        status = timesheet.status
        is_pending = status in _PENDING
        is_approved = status == TimesheetStatus.APPROVED

        return TimesheetActions(
            can_read=can_read,
            can_create=can_create,
            can_request_from_others=can_request_from_others,
            can_approve=is_pending and allowed("approve"),
            # an entry already flagged for changes is not flagged again
            can_request_changes=(
                is_pending and status != TimesheetStatus.REQUIRES_MODIFICATION and allowed("request_changes")
            ),
            can_delete=allowed("delete_approved" if is_approved else "delete"),
            can_edit=can_read and allowed("update_approved" if is_approved else "update"),
            can_resubmit=is_own and status == TimesheetStatus.REQUIRES_MODIFICATION,
        )
