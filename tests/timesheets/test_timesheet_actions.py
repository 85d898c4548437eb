from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.hr_core.hr_core.core.constants import OWN_TIMESHEETS_PERMISSION
from src.hr_core.hr_core.core.enums import TimesheetStatus
from src.hr_core.hr_core.database import fixtures
from src.hr_core.hr_core.permissions.memory_permission_repository import (
    InMemoryPermissionRepository,
    InMemoryRoleRepository,
)
from src.hr_core.hr_core.permissions.model import Grant
from src.hr_core.hr_core.permissions.resolver import PermissionResolver
from src.hr_core.hr_core.timesheets.permissions import NO_ACTIONS, TimesheetActionResolver

USERS = {u.user_id: u for u in fixtures.USERS}
TIMESHEETS = {t.timesheet_id: t for t in fixtures.TIMESHEETS}


@pytest.fixture
def resolver() -> TimesheetActionResolver:
    permissions = PermissionResolver(
        InMemoryPermissionRepository(fixtures.PERMISSIONS),
        InMemoryRoleRepository(fixtures.ROLES),
    )
    return TimesheetActionResolver(permissions)


def test_missing_users_get_nothing(resolver):
    ts = TIMESHEETS["ts-004"]
    assert resolver.actions_for(ts, None, USERS["user-001"]) == NO_ACTIONS
    assert resolver.actions_for(ts, USERS["user-003"], None) == NO_ACTIONS


def test_manager_on_someone_elses_pending_timesheet(resolver):
    actions = resolver.actions_for(TIMESHEETS["ts-004"], USERS["user-003"], USERS["user-001"])

    assert actions.can_read
    assert actions.can_create
    assert actions.can_edit
    assert actions.can_delete
    assert actions.can_approve
    assert actions.can_request_changes
    assert actions.can_request_from_others
    assert not actions.can_resubmit


def test_flagged_timesheet_cannot_be_flagged_again(resolver):
    actions = resolver.actions_for(TIMESHEETS["ts-003"], USERS["user-002"], USERS["user-001"])

    assert actions.can_approve
    assert not actions.can_request_changes


def test_owner_of_a_flagged_timesheet(resolver):
    actions = resolver.actions_for(TIMESHEETS["ts-003"], USERS["user-002"], USERS["user-002"])

    assert actions.can_read
    assert actions.can_edit
    assert actions.can_delete
    assert actions.can_resubmit
    assert not actions.can_approve
    assert not actions.can_request_changes
    assert not actions.can_request_from_others


def test_team_lead_reviews_without_editing(resolver):
    actions = resolver.actions_for(TIMESHEETS["ts-004"], USERS["user-003"], USERS["user-005"])

    assert actions.can_read
    assert actions.can_approve
    assert actions.can_request_changes
    assert not actions.can_edit
    assert not actions.can_delete
    assert not actions.can_create


def test_employee_without_others_permission_sees_nothing(resolver):
    actions = resolver.actions_for(TIMESHEETS["ts-001"], USERS["user-001"], USERS["user-002"])

    assert actions == NO_ACTIONS


def test_approved_timesheet_needs_approved_edit_rights(resolver):
    approved = replace(TIMESHEETS["ts-004"], status=TimesheetStatus.APPROVED)
    admin_role_only = replace(USERS["user-004"], user_id="user-x", grants=())

    manager = resolver.actions_for(approved, USERS["user-003"], USERS["user-001"])
    admin = resolver.actions_for(approved, USERS["user-003"], admin_role_only)

    assert manager.can_read and not manager.can_edit and not manager.can_delete
    assert admin.can_edit and admin.can_delete
    assert not manager.can_approve and not admin.can_approve


def test_own_approved_timesheet_is_locked_for_employees(resolver):
    actions = resolver.actions_for(TIMESHEETS["ts-001"], USERS["user-001"], USERS["user-001"])

    assert actions.can_read
    assert not actions.can_edit
    assert not actions.can_delete


def test_decided_timesheets_cannot_be_reviewed(resolver):
    rejected = replace(TIMESHEETS["ts-004"], status=TimesheetStatus.REJECTED)
    actions = resolver.actions_for(rejected, USERS["user-003"], USERS["user-004"])

    assert not actions.can_approve
    assert not actions.can_request_changes
    assert actions.can_edit


def test_not_employed_target_only_allows_reading(resolver):
    ts = replace(TIMESHEETS["ts-004"], user_id="user-006", work_date=date(2025, 3, 3))
    actions = resolver.actions_for(ts, USERS["user-006"], USERS["user-001"], is_target_employed=False)

    assert actions.can_read
    assert not actions.can_create
    assert not actions.can_edit
    assert not actions.can_delete
    assert not actions.can_approve
    assert not actions.can_request_changes
    assert not actions.can_request_from_others


def test_without_timesheet_the_others_permission_governs(resolver):
    # No timesheet means no owner, even when the actor looks at their own day.
    employee_self = resolver.actions_for(None, USERS["user-002"], USERS["user-002"])
    manager_self = resolver.actions_for(None, USERS["user-001"], USERS["user-001"])
    manager_other = resolver.actions_for(None, USERS["user-003"], USERS["user-001"])

    assert employee_self == NO_ACTIONS
    for actions in (manager_self, manager_other):
        assert actions.can_read
        assert actions.can_create
        assert actions.can_request_from_others
        assert not actions.can_approve
        assert not actions.can_edit
        assert not actions.can_delete
        assert not actions.can_resubmit


def test_owner_with_partial_grant_on_pending_timesheet(resolver):
    owner = replace(
        USERS["user-001"],
        role_ids=(),
        grants=(Grant(OWN_TIMESHEETS_PERMISSION, frozenset({"create", "read", "update"})),),
    )

    actions = resolver.actions_for(TIMESHEETS["ts-002"], owner, owner)

    assert TIMESHEETS["ts-002"].status == TimesheetStatus.PENDING
    assert actions.can_read
    assert actions.can_edit
    assert not actions.can_approve
    assert not actions.can_request_changes
    assert not actions.can_delete
    assert not actions.can_resubmit


def test_super_user_gets_every_pending_action(resolver):
    actions = resolver.actions_for(TIMESHEETS["ts-004"], USERS["user-003"], USERS["user-004"])
    assert actions.can_approve and actions.can_request_changes and actions.can_edit and actions.can_delete
