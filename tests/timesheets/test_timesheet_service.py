from __future__ import annotations

import logging
from datetime import datetime

import pytest

from src.hr_core.hr_core.container import build_container
from src.hr_core.hr_core.core.enums import TimesheetStatus
from src.hr_core.hr_core.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.hr_core.hr_core.database.bootstrap import load_fixtures
from src.hr_core.hr_core.timesheets.service import TimesheetService

NOW = datetime(2025, 9, 4, 11, 30)


@pytest.fixture
def container():
    c = build_container()
    load_fixtures(c, validate=False)
    return c


@pytest.fixture
def service(container) -> TimesheetService:
    return TimesheetService(container.timesheets_repo, container.users_repo, container.timesheet_actions, clock=lambda: NOW)


def test_manager_approves_pending_timesheet(container, service):
    before = container.timesheets_repo.get("ts-004")

    updated = service.approve("ts-004", "user-001", "  Looks good ")

    assert updated.status == TimesheetStatus.APPROVED
    assert updated.reviewed_by == "user-001"
    assert updated.reviewed_at == NOW
    assert [m.text for m in updated.messages] == ["Looks good"]
    assert container.timesheets_repo.get("ts-004") == updated
    assert before.status == TimesheetStatus.PENDING


def test_approve_without_comment_adds_no_message(service):
    assert service.approve("ts-004", "user-005").messages == ()


def test_employee_cannot_approve_others(service):
    with pytest.raises(AuthorizationError):
        service.approve("ts-004", "user-002")


def test_approved_timesheet_cannot_be_approved_again(service):
    with pytest.raises(AuthorizationError):
        service.approve("ts-001", "user-004")


def test_reject_sends_timesheet_back_to_owner(service):
    updated = service.reject("ts-004", "user-001", "Wrong day")

    assert updated.status == TimesheetStatus.REQUIRES_MODIFICATION
    assert updated.messages[-1].user_id == "user-001"

    resubmitted = service.resubmit("ts-004", "user-003")
    assert resubmitted.status == TimesheetStatus.PENDING


def test_request_changes_needs_a_comment(service):
    with pytest.raises(ValidationError):
        service.request_changes("ts-004", "user-001", "   ")


def test_request_changes(service):
    updated = service.request_changes("ts-004", "user-005", "Missing lunch break")

    assert updated.status == TimesheetStatus.REQUIRES_MODIFICATION
    assert updated.messages[-1].text == "Missing lunch break"
    assert updated.messages[-1].sent_at == NOW


def test_request_changes_on_flagged_timesheet_is_refused(service):
    with pytest.raises(AuthorizationError):
        service.request_changes("ts-003", "user-001", "Again")


def test_owner_resubmits_flagged_timesheet(service):
    updated = service.resubmit("ts-003", "user-002")

    assert updated.status == TimesheetStatus.PENDING
    assert updated.reviewed_by is None
    assert updated.reviewed_at is None


def test_only_owner_can_resubmit(service):
    with pytest.raises(AuthorizationError):
        service.resubmit("ts-003", "user-001")
    with pytest.raises(AuthorizationError):
        service.resubmit("ts-004", "user-003")


def test_unknown_ids(service):
    with pytest.raises(NotFoundError):
        service.approve("ts-404", "user-001")
    with pytest.raises(NotFoundError):
        service.approve("ts-004", "user-404")


def test_actions_for_timesheet(service):
    actions = service.actions_for_timesheet("ts-004", "user-001")
    assert actions.can_approve
    assert not service.actions_for_timesheet("ts-004", "user-002").can_read


def test_transitions_are_logged(service, caplog):
    with caplog.at_level(logging.INFO):
        service.approve("ts-002", "user-005")

    assert "Timesheet ts-002 pending -> approved by user-005" in caplog.text
