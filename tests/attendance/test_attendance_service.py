from __future__ import annotations

from datetime import date, datetime

import pytest

from src.hr_core.hr_core.container import build_container
from src.hr_core.hr_core.core.enums import AttendanceStatus
from src.hr_core.hr_core.core.exceptions import NotFoundError, ValidationError
from src.hr_core.hr_core.database.bootstrap import load_fixtures

LATER = date(2026, 6, 1)


def _service(**kwargs):
    container = build_container(**kwargs)
    load_fixtures(container, validate=False)
    return container.attendance_service


def test_week_listing_resolves_every_day_in_order():
    records = _service().build_records("user-001", date(2025, 9, 1), date(2025, 9, 7), today=LATER)

    assert [r.work_date for r in records] == [date(2025, 9, d) for d in range(1, 8)]
    assert [r.status for r in records] == [
        AttendanceStatus.PRESENT,
        AttendanceStatus.PRESENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.OFF_SCHEDULE,
        AttendanceStatus.OFF_SCHEDULE,
    ]
    assert all(r.user_name == "John Doe" for r in records)


def test_hours_are_rounded_to_one_decimal():
    first, second, third = _service().build_records("user-001", date(2025, 9, 1), date(2025, 9, 3), today=LATER)

    assert first.timesheet is not None and first.timesheet.timesheet_id == "ts-001"
    assert first.hours == 7.5
    assert first.breaks == 1.0
    assert second.hours == 8.5
    assert third.timesheet is None
    assert third.hours is None and third.breaks is None


def test_summary_counts_expected_days():
    service = _service()
    records = service.build_records("user-001", date(2025, 9, 1), date(2025, 9, 7), today=LATER)

    summary = service.summarize(records)

    assert summary.total_days == 7
    assert summary.expected_work_days == 5
    assert summary.present_days == 2
    assert summary.absent_days == 3
    assert summary.attendance_rate == 0.4
    assert summary.status_counts[AttendanceStatus.OFF_SCHEDULE] == 2
    assert summary.status_counts[AttendanceStatus.VACATION] == 0


def test_summary_without_expected_days():
    service = _service()
    records = service.build_records("user-001", date(2025, 9, 6), date(2025, 9, 7), today=LATER)

    assert service.summarize(records).attendance_rate == 0.0


def test_range_is_validated():
    service = _service(max_report_days=7)

    with pytest.raises(ValidationError):
        service.build_records("user-001", date(2025, 9, 7), date(2025, 9, 1))
    with pytest.raises(ValidationError):
        service.build_records("user-001", date(2025, 9, 1), date(2025, 9, 8))
    assert len(service.build_records("user-001", date(2025, 9, 1), date(2025, 9, 7), today=LATER)) == 7


def test_unknown_user():
    with pytest.raises(NotFoundError):
        _service().build_records("user-404", date(2025, 9, 1), date(2025, 9, 2))


def test_clock_is_available_on_a_worked_day():
    availability = _service().clock_availability("user-001", now=datetime(2025, 9, 2, 10, 0))

    assert availability.can_work
    assert availability.should_show_clock
    assert availability.timesheet is not None and availability.timesheet.timesheet_id == "ts-002"
    assert availability.resolution.status == AttendanceStatus.PRESENT


def test_clock_is_available_on_a_holiday():
    availability = _service().clock_availability("user-001", now=datetime(2025, 9, 25, 9, 0))

    assert availability.resolution.status == AttendanceStatus.HOLIDAY
    assert availability.can_work


@pytest.mark.parametrize(
    "user_id, now",
    [
        ("user-002", datetime(2025, 9, 10, 9, 0)),  # approved vacation
        ("user-002", datetime(2025, 10, 2, 9, 0)),  # approved leave
        ("user-001", datetime(2025, 12, 23, 9, 0)),  # office closed
        ("user-006", datetime(2025, 3, 3, 9, 0)),  # terminated
    ],
)
def test_clock_is_hidden_when_work_is_not_allowed(user_id, now):
    availability = _service().clock_availability(user_id, now=now)

    assert not availability.can_work
    assert not availability.should_show_clock
