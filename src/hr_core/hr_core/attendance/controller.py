from __future__ import annotations

import csv
import io
from datetime import timedelta

from flask import Flask, jsonify, send_file

from ..common.datetime_utils import today_local
from ..common.http import acting_user, acting_user_required, date_arg
from ..container import Container
from ..core.constants import DEFAULT_REPORT_DAYS, OTHERS_TIMESHEETS_PERMISSION, OWN_TIMESHEETS_PERMISSION
from ..core.exceptions import AuthorizationError, NotFoundError
from ..timesheets.controller import timesheet_to_dict
from .display import describe_day
from .model import AttendanceDayRecord, AttendanceSummary


def _record_to_dict(r: AttendanceDayRecord, *, today) -> dict:
    display = describe_day(r, today=today)
    return {
        "date": r.work_date.isoformat(),
        "status": r.status.value,
        "is_expected_work_day": r.is_expected_work_day,
        "hours": r.hours,
        "breaks": r.breaks,
        "holiday": r.holiday.name if r.holiday else None,
        "label": display.primary.label if display.primary else "",
        "secondary_label": display.secondary.label if display.secondary else None,
        "timesheet": timesheet_to_dict(r.timesheet) if r.timesheet else None,
    }


def _summary_to_dict(s: AttendanceSummary) -> dict:
    return {
        "total_days": s.total_days,
        "expected_work_days": s.expected_work_days,
        "present_days": s.present_days,
        "absent_days": s.absent_days,
        "attendance_rate": s.attendance_rate,
        "status_counts": {status.value: n for status, n in s.status_counts.items()},
    }


def register(app: Flask, container: Container) -> None:
    login_required = acting_user_required(container.users_repo)
    service = container.attendance_service

    def _authorized_target(user_id: str):
        target = container.users_repo.get(user_id)
        if target is None:
            raise NotFoundError(f"User {user_id} not found")
        me = acting_user()
        namespace = OWN_TIMESHEETS_PERMISSION if target.user_id == me.user_id else OTHERS_TIMESHEETS_PERMISSION
        if not container.permission_resolver.has_permission(me, namespace, "read"):
            raise AuthorizationError("You are not allowed to view this attendance")
        return target

    def _range():
        today = today_local()
        start = date_arg("start", today - timedelta(days=DEFAULT_REPORT_DAYS - 1))
        end = date_arg("end", today)
        return start, end, today

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        availability = service.clock_availability(acting_user().user_id)
        return jsonify(
            {
                "success": True,
                "date": availability.work_date.isoformat(),
                "status": availability.resolution.status.value,
                "is_expected_work_day": availability.resolution.is_expected_work_day,
                "can_work": availability.can_work,
                "show_clock": availability.should_show_clock,
                "timesheet": timesheet_to_dict(availability.timesheet) if availability.timesheet else None,
            }
        )

    @app.route("/api/attendance/<user_id>", methods=["GET"], endpoint="attendance_records")
    @login_required
    def attendance_records(user_id: str):
        target = _authorized_target(user_id)
        start, end, today = _range()

        records = service.build_records(target.user_id, start, end, today=today)
        return jsonify(
            {
                "success": True,
                "user_id": target.user_id,
                "user_name": target.full_name,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "records": [_record_to_dict(r, today=today) for r in records],
                "summary": _summary_to_dict(service.summarize(records)),
            }
        )

    @app.route("/api/attendance/<user_id>/export.csv", methods=["GET"], endpoint="attendance_export")
    @login_required
    def attendance_export(user_id: str):
        target = _authorized_target(user_id)
        start, end, today = _range()
        records = service.build_records(target.user_id, start, end, today=today)

        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(["date", "status", "label", "expected_work_day", "hours", "breaks", "timesheet_status"])
        for r in records:
            display = describe_day(r, today=today)
            writer.writerow(
                [
                    r.work_date.isoformat(),
                    r.status.value,
                    display.primary.label if display.primary else "",
                    "yes" if r.is_expected_work_day else "no",
                    "" if r.hours is None else r.hours,
                    "" if r.breaks is None else r.breaks,
                    r.timesheet.status.value if r.timesheet else "",
                ]
            )

        data = io.BytesIO(buf.getvalue().encode("utf-8-sig"))
        filename = f"attendance_{target.username}_{start.isoformat()}_{end.isoformat()}.csv"
        return send_file(data, mimetype="text/csv", as_attachment=True, download_name=filename)
