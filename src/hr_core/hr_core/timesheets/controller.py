from __future__ import annotations

from dataclasses import asdict
from typing import Optional

from flask import Flask, jsonify

from ..attendance.display import timesheet_status_display
from ..common.http import acting_user, acting_user_required, json_body
from ..container import Container
from .model import Timesheet


def _iso(value) -> Optional[str]:
    return value.isoformat() if value is not None else None


def timesheet_to_dict(t: Timesheet) -> dict:
    return {
        "timesheet_id": t.timesheet_id,
        "user_id": t.user_id,
        "work_date": t.work_date.isoformat(),
        "status": t.status.value,
        "status_label": timesheet_status_display(t.status).label,
        "start_time": _iso(t.start_time),
        "end_time": _iso(t.end_time),
        "total_minutes": t.total_minutes,
        "regular_minutes": t.regular_minutes,
        "overtime_minutes": t.overtime_minutes,
        "break_minutes": t.break_minutes,
        "breaks": [
            {"start_time": b.start_time.isoformat(), "end_time": b.end_time.isoformat(), "total_minutes": b.total_minutes}
            for b in t.breaks
        ],
        "reviewed_by": t.reviewed_by,
        "reviewed_at": _iso(t.reviewed_at),
        "messages": [
            {"user_id": m.user_id, "text": m.text, "sent_at": m.sent_at.isoformat(), "is_answered": m.is_answered}
            for m in t.messages
        ],
    }


def register(app: Flask, container: Container) -> None:
    login_required = acting_user_required(container.users_repo)
    service = container.timesheet_service

    def _comment() -> str:
        payload = json_body()
        return str(payload.get("comment") or "")

    @app.route("/api/timesheets/<timesheet_id>/actions", methods=["GET"], endpoint="timesheet_actions")
    @login_required
    def timesheet_actions(timesheet_id: str):
        actions = service.actions_for_timesheet(timesheet_id, acting_user().user_id)
        return jsonify({"success": True, "timesheet_id": timesheet_id, "actions": asdict(actions)})

    @app.route("/api/timesheets/<timesheet_id>/approve", methods=["POST"], endpoint="timesheet_approve")
    @login_required
    def timesheet_approve(timesheet_id: str):
        updated = service.approve(timesheet_id, acting_user().user_id, _comment())
        return jsonify({"success": True, "timesheet": timesheet_to_dict(updated)})

    @app.route("/api/timesheets/<timesheet_id>/reject", methods=["POST"], endpoint="timesheet_reject")
    @login_required
    def timesheet_reject(timesheet_id: str):
        updated = service.reject(timesheet_id, acting_user().user_id, _comment())
        return jsonify({"success": True, "timesheet": timesheet_to_dict(updated)})

    @app.route("/api/timesheets/<timesheet_id>/request-changes", methods=["POST"], endpoint="timesheet_request_changes")
    @login_required
    def timesheet_request_changes(timesheet_id: str):
        updated = service.request_changes(timesheet_id, acting_user().user_id, _comment())
        return jsonify({"success": True, "timesheet": timesheet_to_dict(updated)})

    @app.route("/api/timesheets/<timesheet_id>/resubmit", methods=["POST"], endpoint="timesheet_resubmit")
    @login_required
    def timesheet_resubmit(timesheet_id: str):
        updated = service.resubmit(timesheet_id, acting_user().user_id)
        return jsonify({"success": True, "timesheet": timesheet_to_dict(updated)})
