from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import today_local
from ..common.http import acting_user, acting_user_required, date_arg
from ..container import Container
from ..core.constants import OTHERS_TIMESHEETS_PERMISSION
from ..core.exceptions import AuthorizationError, NotFoundError
from ..permissions.model import PermissionRequirement
from .employment import is_employed_on_date, status_on_date

# Either one lets a user look at someone else's employment state.
VIEW_OTHERS = (
    PermissionRequirement("hr-users-manage", "read"),
    PermissionRequirement(OTHERS_TIMESHEETS_PERMISSION, "read"),
)


def register(app: Flask, container: Container) -> None:
    login_required = acting_user_required(container.users_repo)

    @app.route("/api/users/<user_id>/employment", methods=["GET"], endpoint="user_employment")
    @login_required
    def user_employment(user_id: str):
        user = container.users_repo.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")

        me = acting_user()
        if me.user_id != user.user_id and not container.permission_resolver.has_any_permission(me, VIEW_OTHERS):
            raise AuthorizationError("You are not allowed to view this user")

        on = date_arg("date", today_local())
        return jsonify(
            {
                "success": True,
                "user_id": user.user_id,
                "date": on.isoformat(),
                "status": status_on_date(user, on).value,
                "is_employed": is_employed_on_date(user, on),
            }
        )
