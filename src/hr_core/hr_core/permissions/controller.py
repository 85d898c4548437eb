from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import acting_user, acting_user_required, json_body
from ..container import Container
from ..core.exceptions import ValidationError
from .model import PermissionRequirement


def _requirements_from_json(payload) -> list:
    items = payload.get("requirements")
    if not isinstance(items, list):
        raise ValidationError("'requirements' must be a list")

    out = []
    for index, item in enumerate(items):
        if not isinstance(item, dict) or not item.get("permission_id") or not item.get("action"):
            raise ValidationError(f"requirements[{index}] needs 'permission_id' and 'action'")
        out.append(PermissionRequirement(str(item["permission_id"]), str(item["action"])))
    return out


def register(app: Flask, container: Container) -> None:
    login_required = acting_user_required(container.users_repo)
    resolver = container.permission_resolver

    @app.route("/api/permissions/effective", methods=["GET"], endpoint="permissions_effective")
    @login_required
    def permissions_effective():
        me = acting_user()
        grants = resolver.effective_grants(me)
        return jsonify(
            {
                "success": True,
                "user_id": me.user_id,
                "is_super_user": resolver.is_super_user(me),
                "grants": {pid: sorted(actions) for pid, actions in sorted(grants.items())},
            }
        )

    @app.route("/api/permissions/check", methods=["GET", "POST"], endpoint="permissions_check")
    @login_required
    def permissions_check():
        me = acting_user()

        if request.method == "GET":
            permission_id = request.args.get("permission_id") or ""
            action = request.args.get("action") or ""
            if not permission_id or not action:
                raise ValidationError("'permission_id' and 'action' are required")
            return jsonify({"success": True, "allowed": resolver.has_permission(me, permission_id, action)})

        payload = json_body()
        mode = payload.get("mode", "any")
        requirements = _requirements_from_json(payload)
        if mode == "any":
            allowed = resolver.has_any_permission(me, requirements)
        elif mode == "all":
            allowed = resolver.has_all_permissions(me, requirements)
        else:
            raise ValidationError("'mode' must be 'any' or 'all'")
        return jsonify({"success": True, "mode": mode, "allowed": allowed})

    @app.route("/api/access/modules/<module_id>", methods=["GET"], endpoint="module_access")
    @login_required
    def module_access(module_id: str):
        return jsonify({"success": True, "allowed": resolver.has_module_access(acting_user(), module_id)})

    @app.route("/api/access/sections/<section_id>", methods=["GET"], endpoint="section_access")
    @login_required
    def section_access(section_id: str):
        return jsonify({"success": True, "allowed": resolver.has_section_access(acting_user(), section_id)})
