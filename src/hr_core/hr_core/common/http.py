from __future__ import annotations

import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import Flask, g, jsonify, request

from ..core.constants import ACTING_USER_HEADER
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.model import User
from ..users.repository import UserRepository
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


def acting_user_required(users: UserRepository):
    """Resolve the acting user from the request header into ``g.acting_user``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user_id = (request.headers.get(ACTING_USER_HEADER) or "").strip()
            if not user_id:
                return jsonify({"success": False, "message": f"Missing {ACTING_USER_HEADER} header"}), 401
            user = users.get(user_id)
            if user is None:
                return jsonify({"success": False, "message": "Unknown user"}), 401
            g.acting_user = user
            return view(*args, **kwargs)

        return wrapper

    return decorator


def acting_user() -> User:
    return g.acting_user


def json_body() -> dict:
    """Request JSON as a dict; no body gives an empty dict."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def date_arg(name: str, default: Optional[date] = None) -> date:
    raw = request.args.get(name)
    if not raw:
        if default is None:
            raise ValidationError(f"Missing '{name}' query parameter")
        return default
    try:
        return parse_iso_date(raw)
    except ValueError:
        raise ValidationError(f"'{name}' must be YYYY-MM-DD")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(ValidationError)
    def _invalid(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        logger.info("Forbidden %s %s: %s", request.method, request.path, e)
        return jsonify({"success": False, "message": str(e)}), 403
