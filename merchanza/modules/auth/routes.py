from __future__ import annotations

from flask import Blueprint

from merchanza.app.common.validation import get_json, require_fields
from merchanza.modules.auth import service

bp = Blueprint("auth", __name__)


@bp.post("/signup")
def signup():
    """POST /signup - Create an account and return a session token."""
    data = get_json()
    require_fields(data, ["email", "password"])

    token = service.signup(data.get("name"), str(data["email"]), str(data["password"]))
    return {"success": True, "token": token}, 200


@bp.post("/login")
def login():
    """POST /login - Exchange email and password for a session token."""
    data = get_json()
    require_fields(data, ["email", "password"])

    token = service.login(str(data["email"]), str(data["password"]))
    return {"success": True, "token": token}, 200
