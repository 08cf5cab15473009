"""Perimeter check for the admin pages.

Only the presence of the refresh token cookie is checked here. Signature,
expiry and admin claims are verified by each protected API endpoint.
"""
from flask import request, redirect, current_app

ADMIN_PREFIX = "/admin"
LOGIN_PATH = "/admin/login"


def is_guarded_path(path: str) -> bool:
    path = path.rstrip("/") or "/"
    if path == LOGIN_PATH:
        return False
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + "/")


def gate_admin_request(path: str, cookies, cookie_name: str = "refreshToken") -> str | None:
    """Return the login path to redirect to, or None to let the request through."""
    if not is_guarded_path(path):
        return None
    if not cookies.get(cookie_name):
        return LOGIN_PATH
    return None


def admin_gate():
    target = gate_admin_request(
        request.path,
        request.cookies,
        current_app.config.get("REFRESH_COOKIE_NAME", "refreshToken"),
    )
    if target:
        return redirect(target)
    return None
