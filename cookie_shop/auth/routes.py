import logging

from flask import request, current_app, jsonify

from . import bp
from .passwords import verify_admin
from .tokens import issue_access_token, issue_refresh_token, verify_token, claims_are_admin
from ..model import User
from ..utils.api import api_error, json_body

logger = logging.getLogger(__name__)


def _set_refresh_cookie(resp, refresh_token: str):
    cfg = current_app.config
    resp.set_cookie(
        cfg["REFRESH_COOKIE_NAME"],
        refresh_token,
        max_age=cfg["REFRESH_COOKIE_MAX_AGE"],
        path="/",
        samesite="Lax",
        secure=cfg["REFRESH_COOKIE_SECURE"],
        httponly=False,  # the admin client keeps a localStorage copy
    )


# POST /api/admin/login
@bp.post("/admin/login")
def admin_login():
    try:
        data = json_body()
        phone = data.get("phone")
        password = data.get("password")
        if not phone or not password:
            return api_error("Phone and password are required"), 400

        if not verify_admin(phone, password):
            logger.warning("Failed admin login attempt from %s", request.remote_addr)
            return api_error("Invalid credentials"), 401

        admin = User.query.filter_by(is_admin=1).order_by(User.id.asc()).first()
        if not admin:
            return api_error("Admin not found"), 500

        access_token = issue_access_token(admin.id, True)
        refresh_token = issue_refresh_token(admin.id, True)

        resp = jsonify(success=True, accessToken=access_token, refreshToken=refresh_token)
        _set_refresh_cookie(resp, refresh_token)
        logger.info("Admin %s logged in", admin.id)
        return resp
    except Exception:
        logger.exception("Admin login failed")
        return api_error("Server error"), 500


# POST /api/auth/verify
@bp.post("/auth/verify")
def verify():
    try:
        data = json_body()
        token = data.get("token")
        if not token:
            return api_error("No token provided", valid=False), 400
        if not isinstance(token, str):
            return api_error("Token must be a string", valid=False), 400

        claims = verify_token(token)
        if not claims:
            return api_error("Invalid token - could not verify", valid=False), 401

        is_admin = claims_are_admin(claims)
        user_id = claims.get("userId")
        return jsonify(
            valid=True,
            isAdmin=is_admin,
            userId=user_id,
            accessToken=issue_access_token(user_id, is_admin),
        )
    except Exception:
        logger.exception("Token verification failed")
        return api_error("Server error", valid=False), 500
