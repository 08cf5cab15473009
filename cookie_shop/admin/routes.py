import logging

from flask import render_template, redirect, url_for

from . import bp, api_bp
from ..seed import reset_database
from ..utils.api import api_ok, api_error
from ..utils.decorators import admin_token_required

logger = logging.getLogger(__name__)


@bp.get("/login")
def login_page():
    return render_template("admin/login.html")


@bp.get("")
def index():
    return redirect(url_for("admin.dashboard"))


@bp.get("/dashboard")
def dashboard():
    return render_template("admin/dashboard.html")


@bp.get("/cookies/edit/<int:cid>")
def edit_cookie(cid):
    return render_template("admin/edit_cookie.html", cookie_id=cid)


# POST /api/admin/reset-db
@api_bp.post("/reset-db")
@admin_token_required("Unauthorized - admin access required")
def reset_db():
    try:
        removed = reset_database()
        logger.info("Database reset, %s cookies removed", removed)
        return api_ok("Database reset successfully")
    except Exception:
        logger.exception("Error resetting database")
        return api_error("Failed to reset database"), 500
