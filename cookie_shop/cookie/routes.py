import logging

from flask import jsonify, send_file
from sqlalchemy.sql import func

from . import bp
from .export import cookies_csv
from ..extensions import db
from ..model import Cookie
from ..utils.api import api_ok, api_error, json_body
from ..utils.decorators import admin_token_required

logger = logging.getLogger(__name__)

DEFAULT_BG_COLOR = "#FFDC9C"


# ---------- helpers ----------
def _parse_int(v, default=0):
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _find_cookie(cid):
    """Cookie for a raw path id; ids that are not integers match nothing."""
    try:
        return db.session.get(Cookie, int(cid))
    except (TypeError, ValueError, OverflowError):
        return None


def _apply_payload(cookie: Cookie, data: dict):
    """Full replacement of the editable fields; absent values take defaults."""
    cookie.name = data.get("name")
    cookie.description = data.get("description") or ""
    cookie.bg_color = data.get("bg_color") or DEFAULT_BG_COLOR
    cookie.image = data.get("image") or ""
    cookie.stock = _parse_int(data.get("stock"))
    cookie.nutrition = data.get("nutrition") or {}
    cookie.allergens = data.get("allergens") or []
    cookie.top_reviews = data.get("top_reviews") or []


# ---------- routes ----------
# GET /api/cookies
@bp.get("")
def list_cookies():
    try:
        cookies = Cookie.query.order_by(Cookie.id.asc()).all()
        return jsonify(cookies=[c.as_api() for c in cookies])
    except Exception:
        logger.exception("Error fetching cookies")
        return api_error("Failed to fetch cookies"), 500


# GET /api/cookies/<id>
@bp.get("/<cid>")
def get_cookie(cid):
    try:
        cookie = _find_cookie(cid)
        if not cookie:
            return api_error("Cookie not found"), 404
        return jsonify(cookie=cookie.as_api())
    except Exception:
        logger.exception("Error fetching cookie %s", cid)
        return api_error("Failed to fetch cookie"), 500


# POST /api/cookies
@bp.post("")
@admin_token_required()
def create_cookie():
    try:
        data = json_body()
        if not data.get("name"):
            return api_error("Cookie name is required"), 400

        cookie = Cookie()
        _apply_payload(cookie, data)
        db.session.add(cookie)
        db.session.commit()
        logger.info("Cookie %s created", cookie.id)
        return api_ok("Cookie added successfully", cookieId=cookie.id)
    except Exception:
        db.session.rollback()
        logger.exception("Error adding cookie")
        return api_error("Failed to add cookie"), 500


# PUT /api/cookies/<id>
@bp.put("/<cid>")
@admin_token_required()
def update_cookie(cid):
    try:
        cookie = _find_cookie(cid)
        if not cookie:
            return api_error("Cookie not found"), 404

        data = json_body()
        if not data.get("name"):
            return api_error("Cookie name is required"), 400

        _apply_payload(cookie, data)
        cookie.updated_at = func.now()
        db.session.commit()
        return api_ok("Cookie updated successfully")
    except Exception:
        db.session.rollback()
        logger.exception("Error updating cookie %s", cid)
        return api_error("Failed to update cookie"), 500


# DELETE /api/cookies/<id>
@bp.delete("/<cid>")
@admin_token_required()
def delete_cookie(cid):
    try:
        cookie = _find_cookie(cid)
        if not cookie:
            return api_error("Cookie not found"), 404
        db.session.delete(cookie)
        db.session.commit()
        logger.info("Cookie %s deleted", cid)
        return api_ok("Cookie deleted successfully")
    except Exception:
        db.session.rollback()
        logger.exception("Error deleting cookie %s", cid)
        return api_error("Failed to delete cookie"), 500


# GET /api/cookies/export
@bp.get("/export")
@admin_token_required()
def export_cookies():
    """Download the catalogue as CSV."""
    return send_file(
        cookies_csv(),
        as_attachment=True,
        download_name="cookies_export.csv",
        mimetype="text/csv",
    )
