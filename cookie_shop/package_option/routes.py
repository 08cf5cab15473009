import logging

from flask import jsonify

from . import bp
from ..model import PackageOption
from ..utils.api import api_error

logger = logging.getLogger(__name__)


# GET /api/package-options
@bp.get("")
def list_package_options():
    try:
        options = PackageOption.query.order_by(PackageOption.id.asc()).all()
        return jsonify(packageOptions=[o.as_api() for o in options])
    except Exception:
        logger.exception("Error fetching package options")
        return api_error("Failed to fetch package options"), 500
