from flask import Blueprint

bp = Blueprint("package_option", __name__, url_prefix="/api/package-options")

from . import routes  # noqa: E402,F401
