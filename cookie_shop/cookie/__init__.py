from flask import Blueprint

bp = Blueprint("cookie", __name__, url_prefix="/api/cookies")

from . import routes  # noqa: E402,F401
