from flask import Blueprint

# server-rendered pages, guarded by the refresh-cookie gate
bp = Blueprint("admin", __name__, url_prefix="/admin")
# JSON endpoints, guarded by bearer tokens
api_bp = Blueprint("admin_api", __name__, url_prefix="/api/admin")

from . import routes  # noqa: E402,F401
