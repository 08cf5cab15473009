# ------- cookie_shop/utils/decorators.py -------
from functools import wraps
from flask import request

from ..auth.tokens import verify_token, claims_are_admin
from ..utils.api import api_error


def bearer_token(auth_header: str | None) -> str | None:
    """Second space-separated part of an ``Authorization`` header."""
    if not auth_header:
        return None
    parts = auth_header.split(" ")
    return parts[1] if len(parts) > 1 else None


def admin_token_required(message: str = "Unauthorized"):
    """Require a verified admin access token in the Authorization header.

    Missing header -> 401; unverifiable or non-admin token -> 403.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            auth_header = request.headers.get("Authorization")
            if not auth_header:
                return api_error("Authentication required"), 401
            claims = verify_token(bearer_token(auth_header))
            if not claims_are_admin(claims):
                return api_error(message), 403
            return fn(*args, **kwargs)
        return wrapper
    return decorator
