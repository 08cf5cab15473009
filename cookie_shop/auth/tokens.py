"""Access/refresh token issuance and verification.

Tokens are stateless JWTs signed with ``JWT_SECRET_KEY``. Both kinds carry
``userId`` and ``isAdmin`` claims; there is no server-side record of issued
tokens, so a token stays usable until it expires.
"""
from flask import current_app
from flask_jwt_extended import create_access_token, create_refresh_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError


def _require_secret():
    if not current_app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET_KEY not set")


def issue_access_token(user_id: int, is_admin: bool) -> str:
    """Short-lived bearer token (``JWT_ACCESS_TOKEN_EXPIRES``)."""
    _require_secret()
    return create_access_token(
        identity=str(user_id),
        additional_claims={"userId": user_id, "isAdmin": bool(is_admin)},
    )


def issue_refresh_token(user_id: int, is_admin: bool | None = None) -> str:
    """Long-lived token used to mint new access tokens.

    When ``is_admin`` is omitted the claim is left out and the token
    verifies as non-admin.
    """
    _require_secret()
    claims = {"userId": user_id}
    if is_admin is not None:
        claims["isAdmin"] = bool(is_admin)
    return create_refresh_token(identity=str(user_id), additional_claims=claims)


def verify_token(token) -> dict | None:
    """Return the decoded claims, or None for any expired, malformed or forged token."""
    _require_secret()
    if not token or not isinstance(token, str):
        return None
    try:
        return decode_token(token)
    except (PyJWTError, JWTExtendedException):
        return None


def claims_are_admin(claims: dict | None) -> bool:
    return bool(claims and claims.get("isAdmin"))
