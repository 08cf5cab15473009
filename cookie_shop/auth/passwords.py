# cookie_shop/auth/passwords.py
import bcrypt
from flask import current_app

from ..model import User


def hash_password(password: str) -> str:
    rounds = current_app.config.get("BCRYPT_LOG_ROUNDS", 10)
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    if not isinstance(password, str) or not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def verify_admin(phone: str, password: str) -> bool:
    """Check a phone/password pair against the one configured admin.

    The phone is compared with ``ADMIN_PHONE`` only; the password with the
    hash stored on the admin credential row.
    """
    admin_phone = current_app.config.get("ADMIN_PHONE")
    if not admin_phone:
        raise RuntimeError("ADMIN_PHONE not set")
    admin = User.query.filter_by(is_admin=1, email=current_app.config["ADMIN_EMAIL"]).first()
    if not admin:
        raise RuntimeError("Admin not found in DB")
    return phone == admin_phone and check_password(password, admin.password)
