# --- cookie_shop/model/user.py ---
from sqlalchemy.sql import func

from ..extensions import db
from .types import JSONText


class User(db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(120), nullable=False)
    last_name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, index=True)
    password = db.Column(db.String(100), nullable=False)  # bcrypt hash
    saved_addresses = db.Column(JSONText(list))
    last_purchases = db.Column(JSONText(list))
    gender = db.Column(db.String(32))
    is_admin = db.Column(db.Integer, nullable=False, default=0, index=True)
    created_at = db.Column(db.DateTime, server_default=func.now())
