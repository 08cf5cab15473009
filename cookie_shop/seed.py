"""Startup seeding and test reset for the embedded database."""
import logging

from flask import current_app

from .extensions import db
from .model import Cookie, PackageOption, User
from .auth.passwords import hash_password

logger = logging.getLogger(__name__)

# cookies with an id above this are removed by reset_database()
SEED_COOKIE_MAX_ID = 2

SEED_COOKIES = [
    {
        "name": "Chocolate Chip",
        "description": "Classic chocolate chip cookie with a crisp edge and chewy center",
        "bg_color": "#f5e050",
        "image": "/images/cookies/chocolate-chip.jpg",
        "stock": 25,
        "nutrition": {"calories": 250, "protein": 3, "fat": 12, "carbs": 36},
        "allergens": ["Gluten", "Dairy", "Eggs"],
        "top_reviews": [
            "Best cookie I've ever had!",
            "Perfect chocolate-to-cookie ratio",
            "My kids absolutely love these",
        ],
    },
    {
        "name": "Oatmeal Raisin",
        "description": "Chewy oatmeal cookie loaded with plump raisins and a hint of cinnamon",
        "bg_color": "#e8c39e",
        "image": "/images/cookies/oatmeal-raisin.jpg",
        "stock": 18,
        "nutrition": {"calories": 220, "protein": 4, "fat": 9, "carbs": 32},
        "allergens": ["Gluten", "Dairy"],
        "top_reviews": [
            "Reminds me of my grandmother's recipe",
            "Not too sweet, perfectly balanced",
            "Great with afternoon tea",
        ],
    },
]

SEED_PACKAGE_OPTIONS = [
    {"type": "Standard", "size": "Small (6 cookies)", "price": 9.99, "image": "/images/packages/small.jpg", "save_percentage": 0},
    {"type": "Family", "size": "Medium (12 cookies)", "price": 18.99, "image": "/images/packages/medium.jpg", "save_percentage": 5},
    {"type": "Party", "size": "Large (24 cookies)", "price": 34.99, "image": "/images/packages/large.jpg", "save_percentage": 12},
]


def seed_database():
    """Insert seed rows that are missing. Safe to call on every start."""
    if Cookie.query.count() == 0:
        for data in SEED_COOKIES:
            db.session.add(Cookie(**data))
        logger.info("Seeded %s cookies", len(SEED_COOKIES))

    if PackageOption.query.count() == 0:
        for data in SEED_PACKAGE_OPTIONS:
            db.session.add(PackageOption(**data))
        logger.info("Seeded %s package options", len(SEED_PACKAGE_OPTIONS))

    if User.query.filter_by(is_admin=1).count() == 0:
        cfg = current_app.config
        db.session.add(User(
            first_name="Amir",
            last_name="Admin",
            email=cfg["ADMIN_EMAIL"],
            password=hash_password(cfg["ADMIN_PASSWORD"]),
            is_admin=1,
        ))
        logger.info("Seeded admin user %s", cfg["ADMIN_EMAIL"])

    db.session.commit()


def reset_database() -> int:
    """Delete every cookie added after the seed rows; returns the count removed."""
    removed = Cookie.query.filter(Cookie.id > SEED_COOKIE_MAX_ID).delete(synchronize_session=False)
    db.session.commit()
    return removed
