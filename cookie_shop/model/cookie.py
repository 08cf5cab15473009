# cookie_shop/model/cookie.py
from sqlalchemy.sql import func

from ..extensions import db
from .types import JSONText


class Cookie(db.Model):
    __tablename__ = "cookies"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    bg_color = db.Column(db.String(32))
    image = db.Column(db.String(512))
    rating = db.Column(db.Float, default=0)
    rating_count = db.Column(db.Integer, default=0)
    stock = db.Column(db.Integer, default=0)

    nutrition = db.Column(JSONText(dict))      # {"calories", "protein", "fat", "carbs"}
    allergens = db.Column(JSONText(list))      # ["Gluten", "Dairy", ...]
    top_reviews = db.Column(JSONText(list))

    created_at = db.Column(db.DateTime, server_default=func.now())
    updated_at = db.Column(db.DateTime, onupdate=func.now(), server_default=func.now())

    def as_api(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "bg_color": self.bg_color,
            "image": self.image,
            "rating": self.rating,
            "rating_count": self.rating_count,
            "stock": self.stock,
            "nutrition": self.nutrition if self.nutrition is not None else {},
            "allergens": self.allergens if self.allergens is not None else [],
            "top_reviews": self.top_reviews if self.top_reviews is not None else [],
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
