# cookie_shop/model/package_option.py
from sqlalchemy.sql import func

from ..extensions import db


class PackageOption(db.Model):
    __tablename__ = "package_options"
    id = db.Column(db.Integer, primary_key=True)
    type = db.Column(db.String(64), nullable=False)      # "Standard", "Family", "Party"
    size = db.Column(db.String(64), nullable=False)      # "Small (6 cookies)"
    price = db.Column(db.Float, nullable=False)
    image = db.Column(db.String(512))
    save_percentage = db.Column(db.Float, default=0)

    created_at = db.Column(db.DateTime, server_default=func.now())
    updated_at = db.Column(db.DateTime, onupdate=func.now(), server_default=func.now())

    def as_api(self):
        return {
            "id": self.id,
            "type": self.type,
            "size": self.size,
            "price": self.price,
            "image": self.image,
            "save_percentage": self.save_percentage,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
