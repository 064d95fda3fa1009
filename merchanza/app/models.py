from __future__ import annotations

from datetime import datetime

from merchanza.app.extensions import db

# Every user owns one count per catalog slot; the vector never grows or shrinks.
CART_SIZE = 300


def empty_cart() -> list[int]:
    return [0] * CART_SIZE


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    cart_data = db.Column(db.JSON, nullable=False, default=empty_cart)
    # Bumped on every UPDATE; a stale cart write fails instead of overwriting.
    version = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    __mapper_args__ = {"version_id_col": version}


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    image = db.Column(db.String(1024), nullable=False)
    category = db.Column(db.String(100), nullable=False, index=True)
    new_price = db.Column(db.Float, nullable=False)
    old_price = db.Column(db.Float, nullable=False)
    date = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    available = db.Column(db.Boolean, nullable=False, default=True)

    # Ids stay strictly increasing, even after the newest product is deleted.
    __table_args__ = {"sqlite_autoincrement": True}

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "category": self.category,
            "new_price": self.new_price,
            "old_price": self.old_price,
            "date": self.date.isoformat() if self.date else None,
            "available": self.available,
        }
