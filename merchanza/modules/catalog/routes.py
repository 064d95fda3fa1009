from __future__ import annotations

import logging
import math

from flask import Blueprint, current_app, jsonify

from merchanza.app.extensions import db
from merchanza.app.models import Product
from merchanza.app.common.errors import abort_json
from merchanza.app.common.validation import get_json, require_fields

bp = Blueprint("catalog", __name__)

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ["name", "image", "category", "new_price", "old_price"]


def _price(data: dict, field: str) -> float:
    try:
        value = float(data[field])
    except (TypeError, ValueError):
        abort_json(400, "validation_error", f"{field} must be a number", {"field": field})
    if not math.isfinite(value):
        abort_json(400, "validation_error", f"{field} must be a finite number", {"field": field})
    if value < 0:
        abort_json(400, "validation_error", f"{field} must be >= 0", {"field": field})
    return value


@bp.post("/addproduct")
def add_product():
    """POST /addproduct - Create a catalog entry.

    Ids come from the database and only ever grow.
    """
    data = get_json()
    require_fields(data, PRODUCT_FIELDS)

    product = Product(
        name=str(data["name"]).strip(),
        image=str(data["image"]).strip(),
        category=str(data["category"]).strip(),
        new_price=_price(data, "new_price"),
        old_price=_price(data, "old_price"),
    )
    if "available" in data:
        product.available = bool(data["available"])

    db.session.add(product)
    db.session.commit()

    logger.info("Added product %s (%s)", product.id, product.name)
    return {"success": True, "id": product.id, "name": product.name}, 200


@bp.post("/removeproduct")
def remove_product():
    data = get_json()
    require_fields(data, ["id"])

    try:
        product_id = int(data["id"])
    except (TypeError, ValueError):
        abort_json(400, "validation_error", "id must be an integer")

    product = db.session.get(Product, product_id)
    if not product:
        abort_json(404, "not_found", "Product not found")

    name = product.name
    db.session.delete(product)
    db.session.commit()

    logger.info("Removed product %s (%s)", product_id, name)
    return {"success": True, "id": product_id, "name": name}, 200


@bp.get("/allproducts")
def all_products():
    products = Product.query.order_by(Product.id.asc()).all()
    return jsonify([p.to_dict() for p in products]), 200


@bp.get("/newcollections")
def new_collections():
    """GET /newcollections - The most recently added products, oldest first."""
    size = current_app.config.get("NEW_COLLECTION_SIZE", 8)
    newest = Product.query.order_by(Product.id.desc()).limit(size).all()
    return jsonify([p.to_dict() for p in reversed(newest)]), 200


@bp.get("/popularproducts")
def popular_products():
    category = current_app.config.get("POPULAR_CATEGORY", "clothing")
    size = current_app.config.get("POPULAR_SIZE", 4)
    products = (
        Product.query.filter_by(category=category)
        .order_by(Product.id.asc())
        .limit(size)
        .all()
    )
    return jsonify([p.to_dict() for p in products]), 200
