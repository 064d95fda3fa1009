from __future__ import annotations

from flask import Blueprint, g, jsonify

from merchanza.app.common.auth import token_required
from merchanza.app.common.validation import get_json, require_fields
from merchanza.modules.cart import service

bp = Blueprint("cart", __name__)

TEXT = {"Content-Type": "text/plain; charset=utf-8"}


@bp.post("/addtocart")
@token_required
def add_to_cart():
    data = get_json()
    require_fields(data, ["itemId"])

    service.add_to_cart(g.user_id, data["itemId"])
    return "Added", 200, TEXT


@bp.post("/removefromcart")
@token_required
def remove_from_cart():
    data = get_json()
    require_fields(data, ["itemId"])

    service.remove_from_cart(g.user_id, data["itemId"])
    return "Removed", 200, TEXT


@bp.route("/getcart", methods=["GET", "POST"])
@token_required
def get_cart():
    return jsonify(service.get_cart(g.user_id)), 200
