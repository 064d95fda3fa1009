"""Product image storage on local disk."""

from __future__ import annotations

import logging
import os
import time
import uuid

from flask import Blueprint, current_app, request, send_from_directory, url_for
from werkzeug.utils import secure_filename

from merchanza.app.common.errors import abort_json
from merchanza.app.common.validation import get_json, require_fields

bp = Blueprint("uploads", __name__)

logger = logging.getLogger(__name__)


def _folder() -> str:
    return current_app.config["UPLOAD_FOLDER"]


def _image_url(filename: str) -> str:
    return url_for("uploads.serve_image", filename=filename, _external=True)


def ensure_upload_folder(app) -> None:
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)


@bp.post("/upload")
def upload_image():
    """POST /upload - Store the multipart ``image`` field, return its URL."""
    file = request.files.get("image")
    if file is None or not file.filename:
        abort_json(400, "no_file", "No file uploaded")

    ext = os.path.splitext(secure_filename(file.filename))[1].lower()
    allowed = current_app.config.get("ALLOWED_IMAGE_EXTENSIONS") or set()
    if ext not in allowed:
        abort_json(400, "validation_error", "Unsupported image type", {"allowed": sorted(allowed)})

    # Millisecond stamps alone collide under concurrent uploads.
    filename = f"image_{int(time.time() * 1000)}_{uuid.uuid4().hex[:8]}{ext}"
    file.save(os.path.join(_folder(), filename))

    logger.info("Stored upload %s", filename)
    return {"success": True, "image_url": _image_url(filename)}, 200


@bp.get("/images/<path:filename>")
def serve_image(filename: str):
    return send_from_directory(_folder(), filename)


@bp.get("/imagelist")
def image_list():
    try:
        files = sorted(
            name for name in os.listdir(_folder())
            if os.path.isfile(os.path.join(_folder(), name))
        )
    except OSError:
        logger.exception("Unable to scan upload folder")
        abort_json(500, "scan_failed", "Unable to scan files")

    return {"success": True, "images": [_image_url(name) for name in files]}, 200


@bp.post("/removeimage")
def remove_image():
    data = get_json()
    require_fields(data, ["filename"])

    filename = secure_filename(str(data["filename"]))
    path = os.path.join(_folder(), filename)
    if not filename or not os.path.isfile(path):
        abort_json(404, "not_found", "Failed to delete image")

    try:
        os.remove(path)
    except OSError:
        logger.exception("Failed to delete %s", filename)
        abort_json(500, "delete_failed", "Failed to delete image")

    logger.info("Deleted upload %s", filename)
    return {"success": True, "message": "Image deleted successfully"}, 200
