"""URL building and width table routes."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from ixset_core import SRCSET_TARGET_WIDTHS

from ..payload import build_url

logger = logging.getLogger(__name__)

urls_bp = Blueprint("urls", __name__, url_prefix="/api")


@urls_bp.post("/url")
def build():
    """Join a single image URL."""
    config = current_app.config["ixset_config"]
    url = build_url(request.get_json(silent=True), config)
    joined = url.join()
    logger.debug("Built url %s", joined)
    return jsonify({"url": joined})


@urls_bp.get("/widths")
def widths():
    """Default viewport target widths."""
    return jsonify({"widths": list(SRCSET_TARGET_WIDTHS)})
