"""Srcset generation route."""

from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from ixset_core import SRCSET_SEPARATOR

from ..payload import build_srcset_config

logger = logging.getLogger(__name__)

srcset_bp = Blueprint("srcset", __name__, url_prefix="/api")


@srcset_bp.post("/srcset")
def build():
    """Build the srcset candidates for an image."""
    config = current_app.config["ixset_config"]
    srcset_config = build_srcset_config(request.get_json(silent=True), config)

    action, candidates = srcset_config.build_srcset_with_action()
    logger.info("Built %s srcset with %d candidates", action.value, len(candidates))

    return jsonify({
        "action": action.value,
        "candidates": candidates,
        "srcset": SRCSET_SEPARATOR.join(candidates),
    })
