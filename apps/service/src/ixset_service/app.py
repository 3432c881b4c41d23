"""Flask application factory for the ixset service."""

from __future__ import annotations

import logging
import sys

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from ixset_core import Error, lib_version

from .config import Config
from .payload import PayloadError
from .routes import srcset_bp, urls_bp

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(Error)
    def handle_ixset_error(e: Error):
        logger.warning("Rejected request: %s", e)
        return jsonify({"error": e.kind, "message": str(e)}), 400

    @app.errorhandler(PayloadError)
    def handle_payload_error(e: PayloadError):
        return jsonify({"error": "PayloadError", "message": str(e)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.name, "message": e.description}), e.code


def create_app(config: Config | None = None) -> Flask:
    """Create and configure the Flask application."""
    if config is None:
        config = Config.load()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    app.config["ixset_config"] = config

    app.register_blueprint(urls_bp)
    app.register_blueprint(srcset_bp)
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok", "lib": lib_version()}

    logger.info("ixset service initialized")
    return app


def main() -> None:
    """Entry point for running the development server."""
    config = Config.load()
    app = create_app(config)
    app.run(host=config.host, port=config.port, debug=config.debug, use_reloader=False)


if __name__ == "__main__":
    main()
