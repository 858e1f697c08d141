# registry_proxy/__init__.py
# Flask app factory: config, logging, blueprints and the JSON error envelopes

from typing import Optional, Union

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config, is_development
from .errors import RegistryProxyError, UpstreamApiError
from .routes.api import api_bp
from .services.aggregator import error_envelope
from .utils.logging import configure_logging, get_logger


def create_app(config_object: type = Config, overrides: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    app.register_blueprint(api_bp)
    _register_error_handlers(app)

    @app.route("/health")
    def health():
        return {"status": "ok"}

    return app


def _register_error_handlers(app: Flask) -> None:
    logger = get_logger()

    def detail(text: Union[str, None]) -> dict:
        return {"error": text, "include_detail": is_development(app.config)}

    @app.errorhandler(RegistryProxyError)
    def handle_proxy_error(e: RegistryProxyError):
        if isinstance(e, UpstreamApiError):
            logger.info("Upstream returned HTTP %s", e.status_code)
            return jsonify(error_envelope(e.message, data=e.body)), e.status_code
        if e.status_code >= 500:
            logger.error("%s: %s", type(e).__name__, e.detail or e.message)
        return jsonify(error_envelope(e.message, **detail(e.detail))), e.status_code

    @app.errorhandler(404)
    def handle_not_found(e):
        return jsonify(error_envelope("Endpoint not found")), 404

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        return jsonify(error_envelope(e.name)), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return jsonify(error_envelope("Internal server error", **detail(str(e)))), 500
