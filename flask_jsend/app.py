"""Application factory for a Flask app answering with JSend envelopes."""

from __future__ import annotations

from typing import Any, Mapping

from flask import Flask, g
from werkzeug.exceptions import HTTPException

from .middleware.jsend import register_jsend_middleware
from .middleware.logging import setup_request_logging
from .observability import configure_structured_logging
from .utils.config import log_configuration_snapshot


def create_app(config: Mapping[str, Any] | None = None) -> Flask:
    """Create the Flask application.

    ``config`` is merged into ``app.config`` before any middleware is
    registered, so ``JSEND_*_LABEL`` keys given here take effect.
    """

    app = Flask(__name__)
    app.config.setdefault("LOG_LEVEL", "INFO")
    if config:
        app.config.update(config)

    configure_structured_logging(app)
    setup_request_logging(app)
    jsend_config = register_jsend_middleware(app)
    log_configuration_snapshot(logger=app.logger, config=jsend_config)

    @app.route("/health")
    def health():
        return g.jsend.success({"service": "flask-jsend"})

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        jsend = getattr(g, "jsend", None)
        if jsend is None:
            return exc
        description = str(exc.description or exc.name)
        if exc.code is not None and exc.code < 500:
            response = jsend.fail({"message": description}, exc.code)
        else:
            response = jsend.error(description, exc.code or 500)
        for name, value in exc.get_headers():
            if name.lower() != "content-type":
                response.headers[name] = value
        return response

    return app
