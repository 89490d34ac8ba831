"""Middleware that binds a JSend formatter to every outgoing response."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from flask import Flask, g

from ..formatter import JSendFormatter, ResponseTarget
from ..utils.config import JSendConfig, load_jsend_config
from ..utils.responses import JSendResponse

__all__ = ["JSEND_ATTRIBUTE", "jsend_middleware", "register_jsend_middleware"]

JSEND_ATTRIBUTE = "jsend"

Installer = Callable[[ResponseTarget], JSendFormatter]


def jsend_middleware(
    config: JSendConfig | Mapping[str, Any] | None = None,
) -> Installer:
    """Return a per-request step that attaches a formatter to a response.

    The configuration is resolved once, here, and shared by every formatter
    the returned step creates.
    """

    resolved = load_jsend_config(config)

    def install(target: ResponseTarget) -> JSendFormatter:
        formatter = JSendFormatter(target, resolved)
        setattr(target, JSEND_ATTRIBUTE, formatter)
        return formatter

    return install


def register_jsend_middleware(
    app: Flask, config: JSendConfig | Mapping[str, Any] | None = None
) -> JSendConfig:
    """Expose a fresh formatter as ``flask.g.jsend`` for each request.

    Explicit ``config`` entries take precedence over the app's
    ``JSEND_*_LABEL`` settings.
    """

    resolved = load_jsend_config(config, app_config=app.config)
    install = jsend_middleware(resolved)
    app.extensions["jsend"] = resolved

    @app.before_request
    def _bind_jsend() -> None:
        setattr(g, JSEND_ATTRIBUTE, install(JSendResponse()))

    app.logger.debug(
        "Registered JSend middleware: success=%s fail=%s error=%s",
        resolved.success_label,
        resolved.fail_label,
        resolved.error_label,
    )
    return resolved
