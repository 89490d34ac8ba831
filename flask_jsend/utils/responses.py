"""Flask response type that the JSend formatter can write to."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from flask import Response, current_app, has_app_context

__all__ = ["JSendResponse"]

# Keys stay in insertion order, "status" first.
_DUMPS_OPTIONS = {"sort_keys": False, "separators": (",", ":")}


class JSendResponse(Response):
    """A :class:`flask.Response` exposing ``set_status`` and ``send_json``.

    Views can return it directly once the formatter has filled it in.
    """

    default_mimetype = "application/json"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.envelope: Optional[Mapping[str, Any]] = None

    def set_status(self, code: int) -> "JSendResponse":
        self.status_code = code
        return self

    def send_json(self, envelope: Mapping[str, Any]) -> "JSendResponse":
        """Serialise ``envelope`` as the response body."""

        if has_app_context():
            body = current_app.json.dumps(envelope, **_DUMPS_OPTIONS)
        else:
            body = json.dumps(envelope, **_DUMPS_OPTIONS)
        self.set_data(body)
        self.mimetype = "application/json"
        self.envelope = envelope
        return self
