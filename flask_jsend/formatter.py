"""Builders for JSend response envelopes.

Three envelope shapes are supported::

    success / fail: {"status": <label>, "data": <object|null>}
    error:          {"status": <label>, "message": <str>,
                     "code"?: <str>, "details"?: <any>, "extra"?: <object>}
"""

from __future__ import annotations

from typing import Any, Mapping, NotRequired, Optional, Protocol, TypedDict, Union

from .errors import InvalidDataKind, InvalidExtraKind, InvalidMessage, InvalidResponseTarget
from .utils.config import JSendConfig

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "ErrorEnvelope",
    "JSendFormatter",
    "ResponseTarget",
    "SuccessEnvelope",
]

DEFAULT_ERROR_MESSAGE = "Internal Server Error"


class ResponseTarget(Protocol):
    """Minimal response capability the formatter writes to."""

    def set_status(self, code: int) -> Any: ...

    def send_json(self, envelope: Mapping[str, Any]) -> Any: ...


class SuccessEnvelope(TypedDict):
    status: str
    data: Optional[Union[Mapping[str, Any], list, tuple]]


class ErrorEnvelope(TypedDict):
    status: str
    message: str
    code: NotRequired[str]
    details: NotRequired[Any]
    extra: NotRequired[dict[str, Any]]


def _is_object_kind(data: Any) -> bool:
    if isinstance(data, Mapping):
        return True
    return isinstance(data, (list, tuple))


def _resolve_label(label: Any, default: str) -> str:
    if isinstance(label, str) and label.strip():
        return label
    return default


def _is_present(value: Any) -> bool:
    """Return whether an optional error field should be emitted."""

    if value is None:
        return False
    if isinstance(value, (str, int, float)):
        return bool(value)
    return True


class JSendFormatter:
    """Write JSend envelopes to a single response target.

    The formatter is created per request and only borrows ``target``. Every
    operation validates its input first, then sets the status code and sends
    the body exactly once.
    """

    def __init__(self, target: ResponseTarget, config: Optional[JSendConfig] = None) -> None:
        if target is None or not all(
            callable(getattr(target, name, None)) for name in ("set_status", "send_json")
        ):
            raise InvalidResponseTarget(
                "Response target must provide callable set_status() and send_json()."
            )
        self.target = target
        self.config = config or JSendConfig()

    def success(
        self,
        data: Any = None,
        status_code: int = 200,
        label: Optional[str] = None,
    ) -> ResponseTarget:
        """Send a success envelope."""

        label = _resolve_label(label, self.config.success_label)
        return self._send_data(data, status_code, label)

    def fail(
        self,
        data: Any = None,
        status_code: int = 400,
        label: Optional[str] = None,
    ) -> ResponseTarget:
        """Send a fail envelope, typically for rejected client input."""

        label = _resolve_label(label, self.config.fail_label)
        return self._send_data(data, status_code, label)

    def error(
        self,
        message: Any = DEFAULT_ERROR_MESSAGE,
        status_code: int = 500,
        options: Optional[Mapping[str, Any]] = None,
        label: Optional[str] = None,
    ) -> ResponseTarget:
        """Send an error envelope for server-side failures.

        ``options`` may carry ``code``, ``details`` and ``extra``. ``code`` and
        ``details`` are copied verbatim when present; ``extra`` must be a
        mapping and is shallow-copied.
        """

        if not isinstance(message, str) or not message.strip():
            raise InvalidMessage("Error response must include a non-empty message string.")
        if options is None:
            options = {}
        elif not isinstance(options, Mapping):
            raise TypeError(f"options must be a mapping, got {type(options).__name__}")

        extra = options.get("extra")
        if extra is not None and not isinstance(extra, Mapping):
            raise InvalidExtraKind("Extra must be an object.")

        envelope: ErrorEnvelope = {
            "status": _resolve_label(label, self.config.error_label),
            "message": message,
        }
        code = options.get("code")
        if _is_present(code):
            envelope["code"] = code
        details = options.get("details")
        if _is_present(details):
            envelope["details"] = details
        if extra is not None:
            envelope["extra"] = dict(extra)

        return self._emit(envelope, status_code)

    def _send_data(self, data: Any, status_code: int, label: str) -> ResponseTarget:
        if data is not None and not _is_object_kind(data):
            raise InvalidDataKind(
                f"Data must be an object or null, got {type(data).__name__}."
            )
        envelope: SuccessEnvelope = {"status": label, "data": data}
        return self._emit(envelope, status_code)

    def _emit(self, envelope: Mapping[str, Any], status_code: int) -> ResponseTarget:
        self.target.set_status(status_code)
        self.target.send_json(envelope)
        return self.target
