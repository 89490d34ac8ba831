"""JSend response envelopes for Flask."""

from .errors import (  # noqa: F401
    InvalidDataKind,
    InvalidExtraKind,
    InvalidMessage,
    InvalidResponseTarget,
    JSendError,
)
from .formatter import JSendFormatter, ResponseTarget  # noqa: F401
from .middleware.jsend import jsend_middleware, register_jsend_middleware  # noqa: F401
from .utils.config import JSendConfig, load_jsend_config  # noqa: F401
from .utils.responses import JSendResponse  # noqa: F401

__all__ = [
    "InvalidDataKind",
    "InvalidExtraKind",
    "InvalidMessage",
    "InvalidResponseTarget",
    "JSendConfig",
    "JSendError",
    "JSendFormatter",
    "JSendResponse",
    "ResponseTarget",
    "jsend_middleware",
    "load_jsend_config",
    "register_jsend_middleware",
]
