"""Request middleware."""

from .jsend import JSEND_ATTRIBUTE, jsend_middleware, register_jsend_middleware  # noqa: F401
from .logging import setup_request_logging  # noqa: F401

__all__ = [
    "JSEND_ATTRIBUTE",
    "jsend_middleware",
    "register_jsend_middleware",
    "setup_request_logging",
]
