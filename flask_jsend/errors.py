"""Exceptions raised when a JSend response cannot be built.

All of them are raised before anything is written to the response target, so
the response is left untouched and the fault propagates to the caller.
"""

from __future__ import annotations

__all__ = [
    "JSendError",
    "InvalidResponseTarget",
    "InvalidDataKind",
    "InvalidMessage",
    "InvalidExtraKind",
]


class JSendError(Exception):
    """Base class for JSend formatting faults."""


class InvalidResponseTarget(JSendError, TypeError):
    """The response object lacks ``set_status`` or ``send_json``."""


class InvalidDataKind(JSendError, TypeError):
    """``data`` for a success/fail envelope is neither an object nor ``None``."""


class InvalidMessage(JSendError, ValueError):
    """The error message is missing, not a string, or blank."""


class InvalidExtraKind(JSendError, TypeError):
    """``options["extra"]`` is present but not a mapping."""
