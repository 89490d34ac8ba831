"""Configuration helpers for JSend status labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

__all__ = [
    "APP_CONFIG_KEYS",
    "DEFAULT_ERROR_LABEL",
    "DEFAULT_FAIL_LABEL",
    "DEFAULT_SUCCESS_LABEL",
    "JSendConfig",
    "load_jsend_config",
    "log_configuration_snapshot",
]

DEFAULT_SUCCESS_LABEL = "success"
DEFAULT_FAIL_LABEL = "fail"
DEFAULT_ERROR_LABEL = "error"

# Field name -> Flask ``app.config`` key.
APP_CONFIG_KEYS = {
    "success_label": "JSEND_SUCCESS_LABEL",
    "fail_label": "JSEND_FAIL_LABEL",
    "error_label": "JSEND_ERROR_LABEL",
}

_CAMEL_CASE_ALIASES = {
    "successLabel": "success_label",
    "failLabel": "fail_label",
    "errorLabel": "error_label",
}


def _validate_label(name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string, got {value!r}")
    return value


@dataclass(frozen=True)
class JSendConfig:
    """Default status labels bound to every formatter created by the installer."""

    success_label: str = DEFAULT_SUCCESS_LABEL
    fail_label: str = DEFAULT_FAIL_LABEL
    error_label: str = DEFAULT_ERROR_LABEL

    def __post_init__(self) -> None:
        for name in APP_CONFIG_KEYS:
            _validate_label(name, getattr(self, name))

    def as_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in APP_CONFIG_KEYS}


def _normalise_overrides(overrides: Mapping[str, Any]) -> dict[str, Any]:
    normalised: dict[str, Any] = {}
    for key, value in overrides.items():
        name = _CAMEL_CASE_ALIASES.get(key, key)
        if name not in APP_CONFIG_KEYS:
            raise ValueError(f"Unknown JSend configuration key: {key}")
        if value is None:
            continue
        normalised[name] = value
    return normalised


def load_jsend_config(
    overrides: JSendConfig | Mapping[str, Any] | None = None,
    *,
    app_config: Mapping[str, Any] | None = None,
) -> JSendConfig:
    """Resolve a :class:`JSendConfig`.

    Each label is resolved independently: an explicit entry in ``overrides``
    wins, then the matching ``JSEND_*_LABEL`` key of ``app_config``, then the
    built-in default. ``overrides`` accepts snake_case or camelCase keys.
    """

    if isinstance(overrides, JSendConfig):
        return overrides

    values: dict[str, Any] = {}
    if app_config:
        for name, key in APP_CONFIG_KEYS.items():
            value = app_config.get(key)
            if value is not None:
                values[name] = value
    if overrides:
        values.update(_normalise_overrides(overrides))
    return JSendConfig(**values)


def log_configuration_snapshot(*, logger: Any, config: JSendConfig) -> None:
    """Log the resolved label configuration."""

    logger.info(
        "JSend configuration initialised",
        extra={"jsend_labels": config.as_dict()},
    )
