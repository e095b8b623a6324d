"""
Parsing helpers for environment-provided configuration values.
"""

from __future__ import annotations

import os
from urllib.parse import parse_qsl

from ..core.errors import DialectConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise DialectConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def parse_int(value: str, *, key: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise DialectConfigurationError(f"Invalid integer value for '{key}': {value!r}") from exc


def parse_options(value: str, *, separator: str = "&") -> dict[str, str]:
    """
    Parse ``key=value`` pairs joined by ``separator``. Keys without a value
    map to an empty string; a repeated key keeps its last value.
    """

    return dict(parse_qsl(value.strip(), keep_blank_values=True, separator=separator))


def env_value(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()
