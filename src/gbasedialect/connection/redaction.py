"""Redaction helpers for connection options written to logs."""

from __future__ import annotations

from typing import Mapping

REDACTED_VALUE = "***"

_SENSITIVE_KEY_TOKENS = (
    "password",
    "passwd",
    "pwd",
    "secret",
    "token",
    "apikey",
    "accesskey",
    "privatekey",
)


def _compact(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch.isalnum())


def is_sensitive_key(key: str) -> bool:
    compact = _compact(key)
    return any(token in compact for token in _SENSITIVE_KEY_TOKENS)


def redact_options(options: Mapping[str, str]) -> dict[str, str]:
    return {key: REDACTED_VALUE if is_sensitive_key(key) else value for key, value in options.items()}
