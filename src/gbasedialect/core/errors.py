"""
Error hierarchy for gbasedialect.
"""

from __future__ import annotations

from typing import Any


class DialectError(RuntimeError):
    """Base error for dialect-related failures."""


class DialectConfigurationError(DialectError):
    """Raised when configuration values are missing or invalid."""


class UnsupportedAccessModeError(DialectConfigurationError):
    """
    Raised when a connection URL is requested for an access mode the dialect
    has no URL form for.
    """

    def __init__(self, access_mode: Any) -> None:
        self.access_mode = access_mode
        label = getattr(access_mode, "name", access_mode)
        super().__init__(f"Unsupported database access mode [{label}]")
