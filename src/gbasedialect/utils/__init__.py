"""
Utility helpers shared across gbasedialect packages.
"""

from .config import env_value, parse_bool, parse_int, parse_options
from .logging import configure_logging, get_correlation_id, get_logger, resolve_log_level, set_correlation_id

__all__ = [
    "configure_logging",
    "env_value",
    "get_correlation_id",
    "get_logger",
    "parse_bool",
    "parse_int",
    "parse_options",
    "resolve_log_level",
    "set_correlation_id",
]
