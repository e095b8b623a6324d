"""
Dialect strategy registry.
"""

from .base import BASE_CAPABILITIES, Dialect, DialectCapabilities
from .gbase import GBASE_CAPABILITIES, GBaseDialect, get_gbase_dialect
from .reserved import RESERVED_WORDS, is_reserved_word

__all__ = [
    "BASE_CAPABILITIES",
    "Dialect",
    "DialectCapabilities",
    "GBASE_CAPABILITIES",
    "GBaseDialect",
    "RESERVED_WORDS",
    "get_gbase_dialect",
    "is_reserved_word",
]
