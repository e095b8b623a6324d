"""
Core value types and errors shared across gbasedialect packages.
"""

from .errors import DialectConfigurationError, DialectError, UnsupportedAccessModeError
from .types import AccessMode, ColumnDescriptor, ValueType

__all__ = [
    "AccessMode",
    "ColumnDescriptor",
    "ValueType",
    "DialectError",
    "DialectConfigurationError",
    "UnsupportedAccessModeError",
]
