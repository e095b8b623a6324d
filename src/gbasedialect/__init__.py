"""
gbasedialect public package initialization.

Translates database-agnostic column and table descriptions into GBase SQL
text and JDBC connection parameters.
"""

from .connection import ConnectionSettings  # noqa: F401
from .core import (  # noqa: F401
    AccessMode,
    ColumnDescriptor,
    DialectConfigurationError,
    DialectError,
    UnsupportedAccessModeError,
    ValueType,
)
from .dialects import GBASE_CAPABILITIES, DialectCapabilities, GBaseDialect, get_gbase_dialect  # noqa: F401
from .schema import SchemaBuilder  # noqa: F401

__all__ = [
    "AccessMode",
    "ColumnDescriptor",
    "ValueType",
    "ConnectionSettings",
    "DialectCapabilities",
    "GBASE_CAPABILITIES",
    "GBaseDialect",
    "get_gbase_dialect",
    "SchemaBuilder",
    "DialectError",
    "DialectConfigurationError",
    "UnsupportedAccessModeError",
]
