"""
Column definition synthesis: maps an abstract column onto a GBase type clause.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.types import NUMERIC_TYPES, ColumnDescriptor, ValueType
from ..utils import get_logger

if TYPE_CHECKING:
    from ..dialects.base import DialectCapabilities

LINE_TERMINATOR = "\n"
UNKNOWN_TYPE_CLAUSE = " UNKNOWN"

_INT_MAX_LENGTH = 9
# BIGINT holds any signed value of 18 significant digits.
_BIGINT_MAX_LENGTH = 18
# A DOUBLE is accurate to roughly 15 decimal digits.
_DOUBLE_MAX_LENGTH = 15

_TEXT_TIERS: tuple[tuple[int, str], ...] = (
    (65536, "TEXT"),
    (16777216, "MEDIUMTEXT"),
)

logger = get_logger("schema.columns")


def is_key_column(name: str, technical_key: str | None, primary_key: str | None) -> bool:
    """
    Case-insensitive match of ``name`` against the technical or primary key.
    Empty or missing key names never match.
    """
    lowered = name.lower()
    return any(key and lowered == key.lower() for key in (technical_key, primary_key))


def _key_clause(use_autoinc: bool) -> str:
    if use_autoinc:
        return "BIGINT AUTO_INCREMENT NOT NULL PRIMARY KEY"
    return "BIGINT NOT NULL PRIMARY KEY"


def _numeric_clause(length: int, precision: int) -> str:
    if precision == 0:
        if length <= _INT_MAX_LENGTH:
            return "INT"
        if length <= _BIGINT_MAX_LENGTH:
            return "BIGINT"
        return f"DECIMAL({length})"
    if length > _DOUBLE_MAX_LENGTH:
        if precision > 0:
            return f"DECIMAL({length}, {precision})"
        return f"DECIMAL({length})"
    return "DOUBLE"


def _string_clause(length: int) -> str:
    if length <= 0:
        return "TINYTEXT"
    if length == 1:
        return "CHAR(1)"
    if length < 256:
        return f"VARCHAR({length})"
    for upper_bound, clause in _TEXT_TIERS:
        if length < upper_bound:
            return clause
    return "LONGTEXT"


def column_type_clause(
    column: ColumnDescriptor,
    capabilities: "DialectCapabilities",
    *,
    technical_key: str | None = None,
    primary_key: str | None = None,
    use_autoinc: bool = False,
) -> str:
    value_type = column.value_type
    if value_type == ValueType.DATE:
        return "DATETIME"
    if value_type == ValueType.TIMESTAMP:
        return "TIMESTAMP"
    if value_type == ValueType.BOOLEAN:
        return "BOOLEAN" if capabilities.supports_boolean_data_type else "CHAR(1)"
    if value_type in NUMERIC_TYPES:
        if is_key_column(column.name, technical_key, primary_key):
            return _key_clause(use_autoinc)
        return _numeric_clause(column.length, column.precision)
    if value_type == ValueType.STRING:
        return _string_clause(column.length)
    if value_type == ValueType.BINARY:
        return "LONGBLOB"
    logger.warning(
        "No GBase type for column '%s' of type %r; emitting UNKNOWN marker.",
        column.name,
        value_type,
    )
    return UNKNOWN_TYPE_CLAUSE


def field_definition(
    column: ColumnDescriptor,
    capabilities: "DialectCapabilities",
    *,
    technical_key: str | None = None,
    primary_key: str | None = None,
    use_autoinc: bool = False,
    add_fieldname: bool = True,
    add_cr: bool = False,
) -> str:
    """
    Render the column definition used by ``ADD``/``MODIFY`` statements.

    ``add_fieldname`` prefixes the column name; ``add_cr`` appends a line
    terminator.
    """
    clause = column_type_clause(
        column,
        capabilities,
        technical_key=technical_key,
        primary_key=primary_key,
        use_autoinc=use_autoinc,
    )
    prefix = f"{column.name} " if add_fieldname else ""
    suffix = LINE_TERMINATOR if add_cr else ""
    return f"{prefix}{clause}{suffix}"
