"""
Identifier and string literal quoting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import DialectCapabilities


_STRING_ESCAPES = str.maketrans({"'": "\\'", "\n": "\\n", "\r": "\\r"})


def quote_identifier(identifier: str, capabilities: "DialectCapabilities") -> str:
    start, end = capabilities.start_quote, capabilities.end_quote
    escaped = identifier.replace(end, end * 2)
    return f"{start}{escaped}{end}"


def format_table(table_name: str, capabilities: "DialectCapabilities") -> str:
    if "." in table_name:
        schema, table = table_name.split(".", 1)
        return f"{quote_identifier(schema, capabilities)}.{quote_identifier(table, capabilities)}"
    return quote_identifier(table_name, capabilities)


def needs_quoting(name: str, capabilities: "DialectCapabilities") -> bool:
    if not name:
        return False
    quoted = name.startswith(capabilities.start_quote) and name.endswith(capabilities.end_quote)
    if quoted and len(name) >= 2:
        return False
    if capabilities.is_reserved_word(name):
        return True
    if name[0].isdigit():
        return True
    return not all(ch.isalnum() or ch == "_" for ch in name)


def quote_field(name: str, capabilities: "DialectCapabilities") -> str:
    """
    Quote ``name`` only when it is a reserved word or not a plain identifier.
    """
    if needs_quoting(name, capabilities):
        return quote_identifier(name, capabilities)
    return name


def quote_sql_string(value: str) -> str:
    """
    Return ``value`` as a single-quoted literal with quotes and line breaks
    backslash-escaped. Backslashes themselves are left untouched.
    """
    return "'" + value.translate(_STRING_ESCAPES) + "'"
