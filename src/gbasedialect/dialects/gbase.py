"""
GBase dialect implementation.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Final, Mapping, Sequence

from ..connection.settings import ConnectionSettings
from ..connection.urls import build_url, build_url_with_options, driver_class
from ..core.types import AccessMode, ColumnDescriptor
from ..schema.builder import SchemaBuilder
from ..schema.columns import field_definition
from ..utils import env_value, parse_bool
from . import quoting
from .base import BASE_CAPABILITIES, Dialect, DialectCapabilities
from .reserved import RESERVED_WORD_SET, RESERVED_WORDS

GBASE_OVERRIDES: Final[Mapping[str, Any]] = {
    "supports_transactions": False,
    "supports_bitmap_index": False,
    "supports_views": True,
    "supports_synonyms": False,
    "supports_auto_inc": False,
    "supports_error_handling_on_batch_updates": True,
    "supports_repository": True,
    "needs_to_lock_all_tables": True,
    "requires_transactions_on_queries": False,
    "releases_savepoint": False,
    "is_mysql_variant": True,
    "start_quote": "`",
    "end_quote": "`",
    "extra_option_separator": "&",
    "extra_option_indicator": "?",
    "native_port": 5258,
    "reserved_words": RESERVED_WORD_SET,
    "used_libraries": ("gbase-connector-java-8.3.81.53.jar",),
    "extra_options_help_text": "http://www.gbase8a.com/",
}

GBASE_CAPABILITIES: Final[DialectCapabilities] = replace(BASE_CAPABILITIES, **GBASE_OVERRIDES)


class GBaseDialect:
    """
    GBase 8a dialect: a MySQL-family backend quoting with backticks.
    """

    name: Final[str] = "gbase"

    def __init__(self, capabilities: DialectCapabilities = GBASE_CAPABILITIES) -> None:
        self.capabilities = capabilities
        self.schema = SchemaBuilder(capabilities)

    @classmethod
    def from_env(cls, prefix: str = "GBASE") -> "GBaseDialect":
        """
        Build a dialect honoring ``<prefix>_SUPPORTS_BOOLEAN_DATA_TYPE``.
        """
        key = f"{prefix}_SUPPORTS_BOOLEAN_DATA_TYPE"
        value = env_value(key)
        if value is None:
            return cls()
        return cls().with_boolean_support(parse_bool(value, key=key))

    def with_boolean_support(self, enabled: bool) -> "GBaseDialect":
        return type(self)(replace(self.capabilities, supports_boolean_data_type=enabled))

    # Quoting ---------------------------------------------------------------
    @property
    def reserved_words(self) -> tuple[str, ...]:
        return RESERVED_WORDS

    def is_reserved_word(self, word: str) -> bool:
        return self.capabilities.is_reserved_word(word)

    def quote_identifier(self, identifier: str) -> str:
        return quoting.quote_identifier(identifier, self.capabilities)

    def quote_field(self, name: str) -> str:
        return quoting.quote_field(name, self.capabilities)

    def format_table(self, table_name: str) -> str:
        return quoting.format_table(table_name, self.capabilities)

    def quote_sql_string(self, value: str) -> str:
        return quoting.quote_sql_string(value)

    # Connection ------------------------------------------------------------
    def driver_class(self, access_mode: AccessMode) -> str:
        return driver_class(access_mode)

    def default_port(self, access_mode: AccessMode) -> int:
        return self.capabilities.default_port(access_mode)

    def url(self, access_mode: AccessMode, hostname: str | None, port: str | None, database: str) -> str:
        return build_url(access_mode, hostname, port, database)

    def url_with_options(
        self,
        access_mode: AccessMode,
        hostname: str | None,
        port: str | None,
        database: str,
        options: Mapping[str, str] | None,
    ) -> str:
        return build_url_with_options(access_mode, hostname, port, database, options, self.capabilities)

    def connection_url(self, settings: ConnectionSettings) -> str:
        return settings.url(self.capabilities)

    # Schema ----------------------------------------------------------------
    def field_definition(
        self,
        column: ColumnDescriptor,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
        add_fieldname: bool = True,
        add_cr: bool = False,
    ) -> str:
        return field_definition(
            column,
            self.capabilities,
            technical_key=technical_key,
            primary_key=primary_key,
            use_autoinc=use_autoinc,
            add_fieldname=add_fieldname,
            add_cr=add_cr,
        )

    def add_column_sql(
        self,
        table: str,
        column: ColumnDescriptor,
        technical_key: str | None = None,
        use_autoinc: bool = False,
        primary_key: str | None = None,
    ) -> str:
        return self.schema.add_column_sql(
            table, column, technical_key=technical_key, primary_key=primary_key, use_autoinc=use_autoinc
        )

    def modify_column_sql(
        self,
        table: str,
        column: ColumnDescriptor,
        technical_key: str | None = None,
        use_autoinc: bool = False,
        primary_key: str | None = None,
    ) -> str:
        return self.schema.modify_column_sql(
            table, column, technical_key=technical_key, primary_key=primary_key, use_autoinc=use_autoinc
        )

    def query_fields_sql(self, table: str) -> str:
        return self.schema.query_fields_sql(table)

    def query_column_fields_sql(self, column: str, table: str) -> str:
        return self.schema.query_column_fields_sql(column, table)

    def table_exists_sql(self, table: str) -> str:
        return self.schema.table_exists_sql(table)

    def column_exists_sql(self, column: str, table: str) -> str:
        return self.schema.column_exists_sql(column, table)

    def lock_tables_sql(self, tables: Sequence[str]) -> str:
        return self.schema.lock_tables_sql(tables)

    def unlock_tables_sql(self, tables: Sequence[str] | None = None) -> str:
        return self.schema.unlock_tables_sql(tables)

    def insert_unknown_dimension_row_sql(self, schema_table: str, key_field: str, version_field: str) -> str:
        return self.schema.insert_unknown_dimension_row_sql(schema_table, key_field, version_field)

    def limit_clause(self, nr_rows: int) -> str:
        return self.schema.limit_clause(nr_rows)

    def not_found_tk(self, use_autoinc: bool) -> int:
        return self.schema.not_found_tk(use_autoinc)

    def is_system_table(self, table: str) -> bool:
        return self.schema.is_system_table(table)


def get_gbase_dialect() -> Dialect:
    return GBaseDialect()
