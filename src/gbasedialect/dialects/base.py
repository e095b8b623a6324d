"""
Dialect strategy interfaces describing SQL generation behaviors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

from ..core.types import AccessMode, ColumnDescriptor

NO_PORT = -1


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags and lexical constants describing a backend.

    Field defaults are the generic answers shared by every dialect. A concrete
    dialect is the defaults record with its own overrides applied through
    ``dataclasses.replace``.
    """

    supports_transactions: bool = True
    supports_bitmap_index: bool = True
    supports_views: bool = True
    supports_synonyms: bool = False
    supports_auto_inc: bool = True
    supports_boolean_data_type: bool = False
    supports_error_handling_on_batch_updates: bool = False
    supports_repository: bool = False
    needs_to_lock_all_tables: bool = False
    requires_transactions_on_queries: bool = True
    releases_savepoint: bool = True
    is_mysql_variant: bool = False

    start_quote: str = '"'
    end_quote: str = '"'
    extra_option_separator: str = ";"
    extra_option_indicator: str = ";"
    native_port: int = NO_PORT
    access_modes: tuple[AccessMode, ...] = (AccessMode.NATIVE, AccessMode.ODBC, AccessMode.JNDI)
    reserved_words: frozenset[str] = frozenset()
    used_libraries: tuple[str, ...] = ()
    extra_options_help_text: str | None = None

    def default_port(self, access_mode: AccessMode) -> int:
        if access_mode is AccessMode.NATIVE:
            return self.native_port
        return NO_PORT

    def supports_access_mode(self, access_mode: AccessMode) -> bool:
        return access_mode in self.access_modes

    def is_reserved_word(self, word: str) -> bool:
        return word.upper() in self.reserved_words


BASE_CAPABILITIES = DialectCapabilities()


class Dialect(Protocol):
    """
    Strategy interface consumed by the integration engine.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def quote_sql_string(self, value: str) -> str: ...

    def driver_class(self, access_mode: AccessMode) -> str: ...

    def url(self, access_mode: AccessMode, hostname: str | None, port: str | None, database: str) -> str: ...

    def field_definition(
        self,
        column: ColumnDescriptor,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
        add_fieldname: bool = True,
        add_cr: bool = False,
    ) -> str: ...

    def add_column_sql(
        self,
        table: str,
        column: ColumnDescriptor,
        technical_key: str | None = None,
        use_autoinc: bool = False,
        primary_key: str | None = None,
    ) -> str: ...

    def modify_column_sql(
        self,
        table: str,
        column: ColumnDescriptor,
        technical_key: str | None = None,
        use_autoinc: bool = False,
        primary_key: str | None = None,
    ) -> str: ...

    def lock_tables_sql(self, tables: Sequence[str]) -> str: ...

    def unlock_tables_sql(self, tables: Sequence[str]) -> str: ...
