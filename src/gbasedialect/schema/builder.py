"""
Schema builder producing GBase DDL and DML statements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from ..core.types import ColumnDescriptor
from ..utils import get_logger
from .columns import LINE_TERMINATOR, field_definition

if TYPE_CHECKING:
    from ..dialects.base import DialectCapabilities

_SYSTEM_TABLE_PREFIX = "sys"
_SYSTEM_TABLE_NAMES = frozenset({"dtproperties"})


class SchemaBuilder:
    """
    Produces dialect-specific SQL for schema synchronization.
    """

    def __init__(self, capabilities: "DialectCapabilities") -> None:
        self.capabilities = capabilities
        self.logger = get_logger("schema.builder")

    def add_column_sql(
        self,
        table: str,
        column: ColumnDescriptor,
        *,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
    ) -> str:
        definition = self._definition(column, technical_key, primary_key, use_autoinc)
        return f"ALTER TABLE {table} ADD {definition}"

    def modify_column_sql(
        self,
        table: str,
        column: ColumnDescriptor,
        *,
        technical_key: str | None = None,
        primary_key: str | None = None,
        use_autoinc: bool = False,
    ) -> str:
        definition = self._definition(column, technical_key, primary_key, use_autoinc)
        return f"ALTER TABLE {table} MODIFY {definition}"

    def query_fields_sql(self, table: str) -> str:
        return f"SELECT * FROM {table} WHERE 1=0"

    def query_column_fields_sql(self, column: str, table: str) -> str:
        return f"SELECT {column} FROM {table} WHERE 1=0"

    def table_exists_sql(self, table: str) -> str:
        return self.query_fields_sql(table)

    def column_exists_sql(self, column: str, table: str) -> str:
        return self.query_column_fields_sql(column, table)

    def lock_tables_sql(self, tables: Sequence[str]) -> str:
        """
        Lock every table for writing. An empty sequence yields an empty
        statement, which callers treat as nothing to execute.
        """
        if not tables:
            self.logger.debug("No tables supplied to LOCK TABLES; returning empty statement.")
            return ""
        locks = ", ".join(f"{table} WRITE" for table in tables)
        return f"LOCK TABLES {locks};{LINE_TERMINATOR}"

    def unlock_tables_sql(self, tables: Sequence[str] | None = None) -> str:
        # Releases every lock held by the session, whatever was passed.
        return "UNLOCK TABLES"

    def insert_unknown_dimension_row_sql(self, schema_table: str, key_field: str, version_field: str) -> str:
        return f"insert into {schema_table}({key_field}, {version_field}) values (1, 1)"

    def limit_clause(self, nr_rows: int) -> str:
        return f" LIMIT {nr_rows}"

    def not_found_tk(self, use_autoinc: bool) -> int:
        """
        Key value used for the "not found" dimension row.
        """
        if self.capabilities.supports_auto_inc and use_autoinc:
            return 1
        return 0

    def is_system_table(self, table: str) -> bool:
        return table.startswith(_SYSTEM_TABLE_PREFIX) or table in _SYSTEM_TABLE_NAMES

    def _definition(
        self,
        column: ColumnDescriptor,
        technical_key: str | None,
        primary_key: str | None,
        use_autoinc: bool,
    ) -> str:
        return field_definition(
            column,
            self.capabilities,
            technical_key=technical_key,
            primary_key=primary_key,
            use_autoinc=use_autoinc,
            add_fieldname=True,
            add_cr=False,
        )
