"""
Schema synchronization example: the script an engine would emit to evolve a
slowly changing dimension on GBase.
"""

from __future__ import annotations

from typing import List

from gbasedialect import AccessMode, ConnectionSettings, GBaseDialect

from .columns import NEW_COLUMNS, TABLE, TECHNICAL_KEY, VERSION_FIELD, WIDENED_COLUMNS


def build_sync_script(dialect: GBaseDialect | None = None) -> List[str]:
    dialect = dialect or GBaseDialect()
    table = dialect.quote_field(TABLE)
    statements: List[str] = []
    if dialect.capabilities.needs_to_lock_all_tables:
        statements.append(dialect.lock_tables_sql([table]))
    for column in NEW_COLUMNS:
        statements.append(dialect.add_column_sql(table, column, TECHNICAL_KEY, False, None))
    for column in WIDENED_COLUMNS:
        statements.append(dialect.modify_column_sql(table, column, TECHNICAL_KEY, False, None))
    statements.append(dialect.insert_unknown_dimension_row_sql(table, TECHNICAL_KEY, VERSION_FIELD))
    if dialect.capabilities.needs_to_lock_all_tables:
        statements.append(dialect.unlock_tables_sql([table]))
    return statements


def run_demo(host: str = "localhost", database: str = "warehouse") -> dict[str, object]:
    dialect = GBaseDialect()
    settings = ConnectionSettings(
        database=database,
        access_mode=AccessMode.NATIVE,
        hostname=host,
        options={"characterEncoding": "utf8"},
    )
    return {
        "driver": settings.driver_class(),
        "url": dialect.connection_url(settings),
        "statements": build_sync_script(dialect),
    }


if __name__ == "__main__":  # pragma: no cover
    result = run_demo()
    print(f"-- {result['driver']} {result['url']}")
    for statement in result["statements"]:
        print(statement.rstrip())
