"""
Column definitions and schema statements.
"""

from .builder import SchemaBuilder
from .columns import column_type_clause, field_definition, is_key_column

__all__ = ["SchemaBuilder", "column_type_clause", "field_definition", "is_key_column"]
