"""
Column layout of the sample customer dimension.
"""

from gbasedialect import ColumnDescriptor, ValueType

TABLE = "dim_customer"
TECHNICAL_KEY = "customer_tk"
VERSION_FIELD = "version"

EXISTING_COLUMNS = [
    ColumnDescriptor(TECHNICAL_KEY, ValueType.INTEGER, 18, 0),
    ColumnDescriptor(VERSION_FIELD, ValueType.INTEGER, 9, 0),
    ColumnDescriptor("name", ValueType.STRING, 120),
]

NEW_COLUMNS = [
    ColumnDescriptor("country_code", ValueType.STRING, 2),
    ColumnDescriptor("credit_limit", ValueType.NUMBER, 18, 2),
    ColumnDescriptor("is_active", ValueType.BOOLEAN),
    ColumnDescriptor("valid_from", ValueType.DATE),
]

WIDENED_COLUMNS = [
    ColumnDescriptor("name", ValueType.STRING, 1000),
]
