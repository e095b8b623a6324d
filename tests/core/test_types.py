import pytest

from gbasedialect import AccessMode, ColumnDescriptor, DialectConfigurationError, ValueType


def test_access_mode_parse():
    assert AccessMode.parse("native") is AccessMode.NATIVE
    assert AccessMode.parse(" ODBC ") is AccessMode.ODBC
    assert AccessMode.parse(AccessMode.JNDI) is AccessMode.JNDI
    with pytest.raises(DialectConfigurationError):
        AccessMode.parse("ftp")


def test_column_descriptor_is_a_value():
    first = ColumnDescriptor("id", ValueType.INTEGER, 9, 0)
    assert first == ColumnDescriptor("id", ValueType.INTEGER, 9, 0)
    assert ColumnDescriptor("id", ValueType.STRING).length == -1
    with pytest.raises(AttributeError):
        first.length = 10  # type: ignore[misc]


def test_numeric_value_types():
    assert {t for t in ValueType if t.is_numeric} == {ValueType.NUMBER, ValueType.INTEGER, ValueType.BIGNUMBER}
