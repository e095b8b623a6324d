"""
Value objects supplied by the integration engine: column descriptors and
connection access modes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from .errors import DialectConfigurationError


class ValueType(IntEnum):
    """
    Logical column types understood by the engine's metadata model.
    """

    NONE = 0
    NUMBER = 1
    STRING = 2
    DATE = 3
    BOOLEAN = 4
    INTEGER = 5
    BIGNUMBER = 6
    SERIALIZABLE = 7
    BINARY = 8
    TIMESTAMP = 9
    INET = 10

    @property
    def is_numeric(self) -> bool:
        return self in NUMERIC_TYPES


NUMERIC_TYPES = frozenset({ValueType.NUMBER, ValueType.INTEGER, ValueType.BIGNUMBER})


class AccessMode(Enum):
    """
    How the engine reaches the database. Chosen once per connection.
    """

    NATIVE = "native"
    ODBC = "odbc"
    JNDI = "jndi"

    @classmethod
    def parse(cls, value: "AccessMode | str") -> "AccessMode":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for mode in cls:
            if normalized in (mode.value, mode.name.lower()):
                return mode
        raise DialectConfigurationError(f"Invalid access mode: {value!r}")


@dataclass(frozen=True)
class ColumnDescriptor:
    """
    Abstract column handed over for DDL generation.

    ``length`` is the character count for strings and the total number of
    digits for numbers; ``precision`` is the number of fractional digits.
    Both default to ``-1`` (undefined), as in the engine's metadata model.
    """

    name: str
    value_type: ValueType
    length: int = -1
    precision: int = -1
