"""Column data types such as ``INT`` or ``VARCHAR(10)``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DataType(Enum):
    """The base data type of a column."""

    UNKNOWN = auto()
    BIGINT = auto()
    BOOLEAN = auto()
    CHAR = auto()
    DATE = auto()
    DATETIME = auto()
    DECIMAL = auto()
    DOUBLE = auto()
    FLOAT = auto()
    INT = auto()
    LONG = auto()
    REAL = auto()
    SMALLINT = auto()
    TEXT = auto()
    TIME = auto()
    VARCHAR = auto()


_SIZED_TYPES = frozenset({DataType.CHAR, DataType.VARCHAR})


@dataclass
class ColumnType:
    """The type of a column, with optional length, precision and scale.

    ``length`` is used by e.g. ``VARCHAR(10)``, ``precision`` by
    ``DECIMAL(6, 4)`` or ``TIME(5)`` and ``scale`` by ``DECIMAL(6, 4)``.
    """

    data_type: DataType = DataType.UNKNOWN
    length: int = 0
    precision: int = 0
    scale: int = 0

    def __str__(self) -> str:
        if self.data_type in _SIZED_TYPES:
            return f"{self.data_type.name}({self.length})"
        return self.data_type.name