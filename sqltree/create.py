"""``CREATE`` statements with their column definitions and table constraints."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .column_type import ColumnType
from .statements import SelectStatement, SQLStatement, StatementType


class ConstraintType(Enum):
    """A constraint on a column or on a whole table."""

    FOREIGN_KEY = auto()
    NOT_NULL = auto()
    NULL = auto()
    PRIMARY_KEY = auto()
    UNIQUE = auto()

    def __str__(self) -> str:
        return _CONSTRAINT_TEXT[self]


_CONSTRAINT_TEXT = {
    ConstraintType.NULL: "NULL",
    ConstraintType.NOT_NULL: "NOT NULL",
    ConstraintType.FOREIGN_KEY: "FOREIGN KEY",
    ConstraintType.PRIMARY_KEY: "PRIMARY KEY",
    ConstraintType.UNIQUE: "UNIQUE",
}


@dataclass
class TableElement:
    """Base of column definitions and table constraints."""


@dataclass
class TableConstraint(TableElement):
    """A constraint declared at table level."""

    type: ConstraintType
    column_names: list[str]


@dataclass
class ReferencesSpecification:
    """The table and columns a foreign key refers to."""

    schema: Optional[str]
    table: Optional[str]
    columns: Optional[list[str]] = None


@dataclass
class ForeignKeyConstraint(TableConstraint):
    """A foreign key constraint declared at table level."""

    type: ConstraintType = field(default=ConstraintType.FOREIGN_KEY, init=False)
    references: Optional[ReferencesSpecification] = None


@dataclass
class ColumnDefinition(TableElement):
    """The definition of one table column.

    Columns are nullable by default; ``try_set_nullable_explicit`` applies
    the column's constraints to that.
    """

    name: str
    type: ColumnType
    column_constraints: set[ConstraintType] = field(default_factory=set)
    references: Optional[list[ReferencesSpecification]] = None
    nullable: bool = True

    def try_set_nullable_explicit(self) -> bool:
        """Mark the column not nullable if its constraints require it.

        Returns False when the constraints conflict, i.e. ``NULL`` is given
        together with ``NOT NULL`` or ``PRIMARY KEY``.
        """
        constraints = self.column_constraints
        if ConstraintType.NOT_NULL in constraints or ConstraintType.PRIMARY_KEY in constraints:
            if ConstraintType.NULL in constraints:
                return False
            self.nullable = False
        return True


@dataclass
class ColumnConstraints:
    """Constraints and references collected for a single column."""

    constraints: set[ConstraintType] = field(default_factory=set)
    references: list[ReferencesSpecification] = field(default_factory=list)


class CreateType(Enum):
    TABLE = auto()
    TABLE_FROM_TBL = auto()
    VIEW = auto()
    INDEX = auto()


@dataclass
class CreateStatement(SQLStatement):
    """``CREATE TABLE students (name TEXT, student_number INTEGER, ...)``."""

    statement_type: StatementType = field(default=StatementType.CREATE, init=False)
    type: CreateType = CreateType.TABLE
    if_not_exists: bool = False
    file_path: Optional[str] = None
    schema: Optional[str] = None
    table_name: Optional[str] = None
    index_name: Optional[str] = None
    index_columns: Optional[list[str]] = None
    columns: Optional[list[ColumnDefinition]] = None
    table_constraints: Optional[list[TableConstraint]] = None
    view_columns: Optional[list[str]] = None
    select: Optional[SelectStatement] = None

    def set_column_defs_and_constraints(self, table_elements) -> None:
        """Split ``table_elements`` into column definitions and table constraints."""
        elements = list(table_elements)
        self.columns = [e for e in elements if isinstance(e, ColumnDefinition)]
        self.table_constraints = [e for e in elements if isinstance(e, TableConstraint)]