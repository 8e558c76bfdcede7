"""SQL statement trees and the clauses and table references they hold."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from .expr import Expr


class StatementType(Enum):
    ERROR = auto()
    SELECT = auto()
    IMPORT = auto()
    INSERT = auto()
    UPDATE = auto()
    DELETE = auto()
    CREATE = auto()
    DROP = auto()
    PREPARE = auto()
    EXECUTE = auto()
    EXPORT = auto()
    RENAME = auto()
    ALTER = auto()
    SHOW = auto()
    TRANSACTION = auto()


@dataclass
class SQLStatement:
    """Base of every SQL statement."""

    statement_type: StatementType
    string_length: int = field(default=0, kw_only=True)
    hints: Optional[list[Expr]] = field(default=None, kw_only=True)

    def is_type(self, statement_type: StatementType) -> bool:
        return self.statement_type is statement_type


def _kind(statement_type: StatementType):
    """A fixed statement type that subclasses set and callers cannot override."""
    return field(default=statement_type, init=False)


# --- Table references -----------------------------------------------------


class TableRefType(Enum):
    NAME = auto()
    SELECT = auto()
    JOIN = auto()
    CROSS_PRODUCT = auto()


@dataclass
class TableName:
    schema: Optional[str] = None
    name: Optional[str] = None


@dataclass
class Alias:
    name: str
    columns: Optional[list[str]] = None


@dataclass
class TableRef:
    """A table name, a sub-select, a join or a cross product."""

    type: TableRefType
    schema: Optional[str] = None
    name: Optional[str] = None
    alias: Optional[Alias] = None
    select: Optional[SelectStatement] = None
    list: Optional[list[TableRef]] = None
    join: Optional[JoinDefinition] = None

    def has_schema(self) -> bool:
        return self.schema is not None

    def display_name(self) -> Optional[str]:
        """The alias name if an alias is set, otherwise the table name."""
        if self.alias is not None:
            return self.alias.name
        return self.name


class JoinType(Enum):
    INNER = auto()
    FULL = auto()
    LEFT = auto()
    RIGHT = auto()
    CROSS = auto()
    NATURAL = auto()


@dataclass
class JoinDefinition:
    left: Optional[TableRef] = None
    right: Optional[TableRef] = None
    condition: Optional[Expr] = None
    named_columns: Optional[list[str]] = None
    type: JoinType = JoinType.INNER


# --- SELECT ---------------------------------------------------------------


class OrderType(Enum):
    ASC = auto()
    DESC = auto()


class SetType(Enum):
    UNION = auto()
    INTERSECT = auto()
    EXCEPT = auto()


class RowLockMode(Enum):
    FOR_UPDATE = auto()
    FOR_NO_KEY_UPDATE = auto()
    FOR_SHARE = auto()
    FOR_KEY_SHARE = auto()


class RowLockWaitPolicy(Enum):
    NO_WAIT = auto()
    SKIP_LOCKED = auto()
    NONE = auto()


@dataclass
class OrderDescription:
    type: OrderType
    expr: Optional[Expr]


@dataclass
class LimitDescription:
    limit: Optional[Expr] = None
    offset: Optional[Expr] = None


@dataclass
class GroupByDescription:
    columns: Optional[list[Expr]] = None
    having: Optional[Expr] = None


@dataclass
class WithDescription:
    alias: str
    select: Optional[SelectStatement] = None


@dataclass
class SetOperation:
    """A set operation joining a select statement to a nested one.

    Operations are applied in list order: the nested statement is evaluated,
    combined with the running result by ``set_type``, then ``result_order``
    and ``result_limit`` are applied.
    """

    set_type: SetType = SetType.UNION
    is_all: bool = False
    nested_select_statement: Optional[SelectStatement] = None
    result_order: Optional[list[OrderDescription]] = None
    result_limit: Optional[LimitDescription] = None


@dataclass
class LockingClause:
    row_lock_mode: RowLockMode
    row_lock_wait_policy: RowLockWaitPolicy = RowLockWaitPolicy.NONE
    tables: Optional[list[str]] = None


@dataclass
class SelectStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.SELECT)
    from_table: Optional[TableRef] = None
    select_distinct: bool = False
    select_list: Optional[list[Expr]] = None
    where_clause: Optional[Expr] = None
    group_by: Optional[GroupByDescription] = None
    set_operations: Optional[list[SetOperation]] = None
    order: Optional[list[OrderDescription]] = None
    with_descriptions: Optional[list[WithDescription]] = None
    limit: Optional[LimitDescription] = None
    lockings: Optional[list[LockingClause]] = None


# --- ALTER ----------------------------------------------------------------


class ActionType(Enum):
    DROP_COLUMN = auto()


@dataclass
class AlterAction:
    type: ActionType


@dataclass
class DropColumnAction(AlterAction):
    type: ActionType = field(default=ActionType.DROP_COLUMN, init=False)
    column_name: str = ""
    if_exists: bool = False


@dataclass
class AlterStatement(SQLStatement):
    """``ALTER TABLE students DROP COLUMN name``."""

    statement_type: StatementType = _kind(StatementType.ALTER)
    name: Optional[str] = None
    action: Optional[AlterAction] = None
    schema: Optional[str] = None
    if_table_exists: bool = False


# --- DELETE / DROP / EXECUTE ----------------------------------------------


@dataclass
class DeleteStatement(SQLStatement):
    """``DELETE FROM students WHERE grade > 3.0``; no ``expr`` deletes all rows."""

    statement_type: StatementType = _kind(StatementType.DELETE)
    schema: Optional[str] = None
    table_name: Optional[str] = None
    expr: Optional[Expr] = None


class DropType(Enum):
    TABLE = auto()
    SCHEMA = auto()
    INDEX = auto()
    VIEW = auto()
    PREPARED_STATEMENT = auto()


@dataclass
class DropStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.DROP)
    type: DropType = DropType.TABLE
    if_exists: bool = False
    schema: Optional[str] = None
    name: Optional[str] = None
    index_name: Optional[str] = None


@dataclass
class ExecuteStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.EXECUTE)
    name: Optional[str] = None
    parameters: Optional[list[Expr]] = None


# --- IMPORT / EXPORT ------------------------------------------------------


class ImportType(Enum):
    """File type of import and export statements."""

    CSV = auto()
    TBL = auto()
    BINARY = auto()
    AUTO = auto()


@dataclass
class ImportExportOptions:
    format: ImportType = ImportType.AUTO
    encoding: Optional[str] = None


@dataclass
class ExportStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.EXPORT)
    type: ImportType = ImportType.AUTO
    file_path: Optional[str] = None
    schema: Optional[str] = None
    table_name: Optional[str] = None
    select: Optional[SelectStatement] = None
    encoding: Optional[str] = None


@dataclass
class ImportStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.IMPORT)
    type: ImportType = ImportType.AUTO
    file_path: Optional[str] = None
    schema: Optional[str] = None
    table_name: Optional[str] = None
    where_clause: Optional[Expr] = None
    encoding: Optional[str] = None


# --- INSERT / PREPARE / SHOW / TRANSACTION / UPDATE -----------------------


class InsertType(Enum):
    VALUES = auto()
    SELECT = auto()


@dataclass
class InsertStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.INSERT)
    type: InsertType = InsertType.VALUES
    schema: Optional[str] = None
    table_name: Optional[str] = None
    columns: Optional[list[str]] = None
    values: Optional[list[Expr]] = None
    select: Optional[SelectStatement] = None


@dataclass
class PrepareStatement(SQLStatement):
    """``PREPARE name FROM 'query'``."""

    statement_type: StatementType = _kind(StatementType.PREPARE)
    name: Optional[str] = None
    query: Optional[str] = None


class ShowType(Enum):
    COLUMNS = auto()
    TABLES = auto()


@dataclass
class ShowStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.SHOW)
    type: ShowType = ShowType.TABLES
    schema: Optional[str] = None
    name: Optional[str] = None


class TransactionCommand(Enum):
    BEGIN = auto()
    COMMIT = auto()
    ROLLBACK = auto()


@dataclass
class TransactionStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.TRANSACTION)
    command: TransactionCommand = TransactionCommand.BEGIN


@dataclass
class UpdateClause:
    """``column = value``."""

    column: str
    value: Optional[Expr]


@dataclass
class UpdateStatement(SQLStatement):
    statement_type: StatementType = _kind(StatementType.UPDATE)
    table: Optional[TableRef] = None
    updates: Optional[list[UpdateClause]] = None
    where: Optional[Expr] = None