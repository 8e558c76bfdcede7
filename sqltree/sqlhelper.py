"""Human-readable, indented summaries of parsed SQL statements."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from .column_type import ColumnType
from .create import CreateStatement
from .expr import (
    DatetimeField,
    Expr,
    ExprType,
    FrameBound,
    FrameBoundType,
    FrameType,
    OperatorType,
    WindowDescription,
)
from .statements import (
    Alias,
    ExportStatement,
    ImportStatement,
    InsertStatement,
    InsertType,
    OrderDescription,
    OrderType,
    RowLockMode,
    RowLockWaitPolicy,
    SelectStatement,
    SetType,
    SQLStatement,
    StatementType,
    TableRef,
    TableRefType,
    TransactionStatement,
)

_OPERATOR_TEXT = {
    OperatorType.NONE: "None",
    OperatorType.BETWEEN: "BETWEEN",
    OperatorType.CASE: "CASE",
    OperatorType.CASE_LIST_ELEMENT: "CASE LIST ELEMENT",
    OperatorType.PLUS: "+",
    OperatorType.MINUS: "-",
    OperatorType.ASTERISK: "*",
    OperatorType.SLASH: "/",
    OperatorType.PERCENTAGE: "%",
    OperatorType.CARET: "^",
    OperatorType.EQUALS: "=",
    OperatorType.NOT_EQUALS: "!=",
    OperatorType.LESS: "<",
    OperatorType.LESS_EQ: "<=",
    OperatorType.GREATER: ">",
    OperatorType.GREATER_EQ: ">=",
    OperatorType.LIKE: "LIKE",
    OperatorType.NOT_LIKE: "NOT LIKE",
    OperatorType.ILIKE: "ILIKE",
    OperatorType.AND: "AND",
    OperatorType.OR: "OR",
    OperatorType.IN: "IN",
    OperatorType.CONCAT: "CONCAT",
    OperatorType.NOT: "NOT",
    OperatorType.UNARY_MINUS: "-",
    OperatorType.IS_NULL: "IS NULL",
    OperatorType.EXISTS: "EXISTS",
}

_DATETIME_TEXT = {
    DatetimeField.NONE: "None",
    DatetimeField.SECOND: "SECOND",
    DatetimeField.MINUTE: "MINUTE",
    DatetimeField.HOUR: "HOUR",
    DatetimeField.DAY: "DAY",
    DatetimeField.MONTH: "MONTH",
    DatetimeField.YEAR: "YEAR",
}

_FRAME_TYPE_TEXT = {
    FrameType.ROWS: "ROWS",
    FrameType.RANGE: "RANGE",
    FrameType.GROUPS: "GROUPS",
}

_LOCK_MODE_TEXT = {
    RowLockMode.FOR_UPDATE: "FOR UPDATE",
    RowLockMode.FOR_NO_KEY_UPDATE: "FOR NO KEY UPDATE",
    RowLockMode.FOR_SHARE: "FOR SHARE",
    RowLockMode.FOR_KEY_SHARE: "FOR KEY SHARE",
}

_SET_TYPE_TEXT = {
    SetType.INTERSECT: "Intersect:",
    SetType.UNION: "Union:",
    SetType.EXCEPT: "Except:",
}


def format_operator(op: OperatorType) -> str:
    """The printed token of an operator type."""
    return _OPERATOR_TEXT.get(op, str(op.value))


def format_datetime_field(field: DatetimeField) -> str:
    """The printed name of a datetime field."""
    return _DATETIME_TEXT.get(field, str(field.value))


def format_frame_bound(bound: FrameBound) -> str:
    """Render a frame bound, e.g. ``UNBOUNDED PRECEDING`` or ``CURRENT ROW``."""
    if bound.type is FrameBoundType.CURRENT_ROW:
        return "CURRENT ROW"
    amount = "UNBOUNDED" if bound.unbounded else str(bound.offset)
    direction = "PRECEDING" if bound.type is FrameBoundType.PRECEDING else "FOLLOWING"
    return f"{amount} {direction}"


def _line(text: object, num_indent: int, file: Optional[TextIO]) -> None:
    if text is None:
        text = ""
    print("\t" * num_indent + str(text), file=file if file is not None else sys.stdout)


def _int_line(value: int, num_indent: int, file: Optional[TextIO]) -> None:
    _line(f"{value}  ", num_indent, file)


def _float_line(value: float, num_indent: int, file: Optional[TextIO]) -> None:
    _line(f"{value:g}", num_indent, file)


def _print_alias(alias: Alias, num_indent: int, file: Optional[TextIO]) -> None:
    _line("Alias", num_indent + 1, file)
    _line(alias.name, num_indent + 2, file)
    for column in alias.columns or ():
        _line(column, num_indent + 3, file)


def _print_table_ref_info(table: TableRef, num_indent: int, file: Optional[TextIO]) -> None:
    if table.type is TableRefType.NAME:
        _line(table.name, num_indent, file)
        if table.schema:
            _line("Schema", num_indent + 1, file)
            _line(table.schema, num_indent + 2, file)
    elif table.type is TableRefType.SELECT:
        print_select_statement_info(table.select, num_indent, file)
    elif table.type is TableRefType.JOIN:
        _line("Join Table", num_indent, file)
        _line("Left", num_indent + 1, file)
        _print_table_ref_info(table.join.left, num_indent + 2, file)
        _line("Right", num_indent + 1, file)
        _print_table_ref_info(table.join.right, num_indent + 2, file)
        _line("Join Condition", num_indent + 1, file)
        print_expression(table.join.condition, num_indent + 2, file)
    elif table.type is TableRefType.CROSS_PRODUCT:
        for sub in table.list or ():
            _print_table_ref_info(sub, num_indent, file)

    if table.alias is not None:
        _print_alias(table.alias, num_indent, file)


def _print_operator_expression(expr: Optional[Expr], num_indent: int, file: Optional[TextIO]) -> None:
    if expr is None:
        _line("null", num_indent, file)
        return
    _line(format_operator(expr.op_type), num_indent, file)
    print_expression(expr.expr, num_indent + 1, file)
    if expr.expr2 is not None:
        print_expression(expr.expr2, num_indent + 1, file)
    elif expr.expr_list is not None:
        for sub in expr.expr_list:
            print_expression(sub, num_indent + 1, file)


def print_expression(expr: Optional[Expr], num_indent: int = 0, file: Optional[TextIO] = None) -> None:
    """Print a summary of an expression tree."""
    if expr is None:
        return
    kind = expr.type
    if kind is ExprType.STAR:
        _line("*", num_indent, file)
    elif kind is ExprType.COLUMN_REF:
        _line(expr.name, num_indent, file)
        if expr.table:
            _line("Table:", num_indent + 1, file)
            _line(expr.table, num_indent + 2, file)
    elif kind is ExprType.LITERAL_FLOAT:
        _float_line(expr.fval, num_indent, file)
    elif kind is ExprType.LITERAL_INT:
        _int_line(expr.ival, num_indent, file)
    elif kind in (ExprType.LITERAL_STRING, ExprType.LITERAL_DATE):
        _line(expr.name, num_indent, file)
    elif kind is ExprType.LITERAL_NULL:
        _line("NULL", num_indent, file)
    elif kind is ExprType.LITERAL_INTERVAL:
        _line("INTERVAL", num_indent, file)
        _int_line(expr.ival, num_indent + 1, file)
        _line(format_datetime_field(expr.datetime_field), num_indent + 1, file)
    elif kind is ExprType.FUNCTION_REF:
        _line(expr.name, num_indent, file)
        for sub in expr.expr_list or ():
            print_expression(sub, num_indent + 1, file)
        if expr.window_description is not None:
            print_window_description(expr.window_description, num_indent + 1, file)
    elif kind is ExprType.EXTRACT:
        _line("EXTRACT", num_indent, file)
        _line(format_datetime_field(expr.datetime_field), num_indent + 1, file)
        print_expression(expr.expr, num_indent + 1, file)
    elif kind is ExprType.CAST:
        _line("CAST", num_indent, file)
        _line(str(expr.column_type), num_indent + 1, file)
        print_expression(expr.expr, num_indent + 1, file)
    elif kind is ExprType.OPERATOR:
        _print_operator_expression(expr, num_indent, file)
    elif kind is ExprType.SELECT:
        print_select_statement_info(expr.select, num_indent, file)
    elif kind is ExprType.PARAMETER:
        _int_line(expr.ival, num_indent, file)
    elif kind is ExprType.ARRAY:
        for sub in expr.expr_list or ():
            print_expression(sub, num_indent + 1, file)
    elif kind is ExprType.ARRAY_INDEX:
        print_expression(expr.expr, num_indent + 1, file)
        _int_line(expr.ival, num_indent, file)
    else:
        print(f"Unrecognized expression type {kind.name}", file=sys.stderr)
        return

    if expr.alias:
        _line("Alias", num_indent + 1, file)
        _line(expr.alias, num_indent + 2, file)


def print_order_by(
    orders: Optional[Iterable[OrderDescription]], num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print an ORDER BY clause."""
    if orders is None:
        return
    for order in orders:
        print_expression(order.expr, num_indent, file)
        _line("ascending" if order.type is OrderType.ASC else "descending", num_indent, file)


def print_window_description(
    window: WindowDescription, num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print the ``OVER (...)`` clause of a window function."""
    _line("OVER", num_indent, file)
    if window.partition_list is not None:
        _line("PARTITION BY", num_indent + 1, file)
        for sub in window.partition_list:
            print_expression(sub, num_indent + 2, file)

    if window.order_list is not None:
        _line("ORDER BY", num_indent + 1, file)
        print_order_by(window.order_list, num_indent + 2, file)

    frame = window.frame_description
    if frame is not None:
        text = (
            f"{_FRAME_TYPE_TEXT[frame.type]} BETWEEN "
            f"{format_frame_bound(frame.start)} AND {format_frame_bound(frame.end)}"
        )
        _line(text, num_indent + 1, file)


def print_select_statement_info(
    stmt: SelectStatement, num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print a summary of a SELECT statement."""
    _line("SelectStatement", num_indent, file)
    _line("Fields:", num_indent + 1, file)
    for expr in stmt.select_list or ():
        print_expression(expr, num_indent + 2, file)

    if stmt.from_table is not None:
        _line("Sources:", num_indent + 1, file)
        _print_table_ref_info(stmt.from_table, num_indent + 2, file)

    if stmt.where_clause is not None:
        _line("Search Conditions:", num_indent + 1, file)
        print_expression(stmt.where_clause, num_indent + 2, file)

    if stmt.group_by is not None:
        _line("GroupBy:", num_indent + 1, file)
        for expr in stmt.group_by.columns or ():
            print_expression(expr, num_indent + 2, file)
        if stmt.group_by.having is not None:
            _line("Having:", num_indent + 1, file)
            print_expression(stmt.group_by.having, num_indent + 2, file)

    if stmt.lockings is not None:
        _line("Lock Info:", num_indent + 1, file)
        for locking in stmt.lockings:
            _line("Type", num_indent + 2, file)
            mode_text = _LOCK_MODE_TEXT.get(locking.row_lock_mode)
            if mode_text is not None:
                _line(mode_text, num_indent + 3, file)
            if locking.tables is not None:
                _line("Target tables:", num_indent + 2, file)
                for table in locking.tables:
                    _line(table, num_indent + 3, file)
            if locking.row_lock_wait_policy is not RowLockWaitPolicy.NONE:
                _line("Waiting policy: ", num_indent + 2, file)
                if locking.row_lock_wait_policy is RowLockWaitPolicy.NO_WAIT:
                    _line("NOWAIT", num_indent + 3, file)
                else:
                    _line("SKIP LOCKED", num_indent + 3, file)

    for operation in stmt.set_operations or ():
        _line(_SET_TYPE_TEXT[operation.set_type], num_indent + 1, file)
        print_select_statement_info(operation.nested_select_statement, num_indent + 2, file)

        if operation.result_order is not None:
            _line("SetResultOrderBy:", num_indent + 1, file)
            print_order_by(operation.result_order, num_indent + 2, file)

        if operation.result_limit is not None:
            if operation.result_limit.limit is not None:
                _line("SetResultLimit:", num_indent + 1, file)
                print_expression(operation.result_limit.limit, num_indent + 2, file)
            if operation.result_limit.offset is not None:
                _line("SetResultOffset:", num_indent + 1, file)
                print_expression(operation.result_limit.offset, num_indent + 2, file)

    if stmt.order is not None:
        _line("OrderBy:", num_indent + 1, file)
        print_order_by(stmt.order, num_indent + 2, file)

    if stmt.limit is not None and stmt.limit.limit is not None:
        _line("Limit:", num_indent + 1, file)
        print_expression(stmt.limit.limit, num_indent + 2, file)

    if stmt.limit is not None and stmt.limit.offset is not None:
        _line("Offset:", num_indent + 1, file)
        print_expression(stmt.limit.offset, num_indent + 2, file)


def print_import_statement_info(
    stmt: ImportStatement, num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print a summary of an IMPORT statement."""
    _line("ImportStatement", num_indent, file)
    _line(stmt.file_path, num_indent + 1, file)
    _line(stmt.type.name, num_indent + 1, file)
    _line(stmt.table_name, num_indent + 1, file)
    if stmt.where_clause is not None:
        _line("WHERE:", num_indent + 1, file)
        print_expression(stmt.where_clause, num_indent + 2, file)


def print_export_statement_info(
    stmt: ExportStatement, num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print a summary of an export (``COPY ... TO``) statement."""
    _line("ExportStatement", num_indent, file)
    _line(stmt.file_path, num_indent + 1, file)
    _line(stmt.type.name, num_indent + 1, file)
    if stmt.table_name:
        _line(stmt.table_name, num_indent + 1, file)
    else:
        print_select_statement_info(stmt.select, num_indent + 1, file)


def print_create_statement_info(
    stmt: CreateStatement, num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print a summary of a CREATE statement."""
    _line("CreateStatement", num_indent, file)
    _line(stmt.table_name, num_indent + 1, file)
    if stmt.file_path:
        _line(stmt.file_path, num_indent + 1, file)


def print_insert_statement_info(
    stmt: InsertStatement, num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print a summary of an INSERT statement."""
    _line("InsertStatement", num_indent, file)
    _line(stmt.table_name, num_indent + 1, file)
    if stmt.columns is not None:
        _line("Columns", num_indent + 1, file)
        for column in stmt.columns:
            _line(column, num_indent + 2, file)
    if stmt.type is InsertType.VALUES:
        _line("Values", num_indent + 1, file)
        for expr in stmt.values or ():
            print_expression(expr, num_indent + 2, file)
    elif stmt.type is InsertType.SELECT:
        print_select_statement_info(stmt.select, num_indent + 1, file)


def print_transaction_statement_info(
    stmt: TransactionStatement, num_indent: int = 0, file: Optional[TextIO] = None
) -> None:
    """Print a summary of a transaction statement."""
    _line("TransactionStatement", num_indent, file)
    _line(stmt.command.name, num_indent + 1, file)


_STATEMENT_PRINTERS = {
    StatementType.SELECT: print_select_statement_info,
    StatementType.INSERT: print_insert_statement_info,
    StatementType.CREATE: print_create_statement_info,
    StatementType.IMPORT: print_import_statement_info,
    StatementType.EXPORT: print_export_statement_info,
    StatementType.TRANSACTION: print_transaction_statement_info,
}


def print_statement_info(stmt: SQLStatement, file: Optional[TextIO] = None) -> None:
    """Print a summary of a statement; kinds without a summary print nothing."""
    printer = _STATEMENT_PRINTERS.get(stmt.statement_type)
    if printer is not None:
        printer(stmt, 0, file)