"""SQL expressions: literals, operators, column references and more."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from .column_type import ColumnType, DataType


def substr(source: str, start: int, end: int) -> str:
    """Return the characters of ``source`` from ``start`` up to ``end``."""
    return source[start:end]


class ExprType(Enum):
    LITERAL_FLOAT = auto()
    LITERAL_STRING = auto()
    LITERAL_INT = auto()
    LITERAL_NULL = auto()
    LITERAL_DATE = auto()
    LITERAL_INTERVAL = auto()
    STAR = auto()
    PARAMETER = auto()
    COLUMN_REF = auto()
    FUNCTION_REF = auto()
    OPERATOR = auto()
    SELECT = auto()
    HINT = auto()
    ARRAY = auto()
    ARRAY_INDEX = auto()
    EXTRACT = auto()
    CAST = auto()


class OperatorType(Enum):
    """Operators of expressions of type ``ExprType.OPERATOR``."""

    NONE = auto()
    # ternary
    BETWEEN = auto()
    # n-ary special case
    CASE = auto()
    CASE_LIST_ELEMENT = auto()
    # binary
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()
    PERCENTAGE = auto()
    CARET = auto()
    EQUALS = auto()
    NOT_EQUALS = auto()
    LESS = auto()
    LESS_EQ = auto()
    GREATER = auto()
    GREATER_EQ = auto()
    LIKE = auto()
    NOT_LIKE = auto()
    ILIKE = auto()
    AND = auto()
    OR = auto()
    IN = auto()
    CONCAT = auto()
    # unary
    NOT = auto()
    UNARY_MINUS = auto()
    IS_NULL = auto()
    EXISTS = auto()


class DatetimeField(Enum):
    NONE = auto()
    SECOND = auto()
    MINUTE = auto()
    HOUR = auto()
    DAY = auto()
    MONTH = auto()
    YEAR = auto()


class FrameBoundType(Enum):
    FOLLOWING = auto()
    PRECEDING = auto()
    CURRENT_ROW = auto()


@dataclass
class FrameBound:
    """One end of a window frame."""

    offset: int
    type: FrameBoundType
    unbounded: bool


class FrameType(Enum):
    RANGE = auto()
    ROWS = auto()
    GROUPS = auto()


@dataclass
class FrameDescription:
    """The frame clause of a window expression."""

    type: FrameType
    start: FrameBound
    end: FrameBound


@dataclass
class WindowDescription:
    """The ``OVER (...)`` part of a window function call."""

    partition_list: list[Expr] | None = None
    order_list: list[Any] | None = None
    frame_description: FrameDescription | None = None


_LITERAL_TYPES = frozenset(
    {
        ExprType.LITERAL_INT,
        ExprType.LITERAL_FLOAT,
        ExprType.LITERAL_STRING,
        ExprType.PARAMETER,
        ExprType.LITERAL_NULL,
        ExprType.LITERAL_DATE,
        ExprType.LITERAL_INTERVAL,
    }
)


@dataclass
class Expr:
    """A node of an SQL expression tree."""

    type: ExprType
    expr: Expr | None = None
    expr2: Expr | None = None
    expr_list: list[Expr] | None = None
    select: Any = None
    name: str | None = None
    table: str | None = None
    alias: str | None = None
    fval: float = 0.0
    ival: int = 0
    ival2: int = 0
    datetime_field: DatetimeField = DatetimeField.NONE
    column_type: ColumnType = field(default_factory=lambda: ColumnType(DataType.UNKNOWN, 0))
    is_bool_literal: bool = False
    op_type: OperatorType = OperatorType.NONE
    distinct: bool = False
    window_description: WindowDescription | None = None

    def is_type(self, expr_type: ExprType) -> bool:
        return self.type is expr_type

    def is_literal(self) -> bool:
        return self.type in _LITERAL_TYPES

    def has_alias(self) -> bool:
        return self.alias is not None

    def has_table(self) -> bool:
        return self.table is not None

    def display_name(self) -> str | None:
        """The alias if one is set, otherwise the name."""
        return self.alias if self.alias else self.name

    @classmethod
    def make(cls, expr_type: ExprType) -> Expr:
        return cls(expr_type)

    @classmethod
    def make_op_unary(cls, op: OperatorType, expr: Expr | None) -> Expr:
        return cls(ExprType.OPERATOR, op_type=op, expr=expr)

    @classmethod
    def make_op_binary(cls, left: Expr | None, op: OperatorType, right: Expr | None) -> Expr:
        return cls(ExprType.OPERATOR, op_type=op, expr=left, expr2=right)

    @classmethod
    def make_between(cls, expr: Expr, low: Expr, high: Expr) -> Expr:
        return cls(ExprType.OPERATOR, op_type=OperatorType.BETWEEN, expr=expr, expr_list=[low, high])

    @classmethod
    def make_case_list(cls, element: Expr) -> Expr:
        # A temporary holder, merged into the CASE expression's list later.
        return cls(ExprType.OPERATOR, op_type=OperatorType.NONE, expr_list=[element])

    @classmethod
    def make_case_list_element(cls, when: Expr, then: Expr) -> Expr:
        return cls(ExprType.OPERATOR, op_type=OperatorType.CASE_LIST_ELEMENT, expr=when, expr2=then)

    @classmethod
    def case_list_append(cls, case_list: Expr, element: Expr) -> Expr:
        case_list.expr_list.append(element)
        return case_list

    @classmethod
    def make_case(cls, expr: Expr | None, case_list: Expr, else_expr: Expr | None) -> Expr:
        result = cls(
            ExprType.OPERATOR,
            op_type=OperatorType.CASE,
            expr=expr,
            expr2=else_expr,
            expr_list=case_list.expr_list,
        )
        case_list.expr_list = None
        return result

    @classmethod
    def make_literal(cls, value: bool | int | float | str) -> Expr:
        """Make an integer, boolean, float or string literal from ``value``."""
        if isinstance(value, bool):
            return cls(ExprType.LITERAL_INT, ival=int(value), is_bool_literal=True)
        if isinstance(value, int):
            return cls(ExprType.LITERAL_INT, ival=value)
        if isinstance(value, float):
            return cls(ExprType.LITERAL_FLOAT, fval=value)
        if isinstance(value, str):
            return cls(ExprType.LITERAL_STRING, name=value)
        raise TypeError(f"unsupported literal type: {type(value).__name__}")

    @classmethod
    def make_null_literal(cls) -> Expr:
        return cls(ExprType.LITERAL_NULL)

    @classmethod
    def make_date_literal(cls, value: str) -> Expr:
        return cls(ExprType.LITERAL_DATE, name=value)

    @classmethod
    def make_interval_literal(cls, duration: int, unit: DatetimeField) -> Expr:
        return cls(ExprType.LITERAL_INTERVAL, ival=duration, datetime_field=unit)

    @classmethod
    def make_column_ref(cls, name: str, table: str | None = None) -> Expr:
        return cls(ExprType.COLUMN_REF, name=name, table=table)

    @classmethod
    def make_star(cls, table: str | None = None) -> Expr:
        return cls(ExprType.STAR, table=table)

    @classmethod
    def make_function_ref(
        cls,
        name: str,
        expr_list: list[Expr] | None,
        distinct: bool = False,
        window: WindowDescription | None = None,
    ) -> Expr:
        return cls(
            ExprType.FUNCTION_REF,
            name=name,
            expr_list=expr_list,
            distinct=distinct,
            window_description=window,
        )

    @classmethod
    def make_array(cls, expr_list: list[Expr]) -> Expr:
        return cls(ExprType.ARRAY, expr_list=expr_list)

    @classmethod
    def make_array_index(cls, expr: Expr, index: int) -> Expr:
        return cls(ExprType.ARRAY_INDEX, expr=expr, ival=index)

    @classmethod
    def make_parameter(cls, param_id: int) -> Expr:
        return cls(ExprType.PARAMETER, ival=param_id)

    @classmethod
    def make_select(cls, select: Any) -> Expr:
        return cls(ExprType.SELECT, select=select)

    @classmethod
    def make_exists(cls, select: Any) -> Expr:
        return cls(ExprType.OPERATOR, op_type=OperatorType.EXISTS, select=select)

    @classmethod
    def make_in_operator(cls, expr: Expr, values: Any) -> Expr:
        """``expr IN (...)``: ``values`` is a list of expressions or a sub-select."""
        if isinstance(values, (list, tuple)):
            return cls(ExprType.OPERATOR, op_type=OperatorType.IN, expr=expr, expr_list=list(values))
        return cls(ExprType.OPERATOR, op_type=OperatorType.IN, expr=expr, select=values)

    @classmethod
    def make_extract(cls, field: DatetimeField, expr: Expr) -> Expr:
        return cls(ExprType.EXTRACT, datetime_field=field, expr=expr)

    @classmethod
    def make_cast(cls, expr: Expr, column_type: ColumnType) -> Expr:
        return cls(ExprType.CAST, column_type=column_type, expr=expr)