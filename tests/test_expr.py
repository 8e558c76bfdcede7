import pytest

from sqltree.column_type import ColumnType, DataType
from sqltree.expr import (
    DatetimeField,
    Expr,
    ExprType,
    FrameBound,
    FrameBoundType,
    FrameDescription,
    FrameType,
    OperatorType,
    WindowDescription,
    substr,
)


def test_substr_full_range_is_identity():
    text = "SELECT * FROM t"
    assert substr(text, 0, len(text)) == text


def test_substr_takes_middle():
    assert substr("SELECT", 1, 4) == "ELE"


def test_substr_pieces_join_back():
    text = "INSERT INTO x"
    assert substr(text, 0, 6) + substr(text, 6, len(text)) == text


def test_substr_empty_range():
    assert substr("abc", 2, 2) == ""


def test_make_defaults():
    e = Expr.make(ExprType.HINT)
    assert e.type is ExprType.HINT
    assert e.expr is None and e.expr2 is None and e.expr_list is None
    assert e.fval == 0.0 and e.ival == 0 and e.ival2 == 0
    assert e.datetime_field is DatetimeField.NONE
    assert e.column_type == ColumnType(DataType.UNKNOWN)
    assert e.op_type is OperatorType.NONE
    assert e.is_bool_literal is False
    assert e.distinct is False


def test_int_literal():
    e = Expr.make_literal(42)
    assert e.type is ExprType.LITERAL_INT
    assert e.ival == 42
    assert e.is_bool_literal is False


def test_bool_literal():
    t = Expr.make_literal(True)
    f = Expr.make_literal(False)
    assert t.type is ExprType.LITERAL_INT and t.ival == 1 and t.is_bool_literal
    assert f.ival == 0 and f.is_bool_literal


def test_float_literal():
    e = Expr.make_literal(2.5)
    assert e.type is ExprType.LITERAL_FLOAT
    assert e.fval == 2.5


def test_string_literal():
    e = Expr.make_literal("hello")
    assert e.type is ExprType.LITERAL_STRING
    assert e.name == "hello"


def test_unsupported_literal_raises():
    with pytest.raises(TypeError):
        Expr.make_literal([1, 2])


def test_null_date_interval_literals():
    assert Expr.make_null_literal().type is ExprType.LITERAL_NULL
    d = Expr.make_date_literal("2020-01-01")
    assert d.type is ExprType.LITERAL_DATE and d.name == "2020-01-01"
    i = Expr.make_interval_literal(3, DatetimeField.DAY)
    assert i.type is ExprType.LITERAL_INTERVAL
    assert i.ival == 3 and i.datetime_field is DatetimeField.DAY


def test_unary_and_binary_operators():
    a = Expr.make_column_ref("a")
    b = Expr.make_literal(1)
    neg = Expr.make_op_unary(OperatorType.UNARY_MINUS, a)
    assert neg.type is ExprType.OPERATOR
    assert neg.op_type is OperatorType.UNARY_MINUS
    assert neg.expr is a and neg.expr2 is None
    plus = Expr.make_op_binary(a, OperatorType.PLUS, b)
    assert plus.op_type is OperatorType.PLUS
    assert plus.expr is a and plus.expr2 is b


def test_between():
    x, lo, hi = Expr.make_column_ref("x"), Expr.make_literal(1), Expr.make_literal(9)
    e = Expr.make_between(x, lo, hi)
    assert e.op_type is OperatorType.BETWEEN
    assert e.expr is x
    assert e.expr_list == [lo, hi]


def test_case_building_moves_list():
    w1 = Expr.make_case_list_element(Expr.make_literal(1), Expr.make_literal("one"))
    w2 = Expr.make_case_list_element(Expr.make_literal(2), Expr.make_literal("two"))
    assert w1.op_type is OperatorType.CASE_LIST_ELEMENT
    case_list = Expr.make_case_list(w1)
    assert case_list.op_type is OperatorType.NONE
    assert Expr.case_list_append(case_list, w2) is case_list
    subject = Expr.make_column_ref("n")
    otherwise = Expr.make_literal("many")
    case = Expr.make_case(subject, case_list, otherwise)
    assert case.op_type is OperatorType.CASE
    assert case.expr is subject and case.expr2 is otherwise
    assert case.expr_list == [w1, w2]
    assert case_list.expr_list is None


def test_column_ref_and_star():
    c = Expr.make_column_ref("col")
    assert c.type is ExprType.COLUMN_REF and c.name == "col" and not c.has_table()
    tc = Expr.make_column_ref("col", "tbl")
    assert tc.table == "tbl" and tc.has_table()
    s = Expr.make_star()
    assert s.type is ExprType.STAR and s.table is None
    assert Expr.make_star("tbl").table == "tbl"


def test_function_ref_with_window():
    frame = FrameDescription(
        FrameType.ROWS,
        FrameBound(0, FrameBoundType.PRECEDING, True),
        FrameBound(0, FrameBoundType.CURRENT_ROW, False),
    )
    window = WindowDescription([Expr.make_column_ref("p")], None, frame)
    args = [Expr.make_column_ref("v")]
    f = Expr.make_function_ref("sum", args, True, window)
    assert f.type is ExprType.FUNCTION_REF
    assert f.name == "sum" and f.expr_list is args
    assert f.distinct is True
    assert f.window_description is window
    assert window.frame_description.start.unbounded


def test_function_ref_defaults():
    f = Expr.make_function_ref("count", [])
    assert f.distinct is False and f.window_description is None


def test_array_and_index():
    items = [Expr.make_literal(1), Expr.make_literal(2)]
    arr = Expr.make_array(items)
    assert arr.type is ExprType.ARRAY and arr.expr_list is items
    idx = Expr.make_array_index(arr, 1)
    assert idx.type is ExprType.ARRAY_INDEX and idx.expr is arr and idx.ival == 1


def test_parameter():
    p = Expr.make_parameter(5)
    assert p.type is ExprType.PARAMETER and p.ival == 5
    assert p.is_literal()


def test_select_and_exists():
    sub = object()
    s = Expr.make_select(sub)
    assert s.type is ExprType.SELECT and s.select is sub
    ex = Expr.make_exists(sub)
    assert ex.type is ExprType.OPERATOR and ex.op_type is OperatorType.EXISTS and ex.select is sub


def test_in_operator_with_list_and_select():
    x = Expr.make_column_ref("x")
    values = [Expr.make_literal(1), Expr.make_literal(2)]
    e = Expr.make_in_operator(x, values)
    assert e.op_type is OperatorType.IN and e.expr is x
    assert e.expr_list == values and e.select is None
    sub = object()
    s = Expr.make_in_operator(x, sub)
    assert s.select is sub and s.expr_list is None


def test_extract_and_cast():
    x = Expr.make_column_ref("d")
    ex = Expr.make_extract(DatetimeField.YEAR, x)
    assert ex.type is ExprType.EXTRACT and ex.datetime_field is DatetimeField.YEAR and ex.expr is x
    ct = ColumnType(DataType.VARCHAR, 20)
    c = Expr.make_cast(x, ct)
    assert c.type is ExprType.CAST and c.column_type == ct and c.expr is x


@pytest.mark.parametrize(
    "expr,expected",
    [
        (Expr.make_literal(1), True),
        (Expr.make_literal(1.0), True),
        (Expr.make_literal("s"), True),
        (Expr.make_null_literal(), True),
        (Expr.make_date_literal("2000-01-01"), True),
        (Expr.make_interval_literal(1, DatetimeField.HOUR), True),
        (Expr.make_parameter(0), True),
        (Expr.make_column_ref("c"), False),
        (Expr.make_star(), False),
        (Expr.make_array([]), False),
    ],
)
def test_is_literal(expr, expected):
    assert expr.is_literal() is expected


def test_is_type():
    e = Expr.make_star()
    assert e.is_type(ExprType.STAR)
    assert not e.is_type(ExprType.COLUMN_REF)


def test_display_name_prefers_alias():
    e = Expr.make_column_ref("col")
    assert e.display_name() == "col"
    assert not e.has_alias()
    e.alias = "renamed"
    assert e.has_alias()
    assert e.display_name() == "renamed"