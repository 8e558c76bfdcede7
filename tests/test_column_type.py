import pytest

from sqltree.column_type import ColumnType, DataType


def test_defaults_are_zero():
    column_type = ColumnType(DataType.INT)
    assert column_type.length == 0
    assert column_type.precision == 0
    assert column_type.scale == 0
    assert column_type.data_type is DataType.INT


def test_default_data_type_is_unknown():
    assert ColumnType().data_type is DataType.UNKNOWN


@pytest.mark.parametrize(
    "data_type",
    [
        DataType.UNKNOWN,
        DataType.INT,
        DataType.BIGINT,
        DataType.LONG,
        DataType.FLOAT,
        DataType.DOUBLE,
        DataType.REAL,
        DataType.DECIMAL,
        DataType.TEXT,
        DataType.DATETIME,
        DataType.DATE,
        DataType.TIME,
        DataType.SMALLINT,
        DataType.BOOLEAN,
    ],
)
def test_plain_types_print_their_name(data_type):
    assert str(ColumnType(data_type, 7, 3, 2)) == data_type.name


def test_char_prints_length():
    assert str(ColumnType(DataType.CHAR, 10)) == "CHAR(10)"


def test_varchar_prints_length():
    assert str(ColumnType(DataType.VARCHAR, 255)) == "VARCHAR(255)"


def test_decimal_omits_precision_and_scale():
    assert str(ColumnType(DataType.DECIMAL, 0, 6, 4)) == "DECIMAL"


def test_equality_compares_all_fields():
    assert ColumnType(DataType.DECIMAL, 0, 6, 4) == ColumnType(DataType.DECIMAL, 0, 6, 4)
    assert not ColumnType(DataType.DECIMAL, 0, 6, 4) == ColumnType(DataType.DECIMAL, 0, 6, 3)
    assert not ColumnType(DataType.VARCHAR, 10) == ColumnType(DataType.VARCHAR, 11)
    assert not ColumnType(DataType.INT) == ColumnType(DataType.BIGINT)


def test_inequality_operator():
    assert ColumnType(DataType.CHAR, 1) != ColumnType(DataType.VARCHAR, 1)
    assert not (ColumnType(DataType.TIME, 0, 5) != ColumnType(DataType.TIME, 0, 5))