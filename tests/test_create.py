import pytest

from sqltree.column_type import ColumnType, DataType
from sqltree.create import (
    ColumnConstraints,
    ColumnDefinition,
    ConstraintType,
    CreateStatement,
    CreateType,
    ForeignKeyConstraint,
    ReferencesSpecification,
    TableConstraint,
    TableElement,
)
from sqltree.statements import StatementType


@pytest.mark.parametrize(
    "constraint, text",
    [
        (ConstraintType.NULL, "NULL"),
        (ConstraintType.NOT_NULL, "NOT NULL"),
        (ConstraintType.FOREIGN_KEY, "FOREIGN KEY"),
        (ConstraintType.PRIMARY_KEY, "PRIMARY KEY"),
        (ConstraintType.UNIQUE, "UNIQUE"),
    ],
)
def test_constraint_type_str(constraint, text):
    assert str(constraint) == text


def _column(*constraints):
    return ColumnDefinition("id", ColumnType(DataType.INT), set(constraints))


def test_column_is_nullable_by_default():
    col = _column()
    assert col.nullable is True
    assert col.try_set_nullable_explicit() is True
    assert col.nullable is True


@pytest.mark.parametrize("constraint", [ConstraintType.NOT_NULL, ConstraintType.PRIMARY_KEY])
def test_not_null_or_primary_key_makes_column_not_nullable(constraint):
    col = _column(constraint)
    assert col.try_set_nullable_explicit() is True
    assert col.nullable is False


@pytest.mark.parametrize("constraint", [ConstraintType.NOT_NULL, ConstraintType.PRIMARY_KEY])
def test_conflicting_null_constraint_fails(constraint):
    col = _column(constraint, ConstraintType.NULL)
    assert col.try_set_nullable_explicit() is False
    assert col.nullable is True


def test_explicit_null_alone_keeps_nullable():
    col = _column(ConstraintType.NULL, ConstraintType.UNIQUE)
    assert col.try_set_nullable_explicit() is True
    assert col.nullable is True


def test_foreign_key_constraint_has_fixed_type():
    refs = ReferencesSpecification(None, "other", ["id"])
    fk = ForeignKeyConstraint(["other_id"], refs)
    assert fk.type is ConstraintType.FOREIGN_KEY
    assert fk.column_names == ["other_id"]
    assert fk.references.table == "other"
    assert isinstance(fk, TableConstraint)


def test_column_constraints_start_empty_and_independent():
    a = ColumnConstraints()
    b = ColumnConstraints()
    a.constraints.add(ConstraintType.UNIQUE)
    assert a.constraints == {ConstraintType.UNIQUE}
    assert b.constraints == set()
    assert b.references == []


def test_create_statement_defaults():
    stmt = CreateStatement(CreateType.TABLE)
    assert stmt.statement_type is StatementType.CREATE
    assert stmt.is_type(StatementType.CREATE)
    assert stmt.if_not_exists is False
    assert stmt.table_name is None
    assert stmt.columns is None
    assert stmt.table_constraints is None
    assert stmt.select is None


def test_set_column_defs_and_constraints_splits_elements_in_order():
    c1 = ColumnDefinition("a", ColumnType(DataType.INT))
    c2 = ColumnDefinition("b", ColumnType(DataType.VARCHAR, 10))
    pk = TableConstraint(ConstraintType.PRIMARY_KEY, ["a"])
    fk = ForeignKeyConstraint(["b"], ReferencesSpecification(None, "t", None))
    stmt = CreateStatement(CreateType.TABLE, table_name="t")
    stmt.set_column_defs_and_constraints([c1, pk, c2, fk, TableElement()])
    assert stmt.columns == [c1, c2]
    assert stmt.table_constraints == [pk, fk]


def test_set_column_defs_and_constraints_accepts_empty():
    stmt = CreateStatement(CreateType.VIEW)
    stmt.set_column_defs_and_constraints(iter([]))
    assert stmt.columns == []
    assert stmt.table_constraints == []