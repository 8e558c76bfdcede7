# sqltree

`sqltree` is a set of Python data structures for representing parsed SQL:
expressions, the statement kinds (SELECT, INSERT, UPDATE, DELETE, CREATE,
DROP, ALTER, IMPORT/EXPORT, PREPARE/EXECUTE, SHOW, transactions), a container
for a parse result, the token kinds and source locations a lexer works with,
and a printer that renders statements and expressions as tab-indented trees.

It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `sqltree.column_type`

`DataType` enumerates the base column types (`INT`, `BIGINT`, `VARCHAR`,
`DECIMAL`, `DATE`, ...). `ColumnType` is a dataclass with `data_type`,
`length`, `precision` and `scale`. Its `str()` is the type name, with the
length added for `CHAR` and `VARCHAR`: `str(ColumnType(DataType.VARCHAR, 10))`
is `"VARCHAR(10)"`, `str(ColumnType(DataType.DECIMAL, 0, 6, 4))` is `"DECIMAL"`.

### `sqltree.expr`

`Expr` is one node of an expression tree. Its `type` is an `ExprType`, and
operator nodes carry an `OperatorType` in `op_type`. Other fields are `expr`,
`expr2`, `expr_list`, `select`, `name`, `table`, `alias`, `fval`, `ival`,
`ival2`, `datetime_field`, `column_type`, `is_bool_literal`, `distinct` and
`window_description`.

Nodes are built with class methods:

- `make(expr_type)`, `make_null_literal()`, `make_date_literal(value)`,
  `make_interval_literal(duration, unit)`
- `make_literal(value)`: a `bool` gives an integer literal with
  `is_bool_literal` set, an `int` an integer literal, a `float` a float
  literal, a `str` a string literal; any other type raises `TypeError`
- `make_column_ref(name, table=None)`, `make_star(table=None)`,
  `make_parameter(param_id)`
- `make_op_unary(op, expr)`, `make_op_binary(left, op, right)`,
  `make_between(expr, low, high)`
- `make_case_list(element)`, `make_case_list_element(when, then)`,
  `case_list_append(case_list, element)`, `make_case(expr, case_list, else_expr)`;
  `make_case` takes over the case list's elements and empties the list holder
- `make_function_ref(name, expr_list, distinct=False, window=None)`
- `make_array(expr_list)`, `make_array_index(expr, index)`
- `make_select(select)`, `make_exists(select)`,
  `make_in_operator(expr, values)` where `values` is a list of expressions or
  a sub-select
- `make_extract(field, expr)`, `make_cast(expr, column_type)`

Queries: `is_type(expr_type)`, `is_literal()`, `has_alias()`, `has_table()`
and `display_name()` (the alias if set, otherwise the name).

Window functions use `WindowDescription` (`partition_list`, `order_list`,
`frame_description`), `FrameDescription` (a `FrameType` and two `FrameBound`s)
and `FrameBound` (`offset`, a `FrameBoundType`, `unbounded`). The module also
holds `DatetimeField` and `substr(source, start, end)`.

### `sqltree.statements`

`SQLStatement` is the base of every statement: it has `statement_type` (a
`StatementType`), `string_length`, `hints` and `is_type(statement_type)`. Each
subclass fixes its own `statement_type`:

- `SelectStatement`, with `from_table`, `select_distinct`, `select_list`,
  `where_clause`, `group_by`, `set_operations`, `order`, `with_descriptions`,
  `limit` and `lockings`
- `InsertStatement`, `UpdateStatement`, `DeleteStatement`, `DropStatement`,
  `AlterStatement`, `ImportStatement`, `ExportStatement`, `PrepareStatement`,
  `ExecuteStatement`, `ShowStatement`, `TransactionStatement`

Supporting classes: `TableRef` (with `has_schema()` and `display_name()`),
`TableName`, `Alias`, `JoinDefinition`, `OrderDescription`,
`LimitDescription`, `GroupByDescription`, `WithDescription`, `SetOperation`,
`LockingClause`, `UpdateClause`, `AlterAction`, `DropColumnAction` and
`ImportExportOptions`, along with their enums (`TableRefType`, `JoinType`,
`OrderType`, `SetType`, `RowLockMode`, `RowLockWaitPolicy`, `ActionType`,
`DropType`, `ImportType`, `InsertType`, `ShowType`, `TransactionCommand`).

### `sqltree.create`

`CreateStatement` (with a `CreateType`) and what a table definition is made
of: `ColumnDefinition`, `TableConstraint`, `ForeignKeyConstraint`,
`ReferencesSpecification`, `ColumnConstraints` and `ConstraintType`, whose
`str()` is the SQL wording, e.g. `"PRIMARY KEY"`.

`ColumnDefinition.try_set_nullable_explicit()` marks the column not nullable
when it has `NOT NULL` or `PRIMARY KEY`, and returns `False` without changing
anything if `NULL` is given as well.
`CreateStatement.set_column_defs_and_constraints(table_elements)` splits a
sequence of table elements into `columns` and `table_constraints`.

### `sqltree.result`

`SQLParserResult` holds a list of statements. It supports `len()`, indexing
and iteration, and has `is_valid`, `error_msg`, `error_line` and
`error_column` (both `-1` until set). Methods: `add_statement`,
`set_error_details(message, line, column)`, `release_statements()` (returns
the statements and empties the result), `reset()`, `add_parameter(parameter)`
and `parameters()`, which returns the parameter expressions ordered by their
`ival`.

### `sqltree.tokens`

`TokenKind` is an `IntEnum` of the lexer's token codes, e.g.
`TokenKind.SELECT == 313`. `Location` tracks a span of query text:
`advance(text)` starts the span where the last one ended and moves the line
and column over `text`, counting every character in `total_column` and
`string_length`.

### `sqltree.sqlhelper`

Printers that write tab-indented trees: `print_statement_info(stmt, file)`,
`print_select_statement_info`, `print_insert_statement_info`,
`print_create_statement_info`, `print_import_statement_info`,
`print_export_statement_info`, `print_transaction_statement_info`,
`print_expression`, `print_order_by` and `print_window_description`. All but
`print_statement_info` take `(item, num_indent=0, file=None)`.
`print_statement_info` prints SELECT, INSERT, CREATE, IMPORT, EXPORT and
transaction statements and prints nothing for other kinds. With `file=None`
output goes to standard output; any text stream, such as `io.StringIO`, can be
given instead.

`format_operator(op)`, `format_datetime_field(field)` and
`format_frame_bound(bound)` return the text used for those values, e.g.
`"!="`, `"YEAR"` and `"UNBOUNDED PRECEDING"`.

## Example

```python
from sqltree.expr import Expr, OperatorType
from sqltree.statements import SelectStatement, TableRef, TableRefType
from sqltree.sqlhelper import print_statement_info

select = SelectStatement()
select.select_list = [Expr.make_star(None)]
table = TableRef(TableRefType.NAME)
table.name = "students"
select.from_table = table
select.where_clause = Expr.make_op_binary(
    Expr.make_column_ref("grade", None),
    OperatorType.GREATER,
    Expr.make_literal(3.0),
)

print_statement_info(select, None)
```

This prints:

```
SelectStatement
	Fields:
		*
	Sources:
		students
	Search Conditions:
		>
			grade
			3
```

## What it does not do

`sqltree` does not read SQL text. There is no lexer or parser in the
package: `TokenKind` and `Location` describe tokens and positions, and
`SQLParserResult` holds results, but turning a query string into statements
is left to whatever code builds the trees. Nothing here executes queries or
stores data, and the package has no command-line program.