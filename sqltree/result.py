"""The result of parsing an SQL string: statements or error details."""

from __future__ import annotations

from typing import Iterator, Optional

from .expr import Expr
from .statements import SQLStatement


class SQLParserResult:
    """Holds the parsed statements, or the error if parsing failed."""

    def __init__(self, statement: Optional[SQLStatement] = None) -> None:
        self.statements: list[SQLStatement] = []
        self.is_valid = False
        self.error_msg: Optional[str] = None
        self.error_line = -1
        self.error_column = -1
        self._parameters: list[Expr] = []
        if statement is not None:
            self.add_statement(statement)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index: int) -> SQLStatement:
        return self.statements[index]

    def __iter__(self) -> Iterator[SQLStatement]:
        return iter(self.statements)

    def add_statement(self, statement: SQLStatement) -> None:
        self.statements.append(statement)

    def set_error_details(self, message: Optional[str], line: int, column: int) -> None:
        self.error_msg = message
        self.error_line = line
        self.error_column = column

    def release_statements(self) -> list[SQLStatement]:
        """Return all statements and remove them from this result."""
        released = self.statements
        self.statements = []
        return released

    def reset(self) -> None:
        """Drop all statements and error details."""
        self.statements = []
        self.is_valid = False
        self.error_msg = None
        self.error_line = -1
        self.error_column = -1

    def add_parameter(self, parameter: Expr) -> None:
        """Record a placeholder expression, keeping them ordered by id."""
        self._parameters.append(parameter)
        self._parameters.sort(key=lambda p: p.ival)

    def parameters(self) -> list[Expr]:
        return list(self._parameters)