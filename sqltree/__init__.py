"""Syntax-tree model for SQL statements, parse results, token kinds and tree printing."""

__version__ = "0.1.0"
__all__ = ["column_type", "expr", "statements", "create", "result", "tokens", "sqlhelper"]