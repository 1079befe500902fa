"""Checks applied to rendered SQL."""

from sqlaqt.compiler.validator import validate_sql

__all__ = [
    "validate_sql",
]
