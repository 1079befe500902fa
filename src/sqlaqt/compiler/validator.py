"""Post-render SQL syntax check using sqlglot."""

from __future__ import annotations

import sqlglot
from sqlglot.errors import SqlglotError

from sqlaqt.dialect import DialectRegistry, UnsupportedDialectError


def validate_sql(sql: str, dialect_name: str) -> list[str]:
    """Parse SQL with sqlglot for the given dialect preset.

    Returns a list of error messages (empty if valid). The check is
    advisory: callers should treat errors as warnings.
    """
    try:
        dialect = DialectRegistry.get(dialect_name)
    except UnsupportedDialectError:
        return [f"Unknown dialect '{dialect_name}' - skipping SQL validation"]

    errors: list[str] = []
    try:
        sqlglot.transpile(sql, read=dialect.sqlglot_dialect)
    except SqlglotError as exc:
        errors.append(str(exc))
    return errors
