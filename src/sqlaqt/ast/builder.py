"""Convenience constructors for array-form and hash-form AST nodes.

These only assemble plain lists and dicts; they perform no validation.
"""

from __future__ import annotations

from typing import Any, Self

from sqlaqt.ast.nodes import Tag


def name(*segments: str) -> list[Any]:
    """Create a (possibly qualified) identifier: ``name("me", "id")``."""
    return [Tag.NAME.value, *segments]


def value(v: Any) -> list[Any]:
    """Create a bound literal value."""
    return [Tag.VALUE.value, v]


def lst(*items: Any) -> list[Any]:
    """Create a list node, e.g. a column list."""
    return [Tag.LIST.value, *items]


def alias(ident: Any, as_: str) -> list[Any]:
    return [Tag.ALIAS.value, ident, as_]


def binop(op: str, lhs: Any, rhs: Any) -> list[Any]:
    """Create a binary operation, e.g. ``binop("==", name("a"), value(1))``."""
    return [op, lhs, rhs]


def eq(lhs: Any, rhs: Any) -> list[Any]:
    return binop("==", lhs, rhs)


def in_(field: Any, *values: Any) -> list[Any]:
    return [Tag.IN.value, field, *values]


def not_in(field: Any, *values: Any) -> list[Any]:
    return [Tag.NOT_IN.value, field, *values]


def and_(*clauses: Any) -> list[Any]:
    return [Tag.AND.value, *clauses]


def or_(*clauses: Any) -> list[Any]:
    return [Tag.OR.value, *clauses]


def true() -> list[Any]:
    return [Tag.TRUE.value]


def false() -> list[Any]:
    return [Tag.FALSE.value]


def asc(expr: Any) -> list[Any]:
    return [Tag.ASC.value, expr]


def desc(expr: Any) -> list[Any]:
    return [Tag.DESC.value, expr]


def join(tablespec: Any, *, on: Any = None, using: Any = None) -> dict[str, Any]:
    """Create a join mapping; exactly one of ``on`` / ``using`` should be given."""
    node: dict[str, Any] = {"type": "join", "tablespec": tablespec}
    if on is not None:
        node["on"] = on
    if using is not None:
        node["using"] = using
    return node


class SelectBuilder:
    """Fluent builder producing a hash-form select node."""

    def __init__(self) -> None:
        self._columns: list[Any] = []
        self._from: Any = None
        self._join: Any = None
        self._where: list[Any] = []
        self._group_by: list[Any] = []
        self._order_by: list[Any] = []

    def select(self, *columns: Any) -> Self:
        self._columns.extend(columns)
        return self

    def from_(self, tablespec: Any) -> Self:
        self._from = tablespec
        return self

    def join(self, tablespec: Any, *, on: Any = None, using: Any = None) -> Self:
        self._join = join(tablespec, on=on, using=using)
        return self

    def where(self, *clauses: Any) -> Self:
        self._where.extend(clauses)
        return self

    def group_by(self, *exprs: Any) -> Self:
        self._group_by.extend(exprs)
        return self

    def order_by(self, expr: Any, desc: bool = False) -> Self:
        self._order_by.append([Tag.DESC.value, expr] if desc else expr)
        return self

    def build(self) -> dict[str, Any]:
        node: dict[str, Any] = {
            "type": "select",
            "columns": lst(*self._columns),
            "from": self._from,
        }
        if self._join is not None:
            node["join"] = self._join
        if self._where:
            node["where"] = list(self._where)
        if self._group_by:
            node["group_by"] = list(self._group_by)
        if self._order_by:
            node["order_by"] = list(self._order_by)
        return node
