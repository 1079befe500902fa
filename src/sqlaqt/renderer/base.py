"""Renderer façade: AST in, SQL text plus bind values out."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlaqt.ast.nodes import Node, Tag, is_operation_tag, normalize
from sqlaqt.errors import StructuralError, UnknownOperatorError, UnknownTagError
from sqlaqt.models.errors import RenderIssue
from sqlaqt.renderer.binds import BindAccumulator
from sqlaqt.renderer.dispatch import DispatchTable
from sqlaqt.renderer.tables import GENERIC_TABLE, WHERE_TABLE, build_where_table
from sqlaqt.renderer.where import recurse_where
from sqlaqt.settings import DEFAULT_BINOP_MAPPING, RenderSettings

logger = logging.getLogger("sqlaqt.renderer")


@dataclass(frozen=True)
class RenderResult:
    """Rendered SQL and its positional bind values."""

    sql: str
    binds: list[Any] = field(default_factory=list)


def _to_node(raw: Any, default_tag: str | None = None) -> Node:
    try:
        return normalize(raw, default_tag=default_tag)
    except TypeError as exc:
        raise StructuralError(str(exc)) from exc


class RenderPass:
    """State of a single render call.

    Owns the bind accumulator; handlers recurse back into the pass rather
    than into the shared :class:`Renderer`.
    """

    def __init__(self, renderer: Renderer) -> None:
        self.settings = renderer.settings
        self._generic = renderer.generic_table
        self._where = renderer.where_table
        self.binds = BindAccumulator()

    def dispatch(self, raw: Any, default_tag: str | None = None) -> str:
        """Render any node through the generic table."""
        node = _to_node(raw, default_tag)
        handler = self._generic.lookup(node.tag)
        if handler is None:
            if is_operation_tag(node.tag):
                raise UnknownTagError(node.tag)
            raise UnknownOperatorError(node.tag)
        return handler(self, node)

    def where_component(self, raw: Any) -> str:
        """Render a non-boolean where clause through the WHERE table."""
        node = _to_node(raw)
        handler = self._where.lookup(node.tag)
        if handler is None:
            if is_operation_tag(node.tag):
                raise UnknownTagError(node.tag, context="a where AST")
            raise UnknownOperatorError(node.tag)
        return handler(self, node)

    def recurse_where(self, clauses: Any) -> str:
        return recurse_where(self, clauses)

    def add_bind(self, value: Any) -> str:
        """Record ``value`` and return the placeholder standing in for it."""
        self.binds.add(value)
        return self.settings.placeholder

    def result(self, sql: str) -> RenderResult:
        return RenderResult(sql=sql, binds=self.binds.values)


class Renderer:
    """Renders AST nodes to SQL.

    A renderer holds only configuration and dispatch tables, so one instance
    can be shared by concurrent callers; every ``render*`` call starts a
    fresh :class:`RenderPass` with its own bind values.

    ``generic_table`` / ``where_table`` replace the built-in tables. Derive
    them with :meth:`DispatchTable.layered` to add or override handlers.
    """

    def __init__(
        self,
        settings: RenderSettings | None = None,
        *,
        generic_table: DispatchTable | None = None,
        where_table: DispatchTable | None = None,
    ) -> None:
        self.settings = settings or RenderSettings()
        self.generic_table = generic_table if generic_table is not None else GENERIC_TABLE
        if where_table is not None:
            self.where_table = where_table
        elif generic_table is None and self.settings.binop_mapping == DEFAULT_BINOP_MAPPING:
            self.where_table = WHERE_TABLE
        else:
            self.where_table = build_where_table(
                self.generic_table, self.settings.binop_mapping
            )

    def _run(self, raw: Any, default_tag: str | None = None) -> RenderResult:
        node = _to_node(raw, default_tag)
        if default_tag is not None and node.tag != default_tag:
            raise StructuralError(
                f"cannot render a '{node.tag}' node as '{default_tag}'",
                issues=[
                    RenderIssue(
                        code="WRONG_TAG",
                        message=f"type {node.tag} conflicts with {default_tag}",
                        path="type",
                    )
                ],
            )
        pass_ = RenderPass(self)
        sql = pass_.dispatch(node)
        logger.debug("Rendered %s with %d bind value(s)", _describe(raw), len(pass_.binds))
        return pass_.result(sql)

    def render(self, ast: Any) -> RenderResult:
        """Render any array-form or typed hash-form node."""
        return self._run(ast)

    def render_select(self, ast: Any) -> RenderResult:
        return self._run(ast, default_tag=Tag.SELECT)

    def render_insert(self, ast: Any) -> RenderResult:
        return self._run(ast, default_tag=Tag.INSERT)

    def render_update(self, ast: Any) -> RenderResult:
        return self._run(ast, default_tag=Tag.UPDATE)

    def render_delete(self, ast: Any) -> RenderResult:
        return self._run(ast, default_tag=Tag.DELETE)

    def render_expression(self, ast: Any) -> RenderResult:
        """Render a single predicate or expression through the WHERE table."""
        pass_ = RenderPass(self)
        return pass_.result(pass_.where_component(ast))

    def render_where(self, clauses: Any) -> RenderResult:
        """Render a bare where-shaped sequence, prefixed with ``WHERE``."""
        pass_ = RenderPass(self)
        sql = "WHERE " + pass_.recurse_where(clauses)
        logger.debug("Rendered where clause with %d bind value(s)", len(pass_.binds))
        return pass_.result(sql)


def _describe(raw: Any) -> str:
    if isinstance(raw, Node):
        return raw.tag
    if isinstance(raw, dict):
        return str(raw.get("type", "mapping"))
    if isinstance(raw, (list, tuple)) and raw:
        return str(raw[0])
    return type(raw).__name__
