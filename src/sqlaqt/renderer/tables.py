"""The generic and WHERE dispatch tables."""

from __future__ import annotations

from collections.abc import Iterable

from sqlaqt.ast.nodes import Tag
from sqlaqt.renderer import handlers, statements
from sqlaqt.renderer.dispatch import DispatchTable
from sqlaqt.settings import DEFAULT_BINOP_MAPPING

GENERIC_TABLE = DispatchTable(
    {
        Tag.SELECT: statements.render_select,
        Tag.INSERT: statements.render_insert,
        Tag.UPDATE: statements.render_update,
        Tag.DELETE: statements.render_delete,
        Tag.WHERE: handlers.render_where,
        Tag.ORDER_BY: handlers.render_order_by,
        Tag.GROUP_BY: handlers.render_group_by,
        Tag.JOIN: handlers.render_join,
        Tag.LIST: handlers.render_list,
        Tag.ALIAS: handlers.render_alias,
        Tag.NAME: handlers.render_name,
        Tag.VALUE: handlers.render_value,
        Tag.TRUE: handlers.render_true,
        Tag.FALSE: handlers.render_false,
    }
)


def build_where_table(base: DispatchTable, binops: Iterable[str]) -> DispatchTable:
    """Layer the WHERE-only entries and one binop entry per operator onto ``base``."""
    overrides = {
        Tag.IN: handlers.render_in,
        Tag.NOT_IN: handlers.render_in,
        Tag.VALUE: handlers.render_value,
        Tag.NAME: handlers.render_name,
        Tag.TRUE: handlers.render_true,
        Tag.FALSE: handlers.render_false,
    }
    overrides.update({op: handlers.render_binop for op in binops})
    return base.layered(overrides)


WHERE_TABLE = build_where_table(GENERIC_TABLE, DEFAULT_BINOP_MAPPING)
