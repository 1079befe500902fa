"""Expression and clause handlers registered in the dispatch tables.

Every handler takes the active :class:`~sqlaqt.renderer.base.RenderPass` and a
normalized :class:`~sqlaqt.ast.nodes.Node` and returns SQL text.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from sqlaqt.ast.nodes import (
    SORT_DIRECTIONS,
    Node,
    Tag,
    is_array_ast,
    is_node_like,
    is_sequence,
    operands_of,
    tag_of,
)
from sqlaqt.errors import ConfigurationError, StructuralError, UnmappedOperatorError
from sqlaqt.renderer.quoting import render_identifier

if TYPE_CHECKING:
    from sqlaqt.renderer.base import RenderPass

# Portable constant predicates.
TRUE_SQL = "1 = 1"
FALSE_SQL = "0 = 1"


def render_true(pass_: RenderPass, node: Node | None = None) -> str:
    return TRUE_SQL


def render_false(pass_: RenderPass, node: Node | None = None) -> str:
    return FALSE_SQL


def render_list(pass_: RenderPass, node: Node) -> str:
    return pass_.settings.list_separator.join(pass_.dispatch(item) for item in node.args)


def render_alias(pass_: RenderPass, node: Node) -> str:
    ident, as_ = node.get("ident"), node.get("as")
    if ident is None or as_ is None:
        raise StructuralError("alias node requires both 'ident' and 'as'")
    # The alias is emitted verbatim.
    return f"{pass_.dispatch(ident)} AS {as_}"


def render_value(pass_: RenderPass, node: Node) -> str:
    if len(node.args) != 1:
        raise StructuralError(f"value node takes exactly one literal, got {len(node.args)}")
    return pass_.add_bind(node.args[0])


def render_name(pass_: RenderPass, node: Node) -> str:
    settings = pass_.settings
    return render_identifier(
        node.args,
        quote=settings.quote_identifiers,
        quote_chars=settings.quote_chars,
        separator=settings.name_separator,
    )


def render_binop(pass_: RenderPass, node: Node) -> str:
    op = node.tag
    if len(node.args) != 2:
        raise StructuralError(f"binary operator '{op}' takes two operands, got {len(node.args)}")
    token = pass_.settings.binop_mapping.get(op)
    if token is None:
        raise UnmappedOperatorError(op)
    lhs, rhs = node.args
    return f"{pass_.where_component(lhs)} {token} {pass_.where_component(rhs)}"


def render_in(pass_: RenderPass, node: Node) -> str:
    """``field [NOT] IN (v1, v2, ...)``; no values renders the false predicate."""
    if not node.args:
        raise StructuralError(f"'{node.tag}' requires a field to test")
    field, *values = node.args
    if not values:
        return render_false(pass_)
    negation = " NOT" if node.tag == Tag.NOT_IN else ""
    vals = ", ".join(pass_.dispatch(v) for v in values)
    return f"{pass_.where_component(field)}{negation} IN ({vals})"


def render_where(pass_: RenderPass, node: Node) -> str:
    clauses = node.get("where", list(node.args))
    return "WHERE " + pass_.recurse_where(clauses)


def render_join(pass_: RenderPass, node: Node) -> str:
    if node.args:
        raise StructuralError("join must be a mapping with 'tablespec' and 'on' or 'using'")
    if node.get("tablespec") is None:
        raise StructuralError("join requires a 'tablespec'")
    has_on = node.get("on") is not None
    has_using = node.get("using") is not None
    if has_on and has_using:
        raise ConfigurationError("join accepts only one of 'on' or 'using', got both")
    if not (has_on or has_using):
        raise ConfigurationError("No 'on' or 'using' clause passed to join")

    output = "JOIN " + pass_.dispatch(node.get("tablespec"))
    if has_on:
        output += " ON (" + pass_.recurse_where(node.get("on")) + ")"
    else:
        output += " USING (" + pass_.dispatch(node.get("using")) + ")"
    return output


def _items(node: Node, key: str) -> Sequence[Any]:
    items = node.get(key, node.args)
    if not is_sequence(items):
        raise StructuralError(f"'{key}' must be a sequence of expressions")
    return items


def order_by_item(pass_: RenderPass, item: Any) -> str:
    if is_node_like(item) and tag_of(item) in SORT_DIRECTIONS:
        direction, operands = tag_of(item), operands_of(item)
        if len(operands) != 1:
            raise StructuralError(f"'{direction}' takes exactly one expression")
        return f"{pass_.dispatch(operands[0])} {direction[1:].upper()}"
    return pass_.dispatch(item)


def render_order_by(pass_: RenderPass, node: Node) -> str:
    items = _items(node, "order_by")
    return "ORDER BY " + ", ".join(order_by_item(pass_, item) for item in items)


def render_group_by(pass_: RenderPass, node: Node) -> str:
    items = _items(node, "group_by")
    return "GROUP BY " + ", ".join(pass_.dispatch(item) for item in items)


def _as_join(raw: Any) -> Any:
    if isinstance(raw, Mapping):
        return {**raw, "type": "join"}
    if isinstance(raw, Node) and raw.tag == Tag.JOIN:
        return raw
    raise StructuralError("join must be a mapping with 'tablespec' and 'on' or 'using'")


def join_nodes(raw: Any) -> list[Any]:
    """Coerce a select's ``join`` value into a list of join-tagged nodes.

    Accepts a single mapping or a sequence of mappings for several joins.
    Normalized ``-join`` nodes are passed through.
    """
    if isinstance(raw, (Mapping, Node)) or is_array_ast(raw):
        return [_as_join(raw)]
    if is_sequence(raw) and raw:
        return [_as_join(j) for j in raw]
    raise StructuralError("join option is not an AST")
