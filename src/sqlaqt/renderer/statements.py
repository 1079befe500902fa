"""Top-level statement handlers: SELECT, INSERT, UPDATE, DELETE.

Each handler validates its node first and then assembles clauses in a fixed
order. Optional clauses are appended only when their key is present.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlaqt.ast.nodes import Node, Tag
from sqlaqt.errors import StructuralError
from sqlaqt.models.errors import ValidationResult
from sqlaqt.renderer.handlers import join_nodes, render_group_by, render_order_by
from sqlaqt.renderer.validation import (
    validate_delete,
    validate_insert,
    validate_select,
    validate_update,
)

if TYPE_CHECKING:
    from sqlaqt.renderer.base import RenderPass


def _check(result: ValidationResult) -> None:
    if not result.valid:
        raise StructuralError.from_issues(result.errors)


def _where_clause(pass_: RenderPass, node: Node) -> list[str]:
    if "where" not in node:
        return []
    return ["WHERE " + pass_.recurse_where(node.get("where"))]


def render_select(pass_: RenderPass, node: Node) -> str:
    _check(validate_select(node))

    output = [
        "SELECT",
        pass_.dispatch(node.get("columns")),
        "FROM",
        pass_.dispatch(node.get("from")),
    ]
    if "join" in node:
        output.extend(pass_.dispatch(j) for j in join_nodes(node.get("join")))
    output.extend(_where_clause(pass_, node))
    if "group_by" in node:
        group_by = Node(tag=Tag.GROUP_BY, args=tuple(node.get("group_by")))
        output.append(render_group_by(pass_, group_by))
    if "order_by" in node:
        order_by = Node(tag=Tag.ORDER_BY, args=tuple(node.get("order_by")))
        output.append(render_order_by(pass_, order_by))

    return " ".join(output)


def render_insert(pass_: RenderPass, node: Node) -> str:
    _check(validate_insert(node))

    output = "INSERT INTO " + pass_.dispatch(node.get("into"))
    if "columns" in node:
        output += " (" + pass_.dispatch(node.get("columns")) + ")"
    return output + " VALUES (" + pass_.dispatch(node.get("values")) + ")"


def render_update(pass_: RenderPass, node: Node) -> str:
    _check(validate_update(node))

    assignments = pass_.settings.list_separator.join(
        f"{pass_.dispatch(target)} = {pass_.dispatch(value)}"
        for target, value in node.get("set")
    )
    output = ["UPDATE", pass_.dispatch(node.get("table")), "SET", assignments]
    output.extend(_where_clause(pass_, node))
    return " ".join(output)


def render_delete(pass_: RenderPass, node: Node) -> str:
    _check(validate_delete(node))

    output = ["DELETE FROM", pass_.dispatch(node.get("from"))]
    output.extend(_where_clause(pass_, node))
    return " ".join(output)
