"""Flattening of boolean WHERE trees into minimally parenthesized infix text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlaqt.ast.nodes import BOOLEAN_GROUPS, Node, is_sequence
from sqlaqt.errors import StructuralError
from sqlaqt.renderer.handlers import render_false, render_true

if TYPE_CHECKING:
    from sqlaqt.renderer.base import RenderPass


def _is_clause(value: Any) -> bool:
    return isinstance(value, Node) or is_sequence(value)


def _as_group(clause: Any) -> tuple[str | None, list[Any]]:
    """Split a clause into (boolean group tag or None, sequence form)."""
    if isinstance(clause, Node):
        if clause.tag in BOOLEAN_GROUPS:
            return clause.tag, [clause.tag, *clause.args]
        return None, [clause]
    head = clause[0] if clause else None
    if isinstance(head, str) and head in BOOLEAN_GROUPS:
        return head, list(clause)
    return None, list(clause)


def recurse_where(pass_: RenderPass, clauses: Any) -> str:
    """Render a sequence of where clauses joined by AND/OR.

    ``clauses`` is either a list of clauses or a single clause. A leading
    ``-and``/``-or`` sets the group's operator; without one the group is an
    AND. A nested group is parenthesized only when its priority is strictly
    greater than the priority of the group containing it.
    """
    if isinstance(clauses, Node):
        clauses = _as_group(clauses)[1]
    if not is_sequence(clauses):
        raise StructuralError(f"where clause must be a sequence, not {clauses!r}")

    priorities = pass_.settings.priorities
    remaining = list(clauses)
    op = "and"

    if remaining and isinstance(remaining[0], str) and remaining[0] in BOOLEAN_GROUPS:
        op = remaining.pop(0)[1:]

    # A single flat clause rather than a list of clauses.
    if remaining and not _is_clause(remaining[0]):
        remaining = [remaining]

    if not remaining:
        return render_true(pass_) if op == "and" else render_false(pass_)

    prio = priorities[op]
    output: list[str] = []
    for clause in remaining:
        if not _is_clause(clause):
            raise StructuralError(f"invalid component in where clause: {clause!r}")
        group, as_seq = _as_group(clause)
        if group is None:
            output.append(pass_.where_component(clause))
            continue
        sub_prio = priorities[group[1:]]
        text = recurse_where(pass_, as_seq)
        output.append(f"({text})" if sub_prio > prio else text)

    return f" {op.upper()} ".join(output)
