"""Shape checks run at the entry of each statement renderer.

Validators never raise: they return a :class:`ValidationResult` and the
caller decides how to fail.
"""

from __future__ import annotations

from sqlaqt.ast.nodes import Node, Tag, is_node_like, is_sequence, operands_of, tag_of
from sqlaqt.models.errors import RenderIssue, ValidationResult


def _missing(key: str, statement: str) -> RenderIssue:
    return RenderIssue(
        code="MISSING_CLAUSE",
        message=f"{key} key is required (and must be an AST) to {statement}",
        path=key,
    )


def _not_a_list(key: str, tag: str) -> RenderIssue:
    return RenderIssue(
        code="WRONG_TAG",
        message=f"{key} key should be a -list AST, not {tag}",
        path=key,
    )


def _require_arrays(node: Node, keys: tuple[str, ...], statement: str) -> list[RenderIssue]:
    return [_missing(k, statement) for k in keys if not is_node_like(node.get(k))]


def _require_list(node: Node, key: str) -> list[RenderIssue]:
    tag = tag_of(node.get(key))
    if tag is not None and tag != Tag.LIST:
        return [_not_a_list(key, tag)]
    return []


def _result(issues: list[RenderIssue]) -> ValidationResult:
    return ValidationResult.failed(*issues) if issues else ValidationResult.ok()


def validate_select(node: Node) -> ValidationResult:
    issues = _require_arrays(node, ("columns", "from"), "select")
    issues += _require_list(node, "columns")
    for key in ("where", "group_by", "order_by"):
        value = node.get(key)
        if key in node and not (is_sequence(value) or (key == "where" and isinstance(value, Node))):
            issues.append(
                RenderIssue(code="WRONG_SHAPE", message=f"{key} must be a sequence", path=key)
            )
    return _result(issues)


def validate_insert(node: Node) -> ValidationResult:
    issues = _require_arrays(node, ("into", "values"), "insert")
    issues += _require_list(node, "values")
    if "columns" in node:
        if not is_node_like(node.get("columns")):
            issues.append(_missing("columns", "insert"))
        else:
            issues += _require_list(node, "columns")
    if not issues and "columns" in node:
        n_columns = len(operands_of(node.get("columns")))
        n_values = len(operands_of(node.get("values")))
        if n_columns != n_values:
            issues.append(
                RenderIssue(
                    code="ARITY_MISMATCH",
                    message=f"insert has {n_columns} columns but {n_values} values",
                    path="values",
                )
            )
    return _result(issues)


def validate_update(node: Node) -> ValidationResult:
    issues = _require_arrays(node, ("table",), "update")
    assignments = node.get("set")
    if not is_sequence(assignments) or not assignments:
        issues.append(
            RenderIssue(
                code="MISSING_CLAUSE",
                message="set key is required (a non-empty sequence of pairs) to update",
                path="set",
            )
        )
    else:
        for i, pair in enumerate(assignments):
            if not (is_sequence(pair) and len(pair) == 2 and all(map(is_node_like, pair))):
                issues.append(
                    RenderIssue(
                        code="WRONG_SHAPE",
                        message=f"set[{i}] must be a (name, value) pair of ASTs",
                        path=f"set[{i}]",
                    )
                )
    return _result(issues)


def validate_delete(node: Node) -> ValidationResult:
    return _result(_require_arrays(node, ("from",), "delete"))
