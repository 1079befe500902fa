"""Canonical AST node and normalization of the array-form / hash-form grammar.

Callers build statements out of plain lists, tuples and dicts:

* array-form: ``["-name", "me", "id"]`` -- a tag followed by positional operands
* hash-form: ``{"type": "join", "tablespec": ..., "on": ...}``

Both are turned into a single frozen :class:`Node` before dispatch so that
renderers only ever see one shape.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any

# Marker that distinguishes operation tags from bare-word operators.
TAG_MARKER = "-"

# Discriminant key of a hash-form node.
TYPE_KEY = "type"


class Tag(StrEnum):
    SELECT = "-select"
    INSERT = "-insert"
    UPDATE = "-update"
    DELETE = "-delete"
    WHERE = "-where"
    ORDER_BY = "-order_by"
    GROUP_BY = "-group_by"
    JOIN = "-join"
    LIST = "-list"
    ALIAS = "-alias"
    NAME = "-name"
    VALUE = "-value"
    IN = "-in"
    NOT_IN = "-not_in"
    TRUE = "-true"
    FALSE = "-false"
    AND = "-and"
    OR = "-or"
    ASC = "-asc"
    DESC = "-desc"


BOOLEAN_GROUPS = frozenset({Tag.AND, Tag.OR})
SORT_DIRECTIONS = frozenset({Tag.ASC, Tag.DESC})


def _frozen(mapping: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class Node:
    """A normalized AST node.

    ``args`` holds positional operands (array-form), ``fields`` holds named
    clause fields (hash-form). Which of the two a handler reads depends on
    its tag.
    """

    tag: str
    args: tuple[Any, ...] = ()
    fields: Mapping[str, Any] = field(default_factory=_frozen)

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.fields


def is_operation_tag(tag: str) -> bool:
    """Return True for ``-tag`` style operation tags, False for bare words."""
    return tag.startswith(TAG_MARKER)


def is_array_ast(value: Any) -> bool:
    """An array-form node: a non-empty list/tuple whose head is a string tag."""
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and isinstance(value[0], str)
    )


def is_hash_ast(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_node_like(value: Any) -> bool:
    """An array-form AST or an already normalized :class:`Node`."""
    return isinstance(value, Node) or is_array_ast(value)


def tag_of(value: Any) -> str | None:
    """Return the tag of an array-form AST or a :class:`Node`, else None."""
    if isinstance(value, Node):
        return value.tag
    if is_array_ast(value):
        return value[0]
    return None


def operands_of(value: Any) -> tuple[Any, ...]:
    """Positional operands of an array-form AST or a :class:`Node`."""
    if isinstance(value, Node):
        return value.args
    return tuple(value[1:])


def is_sequence(value: Any) -> bool:
    """A list or tuple (strings are not treated as sequences here)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def as_tag(type_name: str) -> str:
    if not isinstance(type_name, str):
        raise TypeError(f"node type must be a string, got {type_name!r}")
    return type_name if is_operation_tag(type_name) else TAG_MARKER + type_name


def normalize(raw: Any, default_tag: str | None = None) -> Node:
    """Convert an array-form or hash-form node into a :class:`Node`.

    ``default_tag`` supplies the discriminant for a hash-form node that has
    none of its own (for instance a bare join mapping). The input is never
    mutated.

    Raises ``TypeError`` if ``raw`` is not an AST at all; callers turn that
    into a structural error with context.
    """
    if isinstance(raw, Node):
        return raw

    if is_array_ast(raw):
        tag, *operands = raw
        if tag == Tag.NAME and len(operands) == 1 and is_sequence(operands[0]):
            operands = list(operands[0])
        if tag == Tag.ALIAS:
            ident = operands[0] if operands else None
            as_ = operands[1] if len(operands) > 1 else None
            return Node(tag=tag, fields=_frozen({"ident": ident, "as": as_}))
        return Node(tag=tag, args=tuple(operands))

    if is_hash_ast(raw):
        fields = {k: v for k, v in raw.items() if k != TYPE_KEY}
        type_name = raw.get(TYPE_KEY) or default_tag
        if type_name is None:
            raise TypeError(f"hash-form node has no '{TYPE_KEY}' key: {sorted(raw)}")
        return Node(tag=as_tag(type_name), fields=_frozen(fields))

    raise TypeError(f"not an AST node: {raw!r}")
