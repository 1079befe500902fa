"""AST grammar accepted by the renderer."""

from sqlaqt.ast.nodes import Node, Tag, normalize

__all__ = [
    "Node",
    "Tag",
    "normalize",
]
