"""AST → SQL rendering."""

from sqlaqt.renderer.base import Renderer, RenderPass, RenderResult
from sqlaqt.renderer.dispatch import DispatchTable, Handler
from sqlaqt.renderer.tables import GENERIC_TABLE, WHERE_TABLE, build_where_table

__all__ = [
    "GENERIC_TABLE",
    "WHERE_TABLE",
    "DispatchTable",
    "Handler",
    "RenderPass",
    "RenderResult",
    "Renderer",
    "build_where_table",
]
