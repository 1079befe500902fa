"""Tag → handler lookup tables."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlaqt.ast.nodes import Node
    from sqlaqt.renderer.base import RenderPass

Handler = Callable[["RenderPass", "Node"], str]


class DispatchTable:
    """Immutable mapping from operation tag to handler.

    Tables are built once and shared between renders. Specialized tables are
    derived with :meth:`layered`, which never touches the base table.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Handler] | None = None) -> None:
        self._entries: Mapping[str, Handler] = MappingProxyType(dict(entries or {}))

    def lookup(self, tag: str) -> Handler | None:
        """Return the handler registered for ``tag``, or None."""
        return self._entries.get(tag)

    def layered(self, overrides: Mapping[str, Handler]) -> DispatchTable:
        """Return a new table with ``overrides`` added on top of this one."""
        return DispatchTable({**self._entries, **overrides})

    def tags(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, tag: object) -> bool:
        return tag in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DispatchTable({self.tags()!r})"
