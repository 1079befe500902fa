"""Ordered sink for values replaced by placeholders."""

from __future__ import annotations

from typing import Any


class BindAccumulator:
    """Collects bind values in the order their placeholders are emitted.

    One accumulator belongs to exactly one render pass.
    """

    def __init__(self) -> None:
        self._values: list[Any] = []

    def add(self, value: Any) -> None:
        self._values.append(value)

    @property
    def values(self) -> list[Any]:
        """A copy of the collected values."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)
