"""Abstract base dialect: a named quoting preset for the generic renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlaqt.settings import RenderSettings


class Dialect(ABC):
    """Quoting configuration for one database family.

    Dialects do not change how nodes are rendered; they only supply the
    identifier quote characters and the sqlglot dialect used to check output.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def quote_chars(self) -> tuple[str, str]: ...

    @property
    def sqlglot_dialect(self) -> str | None:
        """sqlglot dialect identifier, or None for sqlglot's default."""
        return self.name

    def render_settings(
        self, base: RenderSettings | None = None, quote: bool = True
    ) -> RenderSettings:
        """Return ``base`` with this dialect's quoting applied."""
        base = base or RenderSettings()
        return base.model_copy(
            update={"quote_identifiers": quote, "quote_chars": self.quote_chars}
        )
