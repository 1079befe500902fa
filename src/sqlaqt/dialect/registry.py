"""Named dialect presets, looked up by the CLI and the sqlglot check."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from sqlaqt.dialect.base import Dialect
from sqlaqt.errors import ConfigurationError
from sqlaqt.settings import RenderSettings

D = TypeVar("D", bound=Dialect)


class UnsupportedDialectError(ConfigurationError):
    """No preset is registered under the requested name or alias."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.dialect_name = name
        self.available = available
        super().__init__(f"Unsupported dialect '{name}'. Available: {', '.join(available)}")


class DialectRegistry:
    """Shared preset instances, keyed by canonical name.

    Lookups are case-insensitive and also accept the aliases a preset was
    registered with (``postgresql`` for ``postgres``, ``mssql`` for ``tsql``).
    """

    _presets: dict[str, Dialect] = {}
    _aliases: dict[str, str] = {}

    @classmethod
    def register(cls, *aliases: str) -> Callable[[type[D]], type[D]]:
        """Class decorator factory: ``@DialectRegistry.register("pg", ...)``."""

        def decorator(dialect_class: type[D]) -> type[D]:
            preset = dialect_class()
            cls._presets[preset.name] = preset
            for alias in aliases:
                cls._aliases[alias.lower()] = preset.name
            return dialect_class

        return decorator

    @classmethod
    def canonical_name(cls, name: str) -> str:
        key = name.lower()
        return cls._aliases.get(key, key)

    @classmethod
    def get(cls, name: str) -> Dialect:
        preset = cls._presets.get(cls.canonical_name(name))
        if preset is None:
            raise UnsupportedDialectError(name, available=cls.available())
        return preset

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._presets)

    @classmethod
    def settings_for(
        cls, name: str, base: RenderSettings | None = None, quote: bool = True
    ) -> RenderSettings:
        """Shortcut for ``get(name).render_settings(base, quote)``."""
        return cls.get(name).render_settings(base, quote=quote)
