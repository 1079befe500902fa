"""Renderer configuration loaded from keyword arguments, environment or ``.env``."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PRIORITIES: dict[str, int] = {"and": 10, "or": 50}

DEFAULT_BINOP_MAPPING: dict[str, str] = {
    "==": "=",
    "=": "=",
    "!=": "!=",
    "<>": "<>",
    ">": ">",
    ">=": ">=",
    "<": "<",
    "<=": "<=",
    "like": "LIKE",
    "not_like": "NOT LIKE",
    "ilike": "ILIKE",
    "is": "IS",
    "is_not": "IS NOT",
}


class RenderSettings(BaseSettings):
    """Configuration consumed by :class:`sqlaqt.renderer.Renderer`.

    Every field can be overridden with a ``SQLAQT_``-prefixed environment
    variable (dicts and tuples as JSON), e.g. ``SQLAQT_QUOTE_IDENTIFIERS=true``.
    Instances are frozen; use ``model_copy(update=...)`` to derive variants.
    """

    model_config = SettingsConfigDict(
        env_prefix="SQLAQT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_level: str = "INFO"

    # Identifiers
    quote_identifiers: bool = False
    quote_chars: tuple[str, str] = ('"', '"')
    name_separator: str = "."

    # Expressions
    list_separator: str = ", "
    placeholder: str = "?"

    # Boolean grouping: a child group is parenthesized when its priority
    # is strictly greater than its parent's.
    priorities: dict[str, int] = DEFAULT_PRIORITIES
    binop_mapping: dict[str, str] = DEFAULT_BINOP_MAPPING

    @field_validator("quote_chars", mode="before")
    @classmethod
    def _expand_quote_chars(cls, v: object) -> object:
        """Accept a single quote character (or a 1-item pair) for open == close."""
        if isinstance(v, str):
            return (v, v)
        if isinstance(v, (list, tuple)) and len(v) == 1:
            return (v[0], v[0])
        return v

    @field_validator("priorities")
    @classmethod
    def _require_boolean_groups(cls, v: dict[str, int]) -> dict[str, int]:
        missing = {"and", "or"} - set(v)
        if missing:
            raise ValueError(f"priority table is missing {sorted(missing)}")
        return v
