"""Quoting presets for common databases."""

# Import presets to trigger registration
import sqlaqt.dialect.presets as _presets  # noqa: F401
from sqlaqt.dialect.base import Dialect
from sqlaqt.dialect.registry import DialectRegistry, UnsupportedDialectError

__all__ = [
    "Dialect",
    "DialectRegistry",
    "UnsupportedDialectError",
]
