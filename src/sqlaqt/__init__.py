"""Render abstract query trees to SQL text and bind values."""

from sqlaqt.errors import (
    ConfigurationError,
    RenderError,
    StructuralError,
    UnknownOperatorError,
    UnknownTagError,
    UnmappedOperatorError,
)
from sqlaqt.renderer import DispatchTable, Renderer, RenderResult
from sqlaqt.settings import RenderSettings

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DispatchTable",
    "RenderError",
    "RenderResult",
    "RenderSettings",
    "Renderer",
    "StructuralError",
    "UnknownOperatorError",
    "UnknownTagError",
    "UnmappedOperatorError",
    "__version__",
]
