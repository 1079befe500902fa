"""Pydantic result models for sqlaqt."""

from sqlaqt.models.errors import RenderIssue, ValidationResult

__all__ = [
    "RenderIssue",
    "ValidationResult",
]
