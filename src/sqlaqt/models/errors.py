"""Structured validation results for AST shape checks."""

from __future__ import annotations

from pydantic import BaseModel


class RenderIssue(BaseModel):
    """A single shape problem found in an AST node."""

    code: str
    message: str
    path: str | None = None


class ValidationResult(BaseModel):
    """Result of validating a statement node before rendering."""

    valid: bool
    errors: list[RenderIssue] = []

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def failed(cls, *issues: RenderIssue) -> ValidationResult:
        return cls(valid=False, errors=list(issues))
